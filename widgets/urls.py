from django.urls import path

from . import views

app_name = "widgets"

urlpatterns = [
    path("<int:pk>/edit/", views.widget_edit, name="edit"),
]
