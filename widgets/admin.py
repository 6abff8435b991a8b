from django import forms
from django.conf import settings
from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from .models import WidgetInstance


class WidgetInstanceAdminForm(forms.ModelForm):
    widget_type = forms.ChoiceField(label="Widget type", choices=[])
    area = forms.ChoiceField(label="Area", choices=[])

    class Meta:
        model = WidgetInstance
        fields = ["widget_type", "area", "order", "is_active"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        from core.plugins import registry
        self.fields["widget_type"].choices = registry.widget_choices()
        self.fields["area"].choices = [(slug, slug) for slug in getattr(settings, "WIDGETS_AREAS", {})]


@admin.register(WidgetInstance)
class WidgetInstanceAdmin(admin.ModelAdmin):
    form = WidgetInstanceAdminForm
    list_display = ("widget_type", "area", "order", "is_active", "updated_at", "edit_link")
    list_filter = ("area", "widget_type", "is_active")
    readonly_fields = ("updated_at",)

    @admin.display(description="Fields")
    def edit_link(self, obj):
        return format_html('<a href="{}">Edit fields</a>', reverse("widgets:edit", args=[obj.pk]))
