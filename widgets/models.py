from django.db import models


class WidgetInstance(models.Model):
    """One placed widget. ``config`` holds the saved field values."""

    widget_type = models.CharField(max_length=64)
    area = models.CharField(max_length=64)
    order = models.PositiveIntegerField(default=0)
    config = models.JSONField(default=dict, blank=True)
    is_active = models.BooleanField(default=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["area", "order", "pk"]

    def __str__(self):
        return f"{self.widget_type} in {self.area} (order={self.order})"

    @property
    def widget_id(self) -> str:
        return f"{self.widget_type}-{self.pk}"

    def get_widget_class(self):
        from core.plugins import registry

        return registry.get_widget_type(self.widget_type)
