from core.plugins import BasePlugin


class WidgetsPlugin(BasePlugin):
    name = "widgets"
    label = "Contact widgets"
    description = "Contact details and business hours for sidebar widget areas."

    def get_widget_types(self):
        from .widget_types import ContactWidget, HoursWidget
        return [ContactWidget, HoursWidget]
