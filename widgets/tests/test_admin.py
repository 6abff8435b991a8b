from django.test import TestCase, override_settings

from widgets.admin import WidgetInstanceAdminForm


class WidgetInstanceAdminFormTests(TestCase):
    def test_widget_type_choices_come_from_registry(self):
        form = WidgetInstanceAdminForm()

        choices = dict(form.fields["widget_type"].choices)
        self.assertEqual(set(choices), {"contact", "hours"})

    @override_settings(WIDGETS_AREAS={"sidebar": {}, "footer": {}})
    def test_area_choices_come_from_settings(self):
        form = WidgetInstanceAdminForm()

        self.assertEqual([slug for slug, _label in form.fields["area"].choices], ["sidebar", "footer"])

    @override_settings(WIDGETS_AREAS={"sidebar": {}})
    def test_rejects_unknown_widget_type(self):
        form = WidgetInstanceAdminForm(data={"widget_type": "calendar", "area": "sidebar", "order": 0, "is_active": "on"})

        self.assertFalse(form.is_valid())
        self.assertIn("widget_type", form.errors)

    @override_settings(WIDGETS_AREAS={"sidebar": {}})
    def test_saves_new_instance_with_empty_config(self):
        form = WidgetInstanceAdminForm(data={"widget_type": "hours", "area": "sidebar", "order": 2, "is_active": "on"})

        self.assertTrue(form.is_valid(), form.errors)
        instance = form.save()

        self.assertEqual(instance.widget_type, "hours")
        self.assertEqual(instance.config, {})
