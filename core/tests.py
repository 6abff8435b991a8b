from django.test import SimpleTestCase

from core.hooks import FilterRegistry
from core.plugins import BasePlugin, BaseWidget, PluginRegistry, registry
from widgets.widget_types import ContactWidget, HoursWidget


class FilterRegistryTests(SimpleTestCase):
    def setUp(self):
        self.filters = FilterRegistry()

    def test_returns_value_without_filters(self):
        self.assertEqual(self.filters.apply_filters("title", "Contact"), "Contact")

    def test_filters_chain_in_priority_order(self):
        self.filters.add_filter("title", lambda value: value + "b", priority=20)
        self.filters.add_filter("title", lambda value: value + "a")

        self.assertEqual(self.filters.apply_filters("title", ""), "ab")

    def test_extra_arguments_are_passed(self):
        self.filters.add_filter("title", lambda value, suffix: value + suffix)

        self.assertEqual(self.filters.apply_filters("title", "a", "!"), "a!")

    def test_remove_filter(self):
        def upper(value):
            return value.upper()

        self.filters.add_filter("title", upper)

        self.assertTrue(self.filters.remove_filter("title", upper))
        self.assertFalse(self.filters.remove_filter("title", upper))
        self.assertEqual(self.filters.apply_filters("title", "a"), "a")


class _EchoWidget(BaseWidget):
    slug = "echo"
    label = "Echo"

    def render(self, config, request=None, args=None):
        return str(config)


class _EchoPlugin(BasePlugin):
    name = "echo"

    def get_widget_types(self):
        return [_EchoWidget]


class PluginRegistryTests(SimpleTestCase):
    def test_register_and_lookup(self):
        plugins = PluginRegistry()
        plugins.register(_EchoPlugin())

        self.assertIs(plugins.get_widget_type("echo"), _EchoWidget)
        self.assertIsNone(plugins.get_widget_type("missing"))
        self.assertEqual(plugins.widget_choices(), [("echo", "Echo")])

    def test_base_widget_defaults(self):
        widget = _EchoWidget()

        self.assertEqual(widget.form({}), "")
        self.assertEqual(widget.update({"a": 1}, {}), {"a": 1})

    def test_widgets_app_registers_its_types(self):
        self.assertIs(registry.get_widget_type("contact"), ContactWidget)
        self.assertIs(registry.get_widget_type("hours"), HoursWidget)
        self.assertIn("contact", dict(registry.widget_choices()))
