from django.test import SimpleTestCase

from widgets.fields import FieldNaming, merge_fields
from widgets.rendering import (
    render_display_field,
    render_form_field,
    render_form_input,
    render_form_select,
    render_form_textarea,
)


def make_field(key="phone", value="", **schema):
    instance = {key: {"value": value}} if value else {}
    return merge_fields(instance, {key: schema}, FieldNaming("contact", 1))[key]


class FormInputTests(SimpleTestCase):
    def test_wrapper_classes_label_and_handle(self):
        html = render_form_input(make_field(value="555", label="Phone:", type="tel"))

        self.assertTrue(html.startswith('<p class="tel phone">'))
        self.assertIn(' <label for="widget-contact-1-phone" title="">Phone:</label>', html)
        self.assertIn('name="widget-contact[1][phone][value]"', html)
        self.assertIn('value="555"', html)
        self.assertIn('class="widgets-sortable-handle"', html)
        self.assertTrue(html.endswith("</p>"))
        self.assertLess(html.index("<label"), html.index("<input"))

    def test_label_after_control(self):
        html = render_form_input(make_field(label="Show?", label_after=True))

        self.assertIn('class="text phone label-after"', html)
        self.assertGreater(html.index("<label"), html.index("<input"))

    def test_not_sortable_has_no_handle(self):
        html = render_form_input(make_field(sortable=False))

        self.assertIn('class="text phone not-sortable"', html)
        self.assertNotIn("widgets-sortable-handle", html)
        self.assertNotIn("<span>", html)

    def test_attribute_values_are_escaped(self):
        html = render_form_input(make_field(value='"><script>alert(1)</script>', placeholder="<b>"))

        self.assertNotIn("<script>", html)
        self.assertIn('value="&quot;&gt;&lt;script&gt;alert(1)&lt;/script&gt;"', html)
        self.assertIn('placeholder="&lt;b&gt;"', html)

    def test_attribute_values_go_through_field_escaper(self):
        html = render_form_input(make_field(value="hello", escaper=lambda value: str(value).upper()))

        self.assertIn('value="HELLO"', html)
        self.assertIn('id="WIDGET-CONTACT-1-PHONE"', html)

    def test_identity_escaper_still_autoescapes(self):
        html = render_form_input(make_field(value='a"b', escaper=lambda value: value))

        self.assertIn('value="a&quot;b"', html)

    def test_extra_attributes(self):
        html = render_form_input(make_field(atts={"maxlength": 20, "required": True}))

        self.assertIn(' maxlength="20" required', html)

    def test_checkbox_checked_when_yes(self):
        html = render_form_input(make_field("labels", value="yes", type="checkbox"))

        self.assertIn('type="checkbox" value="yes"', html)
        self.assertIn(" checked>", html)

    def test_checkbox_unchecked_when_no(self):
        html = render_form_input(make_field("labels", value="no", type="checkbox", default="yes"))

        self.assertNotIn(" checked", html)

    def test_checkbox_falls_back_to_default(self):
        html = render_form_input(make_field("labels", type="checkbox", default="yes"))

        self.assertIn(" checked>", html)


class FormSelectTests(SimpleTestCase):
    def test_loose_equality_preselects(self):
        field = make_field("size", value="2", select_options={1: "One", 2: "Two"})

        html = render_form_select(field)

        self.assertIn('<option value="1">One</option>', html)
        self.assertIn('<option value="2" selected>Two</option>', html)

    def test_strict_compare_needs_same_type(self):
        field = make_field("size", value="2", select_options={1: "One", 2: "Two"}, strict_compare=True)

        self.assertNotIn("selected", render_form_select(field))

    def test_strict_compare_matches_same_value(self):
        field = make_field("size", value="b", select_options={"a": "A", "b": "B"}, strict_compare=True)

        self.assertIn('<option value="b" selected>B</option>', render_form_select(field))

    def test_empty_options(self):
        html = render_form_select(make_field("size"))

        self.assertIn('autocomplete="off"></select>', html)


class FormTextareaTests(SimpleTestCase):
    def test_value_escaped_inside_textarea(self):
        html = render_form_textarea(make_field("address", value="1 Main St\n<Suite 2>", type="textarea"))

        self.assertIn(">1 Main St\n&lt;Suite 2&gt;</textarea>", html)
        self.assertTrue(html.startswith('<p class="textarea address">'))


class DispatchTests(SimpleTestCase):
    def test_form_callback_by_name(self):
        html = render_form_field(make_field("address", type="textarea", form_callback="render_form_textarea"))

        self.assertIn("<textarea", html)

    def test_unknown_form_callback_renders_input(self):
        html = render_form_field(make_field(form_callback="render_form_missing"))

        self.assertIn("<input", html)

    def test_callable_form_callback(self):
        html = render_form_field(make_field(form_callback=lambda field: f"custom:{field['key']}"))

        self.assertEqual(html, "custom:phone")


class DisplayTests(SimpleTestCase):
    def test_value_item(self):
        field = make_field(value="555 <1234>", label="Phone:")

        html = render_display_field(field, {"phone": field})

        self.assertEqual(html, '<li class="phone"><div>555 &lt;1234&gt;</div></li>')

    def test_labels_shown_when_labels_checkbox_on(self):
        field = make_field(value="555", label="Phone:")
        labels = make_field("labels", value="yes", type="checkbox")

        html = render_display_field(field, {"phone": field, "labels": labels})

        self.assertIn("<strong>Phone:</strong><br>", html)

    def test_email_link(self):
        field = make_field("email", value="hi@example.com", display_callback="render_display_email")

        html = render_display_field(field, {})

        self.assertIn('<a href="mailto:hi@example.com">hi@example.com</a>', html)

    def test_linebreaks(self):
        field = make_field("address", value="1 Main St\nSpringfield", display_callback="render_display_linebreaks")

        self.assertIn("1 Main St<br>Springfield", render_display_field(field, {}))

    def test_markdown_escapes_html(self):
        field = make_field("notes", value="**Parking** <script>x</script>", display_callback="render_display_markdown")

        html = render_display_field(field, {})

        self.assertIn("<strong>Parking</strong>", html)
        self.assertNotIn("<script>", html)

    def test_select_shows_option_label(self):
        field = make_field(
            "appointments",
            value="required",
            select_options={"": "Walk-ins", "required": "By appointment only"},
            display_callback="render_display_select",
        )

        self.assertIn("By appointment only", render_display_field(field, {}))
