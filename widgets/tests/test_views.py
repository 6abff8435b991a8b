from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.test import TestCase
from django.urls import reverse

from widgets.models import WidgetInstance


class WidgetEditViewTests(TestCase):
    def setUp(self):
        super().setUp()
        self.staff = get_user_model().objects.create_user(
            username="editor",
            email="editor@example.com",
            password="password",
            is_staff=True,
        )
        self.reader = get_user_model().objects.create_user(
            username="reader",
            email="reader@example.com",
            password="password",
        )
        self.instance = WidgetInstance.objects.create(
            widget_type="contact",
            area="sidebar",
            config={"title": "Contact", "phone": {"value": "555", "order": 1}},
        )
        self.url = reverse("widgets:edit", args=[self.instance.pk])
        self.prefix = f"widget-contact[{self.instance.pk}]"

    def test_requires_staff(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse("admin:login"), response["Location"])

        self.client.force_login(self.reader)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 302)

    def test_get_renders_form(self):
        self.client.force_login(self.staff)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, f'id="widget-contact-{self.instance.pk}-phone"')
        self.assertContains(response, 'value="555"')
        self.assertContains(response, "widgets/js/admin.js")

    def test_post_saves_sanitized_config(self):
        self.client.force_login(self.staff)

        response = self.client.post(
            self.url,
            {
                f"{self.prefix}[title][value]": "Reach us",
                f"{self.prefix}[email][value]": "hi@example.com",
                f"{self.prefix}[phone][value]": "<b>555-1234</b>",
                f"{self.prefix}[labels][value]": "yes",
            },
        )

        self.assertRedirects(response, self.url)
        self.instance.refresh_from_db()
        self.assertEqual(
            self.instance.config,
            {
                "title": "Reach us",
                "email": {"value": "hi@example.com", "order": 1},
                "phone": {"value": "555-1234", "order": 2},
                "labels": {"value": "yes", "order": 3},
                "map": {"value": "no", "order": 4},
            },
        )
        messages = [str(message) for message in get_messages(response.wsgi_request)]
        self.assertEqual(messages, ["Contact widget saved."])

    def test_post_replaces_previous_config(self):
        self.client.force_login(self.staff)

        self.client.post(self.url, {f"{self.prefix}[fax][value]": "777"})

        self.instance.refresh_from_db()
        self.assertNotIn("phone", self.instance.config)
        self.assertEqual(self.instance.config["fax"], {"value": "777", "order": 1})

    def test_post_hours(self):
        instance = WidgetInstance.objects.create(widget_type="hours", area="sidebar")
        prefix = f"widget-hours[{instance.pk}]"
        self.client.force_login(self.staff)

        self.client.post(
            reverse("widgets:edit", args=[instance.pk]),
            {
                f"{prefix}[title][value]": "Hours",
                f"{prefix}[hours][value][monday][open][1]": "9:00 AM",
                f"{prefix}[hours][value][monday][closed][1]": "5:00 PM",
                f"{prefix}[hours][value][sunday][not_open]": "1",
            },
        )

        instance.refresh_from_db()
        self.assertEqual(instance.config["title"], "Hours")
        self.assertEqual(
            instance.config["hours"]["value"],
            {
                "monday": {"not_open": False, "open": ["9:00 AM"], "closed": ["5:00 PM"]},
                "sunday": {"not_open": True, "open": [], "closed": []},
            },
        )

    def test_unknown_widget_type_is_404(self):
        instance = WidgetInstance.objects.create(widget_type="retired", area="sidebar")
        self.client.force_login(self.staff)

        response = self.client.get(reverse("widgets:edit", args=[instance.pk]))

        self.assertEqual(response.status_code, 404)

    def test_missing_instance_is_404(self):
        self.client.force_login(self.staff)

        response = self.client.get(reverse("widgets:edit", args=[self.instance.pk + 100]))

        self.assertEqual(response.status_code, 404)
