from __future__ import annotations

from django.utils.translation import gettext_lazy as _

from .base import FieldWidget
from .hours import default_days, sanitize_hours
from .rendering import checkbox_on, render_display_map
from .sanitizers import (
    sanitize_email,
    sanitize_phone,
    sanitize_textarea_field,
    sanitize_yes_no,
)


class ContactWidget(FieldWidget):
    slug = "contact"
    label = _("Contact")
    description = _("Display your contact information.")
    fields = {
        "title": {
            "label": _("Title:"),
            "description": _("The title of the widget."),
            "sortable": False,
        },
        "email": {
            "label": _("Email:"),
            "type": "email",
            "sanitizer": sanitize_email,
            "display_callback": "render_display_email",
            "description": _("An email address where website visitors can contact you."),
        },
        "phone": {
            "label": _("Phone:"),
            "type": "tel",
            "sanitizer": sanitize_phone,
            "description": _("A phone number that website visitors can call if they have questions."),
        },
        "fax": {
            "label": _("Fax:"),
            "type": "tel",
            "sanitizer": sanitize_phone,
            "description": _("A fax number that website visitors can use to send important documents."),
        },
        "address": {
            "label": _("Address:"),
            "type": "textarea",
            "form_callback": "render_form_textarea",
            "sanitizer": sanitize_textarea_field,
            "display_callback": "render_display_linebreaks",
            "description": _("A physical address where website visitors can go to visit you in person."),
        },
        "notes": {
            "label": _("Notes:"),
            "type": "textarea",
            "form_callback": "render_form_textarea",
            "sanitizer": "widgets.sanitizers.sanitize_textarea_field",
            "display_callback": "render_display_markdown",
            "description": _("Anything else visitors should know. Markdown is supported."),
        },
        "labels": {
            "label": _("Display labels?"),
            "type": "checkbox",
            "sortable": False,
            "label_after": True,
            "default": "yes",
            "sanitizer": sanitize_yes_no,
            "show_front_end": False,
        },
        "map": {
            "label": _("Display map of address?"),
            "type": "checkbox",
            "sortable": False,
            "label_after": True,
            "default": "yes",
            "sanitizer": sanitize_yes_no,
            "show_front_end": False,
        },
    }

    def render_after_fields(self, fields: dict) -> str:
        map_field, address = fields.get("map"), fields.get("address")
        if not map_field or not address or not address["value"]:
            return ""
        if not checkbox_on(map_field):
            return ""
        return render_display_map(str(address["value"]))


class HoursWidget(FieldWidget):
    slug = "hours"
    label = _("Hours")
    description = _("Display your business hours of operation.")
    fields = {
        "title": {
            "label": _("Title:"),
            "description": _("The title of the widget."),
            "sortable": False,
        },
        "hours": {
            "label": _("Hours:"),
            "type": "hours",
            "form_callback": "render_form_hours",
            "display_callback": "render_display_hours",
            "sanitizer": sanitize_hours,
            "description": _("Opening and closing times for each day of the week."),
        },
        "appointments": {
            "label": _("Appointments:"),
            "type": "select",
            "form_callback": "render_form_select",
            "display_callback": "render_display_select",
            "select_options": {
                "": _("Walk-ins welcome"),
                "preferred": _("Appointments preferred"),
                "required": _("By appointment only"),
            },
        },
        "additional_info": {
            "label": _("Additional info:"),
            "type": "textarea",
            "form_callback": "render_form_textarea",
            "sanitizer": sanitize_textarea_field,
            "display_callback": "render_display_linebreaks",
            "description": _("Holiday closures, seasonal hours and similar notes."),
        },
    }

    def get_field_schema(self) -> dict[str, dict]:
        schema = super().get_field_schema()
        schema["hours"]["days"] = default_days()
        return schema
