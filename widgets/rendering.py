"""Admin form controls and front-end list items for merged fields.

Form callbacks take a merged field and return its ``<p>`` block. Display
callbacks take a merged field plus the widget's other fields and return an
``<li>``, or "" to leave the field out.
"""
from __future__ import annotations

from urllib.parse import quote

import markdown
from django.forms.utils import flatatt
from django.template.defaultfilters import linebreaksbr
from django.utils.html import escape, format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe
from django.utils.text import capfirst
from django.utils.translation import gettext as _

from .hours import checked, normalize_hours, render_day
from .timeslots import time_slots

CHECKBOX_ON = "yes"
CHECKBOX_OFF = "no"


def _attr(field: dict, value) -> str:
    return field["escaper"]("" if value is None else value)


def _atts(field: dict) -> str:
    atts = field.get("atts") or {}
    if not isinstance(atts, dict):
        return ""
    return flatatt(
        {name: value if isinstance(value, bool) else _attr(field, value) for name, value in atts.items()}
    )


def checkbox_on(field: dict) -> bool:
    return checked(field["value"] or field["default"], CHECKBOX_ON)


def option_selected(field: dict, option) -> bool:
    if field["strict_compare"]:
        return field["value"] == option
    return checked(field["value"], option)


def render_label(field: dict) -> SafeString:
    return format_html(
        ' <label for="{}" title="{}">{}</label>',
        _attr(field, field["id"]),
        _attr(field, field["description"]),
        field["label"],
    )


def before_form_field(field: dict) -> SafeString:
    classes = [field["type"], field["key"]]
    if not field["sortable"]:
        classes.append("not-sortable")
    if field["label_after"]:
        classes.append("label-after")

    parts = [format_html('<p class="{}">', " ".join(classes))]
    if not field["label_after"]:
        parts.append(render_label(field))
    if field["sortable"]:
        parts.append(mark_safe("<span>"))
    return mark_safe("".join(parts))


def after_form_field(field: dict) -> SafeString:
    parts = []
    if field["label_after"]:
        parts.append(render_label(field))
    if field["sortable"]:
        parts.append(
            mark_safe(
                '<span class="widgets-sortable-handle"><span class="handle-icon" aria-hidden="true">'
                "&#9776;</span></span></span>"
            )
        )
    parts.append(mark_safe("</p>"))
    return mark_safe("".join(parts))


def render_form_input(field: dict) -> SafeString:
    if field["type"] == "checkbox":
        value = CHECKBOX_ON
        state = mark_safe(" checked") if checkbox_on(field) else ""
    else:
        value = field["value"]
        state = ""

    control = format_html(
        '<input class="{}" id="{}" name="{}" type="{}" value="{}" placeholder="{}" autocomplete="off"{}{}>',
        _attr(field, field["class"]),
        _attr(field, field["id"]),
        _attr(field, field["name"]),
        _attr(field, field["type"]),
        _attr(field, value),
        _attr(field, field["placeholder"]),
        _atts(field),
        state,
    )
    return before_form_field(field) + control + after_form_field(field)


def render_form_select(field: dict) -> SafeString:
    options = format_html_join(
        "",
        '<option value="{}"{}>{}</option>',
        (
            (_attr(field, option), mark_safe(" selected") if option_selected(field, option) else "", label)
            for option, label in (field["select_options"] or {}).items()
        ),
    )
    control = format_html(
        '<select class="{}" id="{}" name="{}" autocomplete="off"{}>{}</select>',
        _attr(field, field["class"]),
        _attr(field, field["id"]),
        _attr(field, field["name"]),
        _atts(field),
        options,
    )
    return before_form_field(field) + control + after_form_field(field)


def render_form_textarea(field: dict) -> SafeString:
    control = format_html(
        '<textarea class="{}" id="{}" name="{}" placeholder="{}"{}>{}</textarea>',
        _attr(field, field["class"]),
        _attr(field, field["id"]),
        _attr(field, field["name"]),
        _attr(field, field["placeholder"]),
        _atts(field),
        escape(field["value"]),
    )
    return before_form_field(field) + control + after_form_field(field)


def render_form_hours(field: dict) -> SafeString:
    hours = normalize_hours(field["value"], field["days"])
    times = time_slots()
    days = format_html_join("", "{}", ((render_day(field, day, entry, times),) for day, entry in hours.items()))
    return before_form_field(field) + format_html('<div class="hours-days">{}</div>', days) + after_form_field(field)


FORM_CALLBACKS = {
    "render_form_input": render_form_input,
    "render_form_select": render_form_select,
    "render_form_textarea": render_form_textarea,
    "render_form_hours": render_form_hours,
}


def render_form_field(field: dict) -> SafeString:
    callback = field["form_callback"]
    if not callable(callback):
        callback = FORM_CALLBACKS.get(callback, render_form_input)
    return callback(field)


def show_labels(fields: dict) -> bool:
    labels = fields.get("labels")
    return bool(labels) and checkbox_on(labels)


def _item(field: dict, fields: dict, content) -> SafeString:
    label = ""
    if show_labels(fields) and field["label"]:
        label = format_html("<strong>{}</strong><br>", field["label"])
    return format_html('<li class="{}">{}<div>{}</div></li>', field["key"], label, content)


def render_display_value(field: dict, fields: dict) -> SafeString:
    return _item(field, fields, field["escaper"](field["value"]))


def render_display_email(field: dict, fields: dict) -> SafeString:
    address = field["escaper"](field["value"])
    return _item(field, fields, format_html('<a href="mailto:{}">{}</a>', address, address))


def render_display_select(field: dict, fields: dict) -> SafeString:
    options = field["select_options"] or {}
    label = next((name for option, name in options.items() if option_selected(field, option)), "")
    if not label:
        return ""
    return _item(field, fields, field["escaper"](label))


def render_display_linebreaks(field: dict, fields: dict) -> SafeString:
    return _item(field, fields, linebreaksbr(field["escaper"](field["value"]), autoescape=True))


def render_display_markdown(field: dict, fields: dict) -> SafeString:
    md = markdown.Markdown(extensions=["fenced_code"])
    return _item(field, fields, mark_safe(md.convert(escape(field["value"]))))


def render_display_hours(field: dict, fields: dict) -> SafeString:
    hours = normalize_hours(field["value"], field["days"] or None)
    rows = []
    for day, entry in hours.items():
        slots = [
            f"{opens} – {closes}" for opens, closes in zip(entry["open"], entry["closed"]) if opens and closes
        ]
        if entry["not_open"]:
            summary = _("Closed")
        elif slots:
            summary = ", ".join(slots)
        else:
            continue
        rows.append(
            format_html(
                '<li class="{}"><span class="day">{}</span> <span class="times">{}</span></li>',
                day,
                capfirst(day),
                field["escaper"](summary),
            )
        )
    if not rows:
        return ""
    return _item(field, fields, format_html('<ul class="hours-list">{}</ul>', mark_safe("".join(rows))))


def render_display_map(address: str) -> SafeString:
    src = f"https://www.google.com/maps?q={quote(address)}&output=embed&hl=en"
    return format_html(
        '<li class="map"><iframe src="{}" frameborder="0" loading="lazy" title="{}"></iframe></li>',
        src,
        _("Map"),
    )


DISPLAY_CALLBACKS = {
    "render_display_value": render_display_value,
    "render_display_email": render_display_email,
    "render_display_select": render_display_select,
    "render_display_linebreaks": render_display_linebreaks,
    "render_display_markdown": render_display_markdown,
    "render_display_hours": render_display_hours,
}


def render_display_field(field: dict, fields: dict) -> SafeString:
    callback = field["display_callback"]
    if not callable(callback):
        callback = DISPLAY_CALLBACKS.get(callback, render_display_value)
    return callback(field, fields)
