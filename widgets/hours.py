"""Per-day opening hours: normalizing stored data and drawing the day editor."""
from __future__ import annotations

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe
from django.utils.text import capfirst, slugify
from django.utils.translation import gettext as _

from .sanitizers import sanitize_text_field
from .timeslots import format_offset, time_slots

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_TRUE_STRINGS = ("1", "yes", "on", "true")


def empty_entry() -> dict:
    return {"not_open": False, "open": [], "closed": []}


def default_days(weekend_closed: bool = True) -> dict[str, dict]:
    """One 9 to 5 slot per day, weekend marked closed."""
    opens, closes = format_offset(9 * 3600), format_offset(17 * 3600)
    return {
        day: {
            "not_open": weekend_closed and day in ("saturday", "sunday"),
            "open": [opens],
            "closed": [closes],
        }
        for day in WEEKDAYS
    }


def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _slots(raw) -> list[str]:
    if isinstance(raw, (list, tuple)):
        return ["" if item is None else str(item) for item in raw]
    if isinstance(raw, dict):
        # form posts arrive as {"1": "9:00 AM", "2": ...}
        numbered = []
        for index, item in raw.items():
            try:
                numbered.append((int(index), "" if item is None else str(item)))
            except (TypeError, ValueError):
                continue
        return [item for _index, item in sorted(numbered)]
    return []


def normalize_entry(raw) -> dict:
    if not isinstance(raw, dict):
        return empty_entry()
    opens, closes = _slots(raw.get("open")), _slots(raw.get("closed"))
    width = max(len(opens), len(closes))
    opens += [""] * (width - len(opens))
    closes += [""] * (width - len(closes))
    return {"not_open": _flag(raw.get("not_open")), "open": opens, "closed": closes}


def normalize_hours(value, days: dict | None = None) -> dict[str, dict]:
    """HoursEntry per day in ``days`` order; unsaved days use their defaults.

    A closed day is posted without slots (its selects are disabled), so a saved
    closed day with no slots takes its default slots back.
    """
    value = value if isinstance(value, dict) else {}
    days = days or {day: empty_entry() for day in value}
    hours = {}
    for day, default in days.items():
        entry = normalize_entry(value.get(day, default))
        if entry["not_open"] and not entry["open"]:
            fallback = normalize_entry(default)
            entry["open"], entry["closed"] = fallback["open"], fallback["closed"]
        hours[day] = entry
    return hours


def sanitize_hours(value) -> dict[str, dict]:
    if not isinstance(value, dict):
        return {}
    cleaned = {}
    for day, raw in value.items():
        day_key = slugify(str(day))
        if not day_key:
            continue
        entry = normalize_entry(raw)
        entry["open"] = [sanitize_text_field(item) for item in entry["open"]]
        entry["closed"] = [sanitize_text_field(item) for item in entry["closed"]]
        cleaned[day_key] = entry
    return cleaned


def _time_options(times: list[str], selected: str) -> SafeString:
    return format_html_join(
        "",
        "<option{}>{}</option>",
        ((" selected" if str(selected) == time else "", time) for time in times),
    )


def render_hours_selection(field: dict, day: str, hours: dict, times: list[str] | None = None) -> SafeString:
    """One row of open/closed selects per slot; the first row carries "Add"."""
    if times is None:
        times = time_slots()
    escaper = field["escaper"]
    name = f"{field['name']}[{day}]"
    disabled = mark_safe(' disabled="disabled"') if hours["not_open"] else ""

    rows = []
    for index in range(1, len(hours["open"]) + 1):
        opens = hours["open"][index - 1]
        closes = hours["closed"][index - 1] if index - 1 < len(hours["closed"]) else ""
        if index == 1:
            action = format_html('<a href="#" class="add-time button-secondary">{}</a>', _("Add"))
        else:
            action = format_html(
                '<a href="#" class="remove-time button-secondary" title="{0}">'
                '<span aria-hidden="true">&times;</span><span class="screen-reader-text">{0}</span></a>',
                _("Remove"),
            )
        rows.append(
            format_html(
                '<div class="hours-selection">'
                '<select name="{}"{}>{}</select>'
                '<select name="{}"{}>{}</select>'
                "{}</div>",
                escaper(f"{name}[open][{index}]"),
                disabled,
                _time_options(times, opens),
                escaper(f"{name}[closed][{index}]"),
                disabled,
                _time_options(times, closes),
                action,
            )
        )
    return mark_safe("".join(rows))


def render_day(field: dict, day: str, hours: dict, times: list[str] | None = None) -> SafeString:
    day_key = slugify(day)
    checkbox_name = field["escaper"](f"{field['name']}[{day_key}][not_open]")
    not_open = hours["not_open"]

    first_day = next(iter(field.get("days") or {}), None)
    apply_to_all = ""
    if first_day == day:
        apply_to_all = format_html(
            '<a href="#" class="js-widgets-apply-hours-to-all">{}</a>', _("Apply to All")
        )

    closed_checkbox = format_html(
        '<input name="{0}" id="{0}" class="js-widgets-closed-checkbox" type="checkbox" value="1"{1}>'
        '<label for="{0}" class="js-widgets-closed-checkbox"><small>{2}</small></label>',
        checkbox_name,
        mark_safe(" checked") if checked(not_open, True) else "",
        _("Closed"),
    )

    return format_html(
        '<div class="day-container closed">'
        '<strong>{}</strong><span class="toggle"></span><span class="open-label {}">{}</span>'
        '<div class="hidden-container">{} <span class="day-checkbox-toggle">{}{}</span></div>'
        "</div>",
        capfirst(day),
        "closed" if not_open else "open",
        _("CLOSED") if not_open else _("OPEN"),
        render_hours_selection(field, day_key, hours, times),
        apply_to_all,
        closed_checkbox,
    )


def checked(helper, current) -> bool:
    """String comparison, so 1 == "1" and True == "True"."""
    return str(helper) == str(current)
