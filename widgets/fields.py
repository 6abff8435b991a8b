"""Field schema merging and ordering for field-driven widgets.

A widget declares a partial schema per field key. ``merge_fields`` fills each
entry in from ``FIELD_DEFAULTS`` and the saved instance, and ``order_fields``
sorts the result the way the admin form and the front end display it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable

from django.utils.html import escape
from django.utils.module_loading import import_string

from .sanitizers import identity, sanitize_text_field

logger = logging.getLogger(__name__)

FIELD_DEFAULTS: dict[str, Any] = {
    "key": "",
    "icon": "",
    "class": "widefat",
    "id": "",
    "name": "",
    "label": "",
    "label_after": False,
    "description": "",
    "type": "text",
    "sanitizer": sanitize_text_field,
    "escaper": escape,
    "form_callback": "render_form_input",
    "display_callback": "render_display_value",
    "default": "",
    "value": "",
    "placeholder": "",
    "sortable": True,
    "atts": {},  # extra input attributes
    "show_front_end": True,
    "show_empty": False,  # show the field even if the value is empty
    "select_options": {},  # value -> label, select fields only
    "strict_compare": False,  # select pre-selection without string coercion
    "order": 0,
    "days": {},  # day -> default hours entry, hours fields only
}

# Always taken from the computed per-instance values, never from the schema.
COMPUTED_KEYS = ("key", "icon", "order", "id", "name", "value")

CALLBACK_KEYS = ("escaper", "sanitizer")

TITLE_KEY = "title"


@dataclass(frozen=True)
class FieldNaming:
    """Ids and input names for one placed widget."""

    id_base: str = "widget"
    number: int | str = 0

    def field_id(self, key: str) -> str:
        return f"widget-{self.id_base}-{self.number}-{key}"

    def field_name(self, key: str) -> str:
        return f"widget-{self.id_base}[{self.number}][{key}]"

    @property
    def prefix(self) -> str:
        return f"widget-{self.id_base}[{self.number}]"


def resolve_callback(value: Any) -> Callable[[Any], Any]:
    """Return ``value`` if it is callable, import it if it is a dotted path,
    otherwise fall back to the identity function."""
    if callable(value):
        return value
    if isinstance(value, str) and "." in value:
        try:
            imported = import_string(value)
        except ImportError:
            logger.warning("Could not import field callback %r, using identity", value)
            return identity
        if callable(imported):
            return imported
    if value:
        logger.warning("Field callback %r is not callable, using identity", value)
    return identity


def _stored_order(stored: Any, fallback: int) -> int:
    if not isinstance(stored, dict) or not stored.get("order"):
        return fallback
    try:
        order = abs(int(stored["order"]))
    except (TypeError, ValueError):
        return fallback
    return order if order > 0 else fallback


def _stored_value(stored: Any) -> Any:
    # title is saved as a bare scalar, every other field as {"value", "order"}
    if isinstance(stored, dict):
        stored = stored.get("value")
    return stored if stored else ""


def merge_fields(
    instance: dict | None,
    fields: dict[str, dict],
    naming: FieldNaming | None = None,
    ordered: bool = True,
) -> dict[str, dict]:
    instance = instance or {}
    naming = naming or FieldNaming()
    merged: dict[str, dict] = {}

    for position, (key, schema) in enumerate(fields.items()):
        stored = instance.get(key)
        computed = {
            "key": key,
            "icon": key,
            "order": _stored_order(stored, position),
            "id": naming.field_id(key),
            "name": f"{naming.field_name(key)}[value]",
            "value": _stored_value(stored),
        }
        field = {**FIELD_DEFAULTS, **computed, **(schema or {})}
        field.update(computed)
        for name in CALLBACK_KEYS:
            field[name] = resolve_callback(field[name])
        merged[key] = field

    if ordered:
        return order_fields(merged)
    return merged


def order_fields(fields: dict[str, dict]) -> dict[str, dict]:
    """Sort fields by ``order``; title first, non-sortable fields last.

    Equal orders never compare as equal, so ties keep their current relative
    position under Python's stable sort.
    """

    def compare(a: str, b: str) -> int:
        if a == TITLE_KEY:
            return -1
        if b == TITLE_KEY:
            return 1
        if not fields[a]["sortable"]:
            return 1
        # sorted() only asks "a < b", so the non-sortable rule is mirrored here
        if not fields[b]["sortable"]:
            return -1
        return -1 if fields[a]["order"] < fields[b]["order"] else 1

    return {key: fields[key] for key in sorted(fields, key=cmp_to_key(compare))}
