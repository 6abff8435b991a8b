from __future__ import annotations

import logging

from django import forms
from django.template.loader import render_to_string
from django.utils.safestring import SafeString, mark_safe

from core.hooks import apply_filters
from core.plugins import BaseWidget

from .fields import TITLE_KEY, FieldNaming, merge_fields
from .rendering import CHECKBOX_OFF, render_display_field, render_form_field
from .sanitizers import sanitize_text_field

logger = logging.getLogger(__name__)

DEFAULT_WIDGET_ARGS = {
    "id": "",
    "widget_id": "",
    "before_widget": "",
    "after_widget": "",
    "before_title": '<h3 class="widget-title">',
    "after_title": "</h3>",
}


class FieldWidget(BaseWidget):
    """Widget whose admin form and front end are driven by a field schema.

    Subclasses declare ``fields``: a mapping of field key to a partial field
    definition (see ``widgets.fields.FIELD_DEFAULTS``). The saved config is
    ``{"title": "...", "<key>": {"value": ..., "order": n}, ...}``.
    """

    fields: dict[str, dict] = {}
    template_name = "widgets/field_widget.html"

    @property
    def media(self):
        return forms.Media(
            css={"all": ("widgets/css/admin.css",)},
            js=("widgets/js/admin.js",),
        )

    def get_field_schema(self) -> dict[str, dict]:
        return {key: dict(field) for key, field in self.fields.items()}

    def get_naming(self, number=0) -> FieldNaming:
        return FieldNaming(id_base=self.slug, number=number)

    def get_fields(self, config: dict | None, naming: FieldNaming | None = None, ordered: bool = True) -> dict:
        return merge_fields(config or {}, self.get_field_schema(), naming or self.get_naming(), ordered=ordered)

    def form(self, config: dict, naming: FieldNaming | None = None) -> SafeString:
        fields = self.get_fields(config, naming)
        return mark_safe("".join(render_form_field(field) for field in fields.values()))

    def update(self, new_config: dict, old_config: dict) -> dict:
        fields = self.get_fields(old_config, ordered=False)
        submitted = dict(new_config or {})

        # Unchecked checkboxes are not posted at all.
        for key, field in fields.items():
            raw = submitted.get(key)
            if field["type"] == "checkbox" and not (isinstance(raw, dict) and raw.get("value") is not None):
                submitted[key] = {"value": CHECKBOX_OFF}

        # Title keeps order 0.
        order = 1
        saved: dict = {}
        for key, raw in submitted.items():
            sanitizer = fields[key]["sanitizer"] if key in fields else sanitize_text_field
            value = raw.get("value", "") if isinstance(raw, dict) else raw

            if key == TITLE_KEY:
                saved[key] = sanitizer(value)
                continue

            saved[key] = {"value": sanitizer(value), "order": order}
            order += 1

        logger.debug("%s widget update saved %d field(s)", self.slug, len(saved))
        return saved

    def is_widget_empty(self, fields: dict) -> bool:
        ignore_title = bool(apply_filters("widgets_is_widget_empty_ignore_title", False))
        for key, field in fields.items():
            if key == TITLE_KEY and ignore_title:
                continue
            if field["value"] and field["show_front_end"]:
                return False
        return True

    def get_title(self, title_field: dict | None) -> str:
        if not title_field or not title_field["value"]:
            return ""
        # stored text is escaped; markup added by widget_title filters is kept
        title = title_field["escaper"](title_field["value"])
        return mark_safe(str(apply_filters("widget_title", title)))

    def render_items(self, fields: dict) -> list[SafeString]:
        items = []
        for field in fields.values():
            if not field["show_front_end"]:
                continue
            if not field["value"] and not field["show_empty"]:
                continue
            item = render_display_field(field, fields)
            if item:
                items.append(item)
        return items

    def render_after_fields(self, fields: dict) -> str:
        return ""

    def get_context_data(self, config: dict, args: dict) -> dict | None:
        fields = self.get_fields(config)
        if self.is_widget_empty(fields):
            return None
        title_field = fields.pop(TITLE_KEY, None)
        return {
            "args": args,
            "title": self.get_title(title_field),
            "items": self.render_items(fields),
            "after_fields": self.render_after_fields(fields),
            "fields": fields,
        }

    def render(self, config: dict, request=None, args: dict | None = None) -> str:
        args = {**DEFAULT_WIDGET_ARGS, **(args or {})}
        context = self.get_context_data(config or {}, args)
        if context is None:
            return ""
        return render_to_string(self.template_name, context, request=request)
