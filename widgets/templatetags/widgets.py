import logging

from django import template
from django.conf import settings
from django.utils.html import format_html
from django.utils.safestring import mark_safe

register = template.Library()
logger = logging.getLogger(__name__)


def widget_args(instance, area_options: dict | None = None) -> dict:
    """Wrapper markup for one placed widget, overridable per area in WIDGETS_AREAS."""
    area_options = area_options or {}
    widget_class = f"widget widget-{instance.widget_type}"
    before_widget = area_options.get(
        "before_widget", '<section id="{widget_id}" class="{widget_class}">'
    )
    return {
        "id": instance.area,
        "widget_id": instance.widget_id,
        "before_widget": format_html(before_widget, widget_id=instance.widget_id, widget_class=widget_class),
        "after_widget": area_options.get("after_widget", "</section>"),
        "before_title": area_options.get("before_title", '<h3 class="widget-title">'),
        "after_title": area_options.get("after_title", "</h3>"),
    }


@register.simple_tag(takes_context=True)
def render_widget_area(context, area_slug: str) -> str:
    from widgets.models import WidgetInstance

    areas = getattr(settings, "WIDGETS_AREAS", None)
    if areas is not None and area_slug not in areas:
        return ""
    area_options = (areas or {}).get(area_slug) or {}

    request = context.get("request")
    instances = WidgetInstance.objects.filter(area=area_slug, is_active=True).order_by("order", "pk")
    parts = []
    for inst in instances:
        cls = inst.get_widget_class()
        if cls:
            try:
                parts.append(cls().render(inst.config or {}, request=request, args=widget_args(inst, area_options)))
            except Exception:
                logger.exception(
                    "Widget %s pk=%s failed to render", inst.widget_type, inst.pk
                )
    return mark_safe("".join(parts))
