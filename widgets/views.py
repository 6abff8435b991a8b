from __future__ import annotations

import logging

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect
from django.template.response import TemplateResponse

from .models import WidgetInstance
from .submission import parse_submission

logger = logging.getLogger(__name__)


@staff_member_required
def widget_edit(request: HttpRequest, pk: int) -> HttpResponse:
    instance = get_object_or_404(WidgetInstance, pk=pk)
    widget_class = instance.get_widget_class()
    if widget_class is None:
        raise Http404(f"Unknown widget type '{instance.widget_type}'.")

    widget = widget_class()
    naming = widget.get_naming(instance.pk)

    if request.method == "POST":
        submitted = parse_submission(request.POST, naming.prefix)
        instance.config = widget.update(submitted, instance.config or {})
        instance.save(update_fields=["config", "updated_at"])
        logger.info("Saved %s widget pk=%s", instance.widget_type, instance.pk)
        messages.success(request, f"{widget_class.label} widget saved.")
        return redirect("widgets:edit", pk=instance.pk)

    return TemplateResponse(
        request,
        "widgets/edit.html",
        {
            "instance": instance,
            "widget_type": widget_class,
            "form_html": widget.form(instance.config or {}, naming),
            "media": widget.media,
        },
    )
