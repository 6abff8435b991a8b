"""Field sanitizers, applied to submitted values before they are saved."""
from __future__ import annotations

import re

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator
from django.utils.html import strip_tags

_WHITESPACE_RE = re.compile(r"[\r\n\t ]+")
_PHONE_RE = re.compile(r"[^0-9+().\-\sxX#*]")


def identity(value):
    return value


def _text(value) -> str:
    if value is None or isinstance(value, (list, tuple, dict)):
        return ""
    return str(value)


def sanitize_text_field(value) -> str:
    """Single-line plain text: tags stripped, whitespace collapsed."""
    return _WHITESPACE_RE.sub(" ", strip_tags(_text(value))).strip()


def sanitize_textarea_field(value) -> str:
    lines = strip_tags(_text(value)).replace("\r\n", "\n").split("\n")
    return "\n".join(line.rstrip() for line in lines).strip()


def sanitize_email(value) -> str:
    value = sanitize_text_field(value)
    try:
        EmailValidator()(value)
    except ValidationError:
        return ""
    return value


def sanitize_phone(value) -> str:
    return _PHONE_RE.sub("", sanitize_text_field(value)).strip()


def sanitize_yes_no(value) -> str:
    return "yes" if _text(value).strip().lower() in ("yes", "1", "on", "true") else "no"
