"""Sanitization of tag names, attribute names and attribute values.

Nothing in here raises on bad input. Invalid characters are stripped and
unsupported values degrade to an empty string.
"""

from __future__ import annotations

import html
import json
import logging
import re
from collections.abc import Mapping
from typing import Any, Dict

logger = logging.getLogger(__name__)

_NOT_TAG = re.compile(r"[^A-Za-z]")
_NOT_ATTRIBUTE_NAME = re.compile(r"[^A-Za-z0-9_\-]")
_NOT_CLASS_LIKE = re.compile(r"[^A-Za-z0-9_\-\s]")
_SLASHED = re.compile(r"([\\'\"])")


def _strip(pattern: re.Pattern[str], value: str, what: str) -> str:
    cleaned = pattern.sub("", value)
    if cleaned != value:
        logger.debug("Stripped invalid characters from %s %r", what, value)
    return cleaned


def sanitize_tag(tag: str) -> str:
    """Keep ASCII letters only."""
    return _strip(_NOT_TAG, tag or "", "tag")


def sanitize_attribute_name(name: str) -> str:
    """Keep ASCII letters, digits, ``_`` and ``-`` (covers ``data-*``)."""
    return _strip(_NOT_ATTRIBUTE_NAME, name or "", "attribute name")


def sanitize_class_str(value: str) -> str:
    """Sanitize a class list or an id.

    Keeps ASCII letters, digits, ``_``, ``-`` and whitespace.
    """
    return _strip(_NOT_CLASS_LIKE, value or "", "class/id")


def addslashes(value: str) -> str:
    """Backslash-escape quotes, backslashes and NUL."""
    return _SLASHED.sub(r"\\\1", value).replace("\0", "\\0")


def json_encode_for_html_attr(value: Any) -> str:
    """JSON encode anything so it can sit inside a double-quoted attribute."""
    encoded = json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return html.escape(encoded, quote=True)


def parse_classes(value: Any) -> str:
    """Get a sanitized class string from a string, a sequence or a mapping.

    ``"a b"``, ``["a", "b", "", False]`` and ``{"a": True, "b": 1, "c": False}``
    all produce ``"a b"``. Mappings keep the keys whose values are truthy.
    """

    if isinstance(value, str):
        return sanitize_class_str(value)

    if isinstance(value, Mapping):
        tokens = [parse_classes(key) for key, flag in value.items() if flag and isinstance(key, str) and key]
    elif isinstance(value, (list, tuple, set, frozenset)):
        tokens = [parse_classes(item) for item in value if item]
    else:
        return ""

    return " ".join(token for token in tokens if token).strip()


def _is_structured(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple, set, frozenset))


def parse_attribute_value(name: str, value: Any) -> Any:
    """Filter and sanitize an attribute value based on the attribute name.

    The result is a string, except for ``bool``, ``None`` and ``int`` values on
    ordinary attributes, which pass through so flags like ``required`` keep
    working.
    """

    key = (name or "").lower()

    if key == "class":
        return parse_classes(value)

    if key == "id":
        if value is None or value is False:
            return ""
        return sanitize_class_str(str(value))

    if key == "style":
        if _is_structured(value):
            # Structured styles are not supported yet.
            logger.debug("Dropping structured style value %r", value)
            return ""
        if value is None or value is False:
            return ""
        return addslashes(str(value))

    if isinstance(value, (bool, int)) or value is None:
        return value

    if isinstance(value, str):
        return addslashes(value)

    if _is_structured(value) or hasattr(value, "__dict__"):
        return json_encode_for_html_attr(value if _is_structured(value) else vars(value))

    return addslashes(str(value))


def merge_attribute(name: str, value: Any, attributes: Dict[str, Any]) -> None:
    """Merge a value coming from a tag selector into an attribute mapping.

    The selector (``div.a#b``) and the attribute mapping can both provide a
    class or an id.

    - ``class`` is appended to whatever the mapping already has.
    - ``style`` is left alone.
    - everything else (normally ``id``) is written only when the mapping has
      no truthy value for it, so explicit attributes win.
    """

    if not value:
        return

    if name == "class":
        existing = attributes.get("class")
        if "class" not in attributes:
            attributes["class"] = value
        elif isinstance(existing, list):
            existing.append(value)
        elif isinstance(existing, str):
            attributes["class"] = (existing + " " + parse_classes(value)).strip()
        else:
            attributes["class"] = [existing, value]
        return

    if name == "style":
        return

    if not attributes.get(name):
        attributes[name] = value


__all__ = [
    "addslashes",
    "json_encode_for_html_attr",
    "merge_attribute",
    "parse_attribute_value",
    "parse_classes",
    "sanitize_attribute_name",
    "sanitize_class_str",
    "sanitize_tag",
]
