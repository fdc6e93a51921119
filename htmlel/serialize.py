"""Turn a tag, attributes and inner HTML into an HTML string.

Two entry points:

- :func:`render_strict` does no sanitization at all. Attribute values must
  already be strings (or ``True`` for bare attributes) and the tag must
  already be clean. Do not route untrusted data through it.
- :func:`render` accepts a tag selector (``div.card#main``) and raw attribute
  values, sanitizes everything and then serializes it.
"""

from __future__ import annotations

import io
import logging
from contextlib import redirect_stdout
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from .config import DEFAULT_CONFIG, RenderConfig
from .sanitize import merge_attribute, parse_attribute_value, sanitize_attribute_name, sanitize_tag
from .selector import parse_tag_selector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiteralHtml:
    """Inner HTML given as a ready string."""

    html: str


@dataclass(frozen=True)
class Producer:
    """Inner HTML produced by calling a function with no arguments.

    The return value is used, followed by anything the function printed to
    stdout while it ran. The capture swaps ``sys.stdout`` for the whole
    process, so output printed by other threads during the call ends up in
    the inner HTML too.
    """

    func: Callable[[], Any]

    def __call__(self) -> str:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            result = self.func()
        returned = "" if result is None else str(result)
        return returned + buffer.getvalue()


InnerHtml = Union[str, LiteralHtml, Producer, Callable[[], Any], None]


def resolve_inner_html(inner: InnerHtml) -> str:
    if not inner:
        return ""
    if isinstance(inner, str):
        return inner
    if isinstance(inner, LiteralHtml):
        return inner.html
    if isinstance(inner, Producer):
        return inner()
    if hasattr(inner, "__html__"):
        return str(inner.__html__())
    if callable(inner):
        return Producer(inner)()
    logger.debug("Ignoring inner HTML of type %s", type(inner).__name__)
    return ""


def _format_value(value: Any) -> str:
    if value is None or value is False:
        return ""
    return str(value)


def format_attributes_strict(attributes: Mapping[str, Any]) -> str:
    """Format attributes in insertion order. ``True`` gives a bare name."""

    parts: List[str] = []
    for name, value in attributes.items():
        if name and value is True:
            parts.append(name)
        else:
            parts.append(f'{name}="{_format_value(value)}"')
    return " ".join(parts)


def format_attributes(attributes: Mapping[str, Any]) -> str:
    """Format attributes with every ``name="value"`` pair before bare names."""

    pairs: List[str] = []
    singles: List[str] = []
    for name, value in attributes.items():
        if name and value is True:
            singles.append(name)
        else:
            pairs.append(f'{name}="{_format_value(value)}"')
    return " ".join(pairs + singles)


def is_self_closing(tag: str, *, config: RenderConfig = DEFAULT_CONFIG) -> bool:
    return config.is_self_closing(tag)


def _serialize(tag: str, inner: str, attributes_string: str, close: bool, config: RenderConfig) -> str:
    self_closing = is_self_closing(tag, config=config)

    parts = [f"<{tag}"]
    if attributes_string:
        parts.append(" " + attributes_string)
    parts.append(" />" if self_closing and config.self_closing_slash else ">")
    parts.append(inner)
    if close and not self_closing:
        parts.append(f"</{tag}>")
    return "".join(parts)


def render_strict(
    tag: str,
    inner_html: str = "",
    attributes: Optional[Mapping[str, Any]] = None,
    close: bool = True,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    """Serialize without sanitizing anything. Attribute order is kept verbatim."""

    return _serialize(tag, inner_html or "", format_attributes_strict(attributes or {}), close, config)


def open_strict(
    tag: str,
    attributes: Optional[Mapping[str, Any]] = None,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    return render_strict(tag, "", attributes, False, config=config)


def prepare_attributes(selector: str, attributes: Optional[Mapping[str, Any]] = None) -> Tuple[str, Dict[str, Any]]:
    """Parse a selector and sanitize attributes.

    Returns ``(tag, attributes)`` where ``tag`` is sanitized and
    ``attributes`` maps sanitized names to sanitized values. The caller's
    mapping is not modified.
    """

    tag, element_id, classes = parse_tag_selector(selector)

    merged: Dict[str, Any] = dict(attributes or {})
    if isinstance(merged.get("class"), list):
        merged["class"] = list(merged["class"])

    merge_attribute("class", classes, merged)
    merge_attribute("id", element_id, merged)

    sanitized: Dict[str, Any] = {}
    for name, value in merged.items():
        clean_name = sanitize_attribute_name(str(name))
        if not clean_name:
            logger.debug("Dropping attribute with unusable name %r", name)
            continue
        sanitized[clean_name] = parse_attribute_value(str(name), value)

    return sanitize_tag(tag), sanitized


def render(
    tag: str,
    inner_html: InnerHtml = "",
    attributes: Optional[Mapping[str, Any]] = None,
    close: bool = True,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    """Render an element from a tag selector, inner HTML and raw attributes.

    - classes from the selector and from ``attributes`` are merged
    - an id in ``attributes`` wins over one from the selector
    - list/dict values of ``class`` are flattened, other structured values
      are JSON encoded

    Attribute values are backslash-escaped, not HTML-escaped: a ``"`` in a
    value still ends the double-quoted attribute, so never pass untrusted
    values here.

    Example::

        render("div.container", "some html...", {"data-thing": 123})
    """

    clean_tag, sanitized = prepare_attributes(tag, attributes)
    inner = resolve_inner_html(inner_html)
    return _serialize(clean_tag, inner, format_attributes(sanitized), close, config)


def open_tag(
    tag: str,
    attributes: Optional[Mapping[str, Any]] = None,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    return render(tag, "", attributes, False, config=config)


def close_tag(tag: str, *, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Closing tag for a tag or selector; empty for self-closing tags."""

    clean_tag = sanitize_tag(parse_tag_selector(tag)[0])
    if is_self_closing(clean_tag, config=config):
        return ""
    return f"</{clean_tag}>"


__all__ = [
    "InnerHtml",
    "LiteralHtml",
    "Producer",
    "close_tag",
    "format_attributes",
    "format_attributes_strict",
    "is_self_closing",
    "open_strict",
    "open_tag",
    "prepare_attributes",
    "render",
    "render_strict",
    "resolve_inner_html",
]
