"""Jinja2 helpers for mixing elements into templates.

Elements implement ``__html__``, so an autoescaping environment inserts their
rendering as markup instead of escaping it. ``{{ item }}`` always renders with
:data:`~htmlel.config.DEFAULT_CONFIG`; use ``{{ item | render }}`` to apply the
environment's config.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from jinja2 import BaseLoader, Environment, StrictUndefined, select_autoescape
from markupsafe import Markup, escape

from .config import DEFAULT_CONFIG, RenderConfig
from .element import Element
from .serialize import InnerHtml, render


def make_el(config: RenderConfig = DEFAULT_CONFIG):
    """Template global: ``{{ el("a.button", "Go", {"href": url}) }}``.

    Plain strings passed as ``inner`` are template data and get escaped.
    ``Markup``, elements and producers are inserted as markup.
    """

    def el(tag: str, inner: InnerHtml = "", attributes: Optional[Mapping[str, Any]] = None, close: bool = True) -> Markup:
        if isinstance(inner, Element):
            inner = inner.render(config=config)
        elif isinstance(inner, str) and not isinstance(inner, Markup):
            inner = escape(inner)
        return Markup(render(tag, inner, attributes, close, config=config))

    return el


def make_render_filter(config: RenderConfig = DEFAULT_CONFIG):
    """Template filter: ``{{ item | render }}`` renders an element with ``config``."""

    def render_filter(value: Any) -> Any:
        if isinstance(value, Element):
            return Markup(value.render(config=config))
        return value

    return render_filter


def template_env(loader: Optional[BaseLoader] = None, *, config: RenderConfig = DEFAULT_CONFIG) -> Environment:
    """Create an autoescaping Jinja environment with ``el`` and ``Element`` as globals."""

    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "jinja"], default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.globals["el"] = make_el(config)
    env.globals["Element"] = Element
    env.filters["render"] = make_render_filter(config)
    return env


def render_template_string(source: str, *, config: RenderConfig = DEFAULT_CONFIG, **context: Any) -> str:
    return template_env(config=config).from_string(source).render(**context)


__all__ = ["make_el", "make_render_filter", "render_template_string", "template_env"]
