"""Build HTML markup from a mutable element tree."""

from .attribute import Attribute, AttributeKind, ClassListKind, DefaultKind, StyleListKind, kind_for, register_kind
from .config import DEFAULT_CONFIG, RenderConfig, load_render_config
from .element import ChildNode, Element
from .errors import ConfigError, HtmlElError, UnsupportedOperation
from .sanitize import parse_classes
from .selector import parse_tag_selector
from .serialize import LiteralHtml, Producer, close_tag, open_strict, open_tag, render, render_strict

__all__ = [
    "Attribute",
    "AttributeKind",
    "ChildNode",
    "ClassListKind",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DefaultKind",
    "Element",
    "HtmlElError",
    "LiteralHtml",
    "Producer",
    "RenderConfig",
    "StyleListKind",
    "UnsupportedOperation",
    "close_tag",
    "kind_for",
    "load_render_config",
    "open_strict",
    "open_tag",
    "parse_classes",
    "parse_tag_selector",
    "register_kind",
    "render",
    "render_strict",
]
