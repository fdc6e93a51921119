"""Attribute value cells with per-name behavior.

Every :class:`Attribute` holds a kind, picked once from its name through an
open registry:

- ``class`` stores a space separated token string and supports
  ``add``/``remove``/``has``
- ``style`` stores ``prop:value;`` declarations and supports ``add``
- every other name stores a plain scalar

``get`` and ``set`` are mandatory. ``add``, ``remove``, ``has`` and ``reset``
are optional and calling them on a kind that lacks them does nothing.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from .errors import UnsupportedOperation
from .sanitize import parse_classes

logger = logging.getLogger(__name__)

MANDATORY_OPERATIONS = ("get", "set")
OPTIONAL_OPERATIONS = ("add", "remove", "has", "reset")


class AttributeKind:
    """Behavior of one attribute value.

    Subclasses implement the operations they support as methods named after
    the operation. :meth:`supports` is how :class:`Attribute` decides whether
    an operation exists.
    """

    operations: tuple[str, ...] = ()

    def __init__(self) -> None:
        self.value: Any = None

    def supports(self, operation: str) -> bool:
        return operation in self.operations and callable(getattr(self, operation, None))


class DefaultKind(AttributeKind):
    """A plain scalar, stored and returned as given."""

    operations = ("get", "set")

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        self.value = value


def _padded(value: str) -> str:
    return f" {value} "


class ClassListKind(AttributeKind):
    operations = ("get", "set", "add", "remove", "has")

    def __init__(self) -> None:
        super().__init__()
        self.value = ""

    def get(self) -> str:
        return self.value

    def set(self, value: Any) -> None:
        if value is None:
            value = ""
        elif not isinstance(value, str):
            # Lists and {token: flag} mappings are flattened on the way in.
            value = parse_classes(value)
        self.value = value

    def add(self, token: str) -> None:
        # Tokens are not de-duplicated.
        token = (token or "").strip()
        if token:
            self.value = f"{self.value} {token}".strip()

    def remove(self, token: str) -> bool:
        padded = _padded(self.value)
        needle = _padded(token)
        if not token or needle not in padded:
            return False
        self.value = padded.replace(needle, " ", 1).strip()
        return True

    def has(self, token: str) -> bool:
        return bool(token) and _padded(token) in _padded(self.value)


def _with_semicolon(value: Any) -> str:
    if not value:
        return ""
    return str(value).rstrip(";") + ";"


class StyleListKind(AttributeKind):
    """Inline style declarations, always ending in a single ``;``.

    There is no ``remove`` or ``has``: declarations are not parsed.
    """

    operations = ("get", "set", "add")

    def __init__(self) -> None:
        super().__init__()
        self.value = ""

    def get(self) -> str:
        return _with_semicolon(self.value)

    def set(self, value: Any) -> None:
        self.value = _with_semicolon(value)

    def add(self, declaration: str) -> None:
        if self.value:
            self.value = _with_semicolon(self.value)
        if declaration:
            self.value += _with_semicolon(declaration)


KindFactory = Callable[[], AttributeKind]

_REGISTRY: Dict[str, KindFactory] = {
    "class": ClassListKind,
    "style": StyleListKind,
}


def register_kind(name: str, factory: KindFactory) -> None:
    """Use ``factory`` to build the kind of every attribute called ``name``."""

    if name in _REGISTRY:
        logger.debug("Replacing attribute kind registered for %r", name)
    _REGISTRY[name] = factory


def unregister_kind(name: str) -> None:
    _REGISTRY.pop(name, None)


def kind_for(name: Optional[str]) -> AttributeKind:
    """Build a fresh kind for ``name``. Unknown names get :class:`DefaultKind`."""

    factory = _REGISTRY.get(name) if name else None
    return factory() if factory is not None else DefaultKind()


class Attribute:
    """A named attribute value plus the operations its kind allows.

    ``get()`` always produces something that can be written into an HTML
    attribute: a string, or ``True``/``None``/``int`` for the default kind.
    """

    def __init__(self, name: str, value: Any = None, kind: Optional[AttributeKind] = None) -> None:
        self.name = name
        self.kind = kind if kind is not None else kind_for(name)
        if value is not None:
            self.set(value)

    @classmethod
    def for_name(cls, name: str) -> "Attribute":
        return cls(name)

    @property
    def value(self) -> Any:
        """The raw stored value, before ``get`` normalization."""
        return self.kind.value

    def supports(self, operation: str) -> bool:
        return self.kind.supports(operation)

    def invoke(self, operation: str, *args: Any) -> Any:
        if self.supports(operation):
            return getattr(self.kind, operation)(*args)
        if operation in OPTIONAL_OPERATIONS:
            return None
        raise UnsupportedOperation(self.name, operation)

    def get(self) -> Any:
        return self.invoke("get")

    def set(self, *args: Any) -> None:
        self.invoke("set", *args)

    def add(self, *args: Any) -> None:
        self.invoke("add", *args)

    def remove(self, *args: Any) -> Optional[bool]:
        return self.invoke("remove", *args)

    def has(self, *args: Any) -> Optional[bool]:
        return self.invoke("has", *args)

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.kind.value!r}, kind={type(self.kind).__name__})"


__all__ = [
    "Attribute",
    "AttributeKind",
    "ClassListKind",
    "DefaultKind",
    "MANDATORY_OPERATIONS",
    "OPTIONAL_OPERATIONS",
    "StyleListKind",
    "kind_for",
    "register_kind",
    "unregister_kind",
]
