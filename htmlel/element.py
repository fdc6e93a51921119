"""Mutable HTML element tree.

Build and mutate an :class:`Element`, then call :meth:`Element.render`.
Children are strings (emitted verbatim, they may already be markup) or other
elements. An element without a tag is a fragment: it has no attributes and
renders only its children.

Turning a tag and attributes into markup is left to :mod:`htmlel.serialize`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .attribute import Attribute
from .config import DEFAULT_CONFIG, RenderConfig
from . import serialize

logger = logging.getLogger(__name__)

ChildNode = Union[str, "Element"]


class Element:
    """An HTML element: a tag, attributes and children.

    The tag may use selector syntax (``"div.card#main"``); classes and the id
    are merged with the attributes at render time.
    """

    def __init__(
        self,
        tag: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
        children: Optional[Iterable[ChildNode]] = None,
    ) -> None:
        self._tag: Optional[str] = None
        self.attributes: Dict[str, Attribute] = {}
        self.children: List[ChildNode] = []

        self.tag = tag

        for name, value in (attributes or {}).items():
            if isinstance(value, Attribute):
                self.set_attribute_instance(value, name)
            else:
                self.set_attribute(name, value)

        for child in children or ():
            self.append_child(child)

    @classmethod
    def fragment(cls, children: Optional[Iterable[ChildNode]] = None) -> "Element":
        """An element with no tag or attributes, just children."""
        return cls(None, None, children)

    @property
    def tag(self) -> Optional[str]:
        return self._tag

    @tag.setter
    def tag(self, value: Optional[str]) -> None:
        self._tag = value or None
        if self.is_fragment() and self.attributes:
            logger.debug("Discarding %d attribute(s) of a fragment", len(self.attributes))
            self.attributes = {}

    def is_fragment(self) -> bool:
        return not (self._tag or "").strip()

    # Attributes

    def build_attribute(self, name: str) -> Attribute:
        """Build the attribute cell for ``name``. Override to change attribute kinds."""
        return Attribute.for_name(name)

    def attribute(self, name: str) -> Attribute:
        """Get the attribute cell for ``name``, creating and storing it if missing.

        Fragments never store attributes, so on a fragment the returned cell is
        detached.
        """

        existing = self.attributes.get(name)
        if existing is not None:
            return existing

        created = self.build_attribute(name)
        if self.is_fragment():
            logger.debug("Ignoring attribute %r on a fragment", name)
        else:
            self.attributes[name] = created
        return created

    def _lookup(self, name: str) -> Attribute:
        # Reads must not add attributes to the output.
        existing = self.attributes.get(name)
        return existing if existing is not None else self.build_attribute(name)

    def set_attribute_instance(self, attribute: Attribute, name: Optional[str] = None) -> "Element":
        """Store an attribute cell under ``name`` (its own name by default).

        The key used here is what gets rendered, even if it differs from
        ``attribute.name``.
        """

        if self.is_fragment():
            logger.debug("Ignoring attribute %r on a fragment", name or attribute.name)
            return self
        self.attributes[name if name is not None else attribute.name] = attribute
        return self

    def get_attribute(self, name: str) -> Any:
        return self._lookup(name).get()

    def set_attribute(self, name: str, *args: Any) -> "Element":
        self.attribute(name).set(*args)
        return self

    def delete_attribute(self, name: str) -> "Element":
        self.attributes.pop(name, None)
        return self

    def reset_attribute(self, name: str) -> "Element":
        """Put a fresh, empty cell in place of ``name``."""
        self.delete_attribute(name)
        self.attribute(name)
        return self

    def has_attribute_name(self, name: str) -> bool:
        """True when the attribute exists, whatever its value (``name=""`` counts)."""
        return name in self.attributes

    def compound_add(self, name: str, *args: Any) -> "Element":
        """Call ``add`` on an attribute, ie. add a class or a style."""
        self.attribute(name).add(*args)
        return self

    def compound_remove(self, name: str, *args: Any) -> "Element":
        if name in self.attributes:
            self.attributes[name].remove(*args)
        return self

    def compound_has(self, name: str, *args: Any) -> Optional[bool]:
        return self._lookup(name).has(*args)

    def add_class(self, *classes: str) -> "Element":
        for class_name in classes:
            self.compound_add("class", class_name)
        return self

    def remove_class(self, *classes: str) -> "Element":
        for class_name in classes:
            self.compound_remove("class", class_name)
        return self

    def has_class(self, class_name: str) -> bool:
        return bool(self.compound_has("class", class_name))

    def add_style(self, *declarations: str) -> "Element":
        for declaration in declarations:
            self.compound_add("style", declaration)
        return self

    def compile_attributes(self) -> Dict[str, Any]:
        """Attribute values keyed by name, as given by each cell's ``get``.

        The keys of :attr:`attributes` are the names that get rendered.
        """

        return {name: self.get_attribute(name) for name in self.attributes}

    # Children

    def append_child(self, node: ChildNode) -> "Element":
        self.children.append(node)
        return self

    def prepend_child(self, node: ChildNode) -> "Element":
        self.children.insert(0, node)
        return self

    def empty(self) -> "Element":
        """Remove all children."""
        self.children = []
        return self

    def insert_after(self, node: ChildNode) -> "Element":
        """Place ``node`` right after this element.

        There is no parent to insert into, so a non-fragment element turns
        into a fragment holding ``[copy_of_self, node]``. The copy carries the
        previous tag, attributes and children and is returned: keep using the
        returned element, not ``self``, to modify the original content.
        On a fragment, ``node`` is simply appended and ``self`` is returned.
        """

        if self.is_fragment():
            return self.append_child(node)

        copy = self._detach()
        self.children = [copy, node]
        return copy

    def insert_before(self, node: ChildNode) -> "Element":
        """Place ``node`` right before this element.

        Same conversion as :meth:`insert_after`: ``self`` becomes a fragment
        holding ``[node, copy_of_self]`` and the copy is returned.
        """

        if self.is_fragment():
            return self.prepend_child(node)

        copy = self._detach()
        self.children = [node, copy]
        return copy

    def _detach(self) -> "Element":
        # Children first, then clear tag and attributes.
        copy = type(self)(self._tag, dict(self.attributes), list(self.children))
        self._tag = None
        self.attributes = {}
        return copy

    # Rendering

    def open_tag(self, *, config: RenderConfig = DEFAULT_CONFIG) -> str:
        if self.is_fragment():
            return ""
        return serialize.open_tag(self._tag, self.compile_attributes(), config=config)

    def close_tag(self, *, config: RenderConfig = DEFAULT_CONFIG) -> str:
        if self.is_fragment():
            return ""
        return serialize.close_tag(self._tag, config=config)

    def inner_html(self, *, config: RenderConfig = DEFAULT_CONFIG) -> str:
        parts: List[str] = []
        for child in self.children:
            if isinstance(child, str):
                parts.append(child)
            elif isinstance(child, Element):
                parts.append(child.render(config=config))
            else:
                logger.debug("Skipping unrenderable child of type %s", type(child).__name__)
        return "".join(parts)

    def render(self, *, config: RenderConfig = DEFAULT_CONFIG) -> str:
        """Render the element and its children. The tree is not modified."""

        if self.is_fragment():
            return self.inner_html(config=config)
        return self.open_tag(config=config) + self.inner_html(config=config) + self.close_tag(config=config)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self.is_fragment():
            return f"Element.fragment(<{len(self.children)} children>)"
        return f"Element({self._tag!r}, {list(self.attributes)!r}, <{len(self.children)} children>)"


__all__ = ["ChildNode", "Element"]
