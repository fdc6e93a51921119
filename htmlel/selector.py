"""Tag selector parsing, ie. ``"div.card.active#main"``."""

from __future__ import annotations

import re
from typing import Tuple

# One or more dots (or hashes) followed by anything except another dot or hash.
_CLASS_RUN = re.compile(r"[.]+[^.#]*")
_ID_RUN = re.compile(r"[#]+[^.#]*")


def parse_tag_and_classes(selector: str) -> Tuple[str, str]:
    """Ie. ``"div.class-1.class-2"`` => ``("div", "class-1 class-2")``."""

    if "." not in selector:
        return selector, ""

    classes: list[str] = []

    def _collect(match: re.Match[str]) -> str:
        classes.append(match.group(0).replace(".", ""))
        return ""

    rest = _CLASS_RUN.sub(_collect, selector)
    return rest, " ".join(classes).strip()


def parse_tag_and_id(selector: str) -> Tuple[str, str]:
    """Ie. ``"div#the-id#other"`` => ``("div", "the-id")``.

    Every ``#...`` run is stripped but only the first one is kept.
    """

    if "#" not in selector:
        return selector, ""

    found: list[str] = []

    def _collect(match: re.Match[str]) -> str:
        found.append(match.group(0).replace("#", ""))
        return ""

    rest = _ID_RUN.sub(_collect, selector)
    first_id = next((value for value in found if value), "")
    return rest, first_id


def parse_tag_selector(selector: str) -> Tuple[str, str, str]:
    """Split a selector into ``(tag, id, classes)``.

    Classes are extracted before the id, so the text after a ``#`` is never
    read as a class name.
    """

    rest, classes = parse_tag_and_classes(selector or "")
    tag, element_id = parse_tag_and_id(rest)
    return tag, element_id, classes


__all__ = ["parse_tag_and_classes", "parse_tag_and_id", "parse_tag_selector"]
