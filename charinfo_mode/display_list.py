"""Splice the char-info element into (and out of) a host display list."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Union

from charinfo_mode.host import EvalDirective

CHAR_INFO_ELEMENT = EvalDirective("char_info")


@dataclass(frozen=True)
class LiteralAnchor:
    """Insert after the first element equal to ``value``."""

    value: Any

    def matches(self, element: Any) -> bool:
        return element == self.value


@dataclass(frozen=True)
class PredicateAnchor:
    """Insert after the first element for which ``predicate`` is true."""

    predicate: Callable[[Any], bool]

    def matches(self, element: Any) -> bool:
        return bool(self.predicate(element))


class _AppendAlways:
    _instance: Optional["_AppendAlways"] = None

    def __new__(cls) -> "_AppendAlways":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def matches(self, element: Any) -> bool:
        return False

    def __repr__(self) -> str:
        return "APPEND_ALWAYS"


APPEND_ALWAYS = _AppendAlways()

AnchorSpec = Union[LiteralAnchor, PredicateAnchor, _AppendAlways]


def coerce_anchor(raw: Any) -> Optional[AnchorSpec]:
    """Turn a raw configuration value into an AnchorSpec.

    ``True`` means append, a callable becomes a predicate, ``None``/``False``
    mean "no anchor" and anything else is matched literally.
    """
    if raw is None or raw is False:
        return None
    if raw is True:
        return APPEND_ALWAYS
    if isinstance(raw, (LiteralAnchor, PredicateAnchor, _AppendAlways)):
        return raw
    if callable(raw):
        return PredicateAnchor(raw)
    return LiteralAnchor(raw)


def find_char_info(display_list: List[Any]) -> int:
    """Index of the first char-info element, or -1."""
    for index, element in enumerate(display_list):
        if element == CHAR_INFO_ELEMENT:
            return index
    return -1


def insert_char_info(display_list: Optional[List[Any]], anchor: Any) -> Optional[List[Any]]:
    """Insert the char-info element after the anchor, in place.

    Returns the mutated list, or None when there is no list or no anchor.
    """
    if display_list is None:
        return None
    spec = coerce_anchor(anchor)
    if spec is None:
        return None
    if find_char_info(display_list) >= 0:
        return display_list
    if spec is APPEND_ALWAYS:
        display_list.append(CHAR_INFO_ELEMENT)
        return display_list
    for index, element in enumerate(display_list):
        if spec.matches(element):
            display_list.insert(index + 1, CHAR_INFO_ELEMENT)
            return display_list
    display_list.append(CHAR_INFO_ELEMENT)
    return display_list


def remove_char_info(display_list: Optional[List[Any]]) -> Optional[List[Any]]:
    """Remove the first char-info element, in place. Missing list or element is a no-op."""
    if display_list is None:
        return None
    index = find_char_info(display_list)
    if index >= 0:
        del display_list[index]
    return display_list
