from .display_list import (
    APPEND_ALWAYS,
    CHAR_INFO_ELEMENT,
    LiteralAnchor,
    PredicateAnchor,
    coerce_anchor,
    insert_char_info,
    remove_char_info,
)
from .formatter import NO_NAME_LABEL, CharInfoText, format_char_info
from .host import DisplayListRegistry, EditorHost, EvalDirective
from .mode import CharInfoMode, CharInfoState
from .version import __version__

__all__ = [
    "APPEND_ALWAYS",
    "CHAR_INFO_ELEMENT",
    "CharInfoMode",
    "CharInfoState",
    "CharInfoText",
    "DisplayListRegistry",
    "EditorHost",
    "EvalDirective",
    "LiteralAnchor",
    "NO_NAME_LABEL",
    "PredicateAnchor",
    "coerce_anchor",
    "format_char_info",
    "insert_char_info",
    "remove_char_info",
    "__version__",
]
