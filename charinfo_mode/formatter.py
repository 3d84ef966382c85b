from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

NO_NAME_LABEL = "No name"


@dataclass(frozen=True)
class CharInfoText:
    """Status-line string plus the hover text and clickable span attached to it."""

    text: str = ""
    help_echo: Optional[str] = None
    codepoint: Optional[int] = None
    code_span: Optional[Tuple[int, int]] = None

    @property
    def empty(self) -> bool:
        return not self.text

    @property
    def code_text(self) -> str:
        if self.code_span is None:
            return ""
        start, end = self.code_span
        return self.text[start:end]


EMPTY_CHAR_INFO = CharInfoText()


def format_codepoint(codepoint: int) -> str:
    return f"U+{codepoint:04X}"


def format_char_info(char: Optional[str], name: Optional[str]) -> CharInfoText:
    """Build the ``" [U+XXXX]"`` display string for ``char``.

    No character yields the empty string; an unknown or empty name hovers as
    ``NO_NAME_LABEL``.
    """
    if not char:
        return EMPTY_CHAR_INFO
    codepoint = ord(char[0])
    code = format_codepoint(codepoint)
    prefix = " ["
    text = f"{prefix}{code}]"
    return CharInfoText(
        text=text,
        help_echo=name or NO_NAME_LABEL,
        codepoint=codepoint,
        code_span=(len(prefix), len(prefix) + len(code)),
    )
