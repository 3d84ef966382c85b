"""Detailed character description shown by the inspector."""
from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from charinfo_mode.formatter import NO_NAME_LABEL, format_codepoint

CATEGORY_LABELS = {
    "Lu": "Letter, Uppercase",
    "Ll": "Letter, Lowercase",
    "Lt": "Letter, Titlecase",
    "Lm": "Letter, Modifier",
    "Lo": "Letter, Other",
    "Mn": "Mark, Nonspacing",
    "Mc": "Mark, Spacing Combining",
    "Me": "Mark, Enclosing",
    "Nd": "Number, Decimal Digit",
    "Nl": "Number, Letter",
    "No": "Number, Other",
    "Pc": "Punctuation, Connector",
    "Pd": "Punctuation, Dash",
    "Ps": "Punctuation, Open",
    "Pe": "Punctuation, Close",
    "Pi": "Punctuation, Initial quote",
    "Pf": "Punctuation, Final quote",
    "Po": "Punctuation, Other",
    "Sm": "Symbol, Math",
    "Sc": "Symbol, Currency",
    "Sk": "Symbol, Modifier",
    "So": "Symbol, Other",
    "Zs": "Separator, Space",
    "Zl": "Separator, Line",
    "Zp": "Separator, Paragraph",
    "Cc": "Other, Control",
    "Cf": "Other, Format",
    "Cs": "Other, Surrogate",
    "Co": "Other, Private Use",
    "Cn": "Other, Not Assigned",
}


@dataclass(frozen=True)
class CharDescription:
    char: str
    codepoint: int
    name: str
    category: str
    bidirectional: str
    combining: int
    decomposition: str
    east_asian_width: str
    mirrored: bool
    numeric: Optional[float]
    utf8: bytes
    utf16: Tuple[int, ...]
    position: Optional[int] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def code(self) -> str:
        return format_codepoint(self.codepoint)

    @property
    def category_label(self) -> str:
        return CATEGORY_LABELS.get(self.category, self.category)

    @property
    def display_char(self) -> str:
        # Marks are shown on a dotted circle; controls and separators by code only.
        if self.category.startswith("M"):
            return "\u25cc" + self.char
        if self.category[0] in {"C", "Z"} and self.char != " ":
            return ""
        return self.char

    def rows(self) -> Iterator[Tuple[str, str]]:
        yield "character", f"{self.display_char} ({self.code})".strip()
        yield "name", self.name
        if self.position is not None:
            where = f"{self.position}"
            if self.line is not None and self.column is not None:
                where += f" (line {self.line}, column {self.column})"
            yield "position", where
        yield "general category", f"{self.category} ({self.category_label})"
        yield "bidi class", self.bidirectional or "-"
        yield "combining class", str(self.combining)
        if self.decomposition:
            yield "decomposition", self.decomposition
        yield "east asian width", self.east_asian_width
        yield "mirrored", "yes" if self.mirrored else "no"
        if self.numeric is not None:
            yield "numeric value", f"{self.numeric:g}"
        yield "utf-8", " ".join(f"{byte:02X}" for byte in self.utf8)
        yield "utf-16", " ".join(f"{unit:04X}" for unit in self.utf16)


def utf16_units(char: str) -> Tuple[int, ...]:
    raw = char.encode("utf-16-be", errors="surrogatepass")
    return tuple(int.from_bytes(raw[i : i + 2], "big") for i in range(0, len(raw), 2))


def describe_char(
    char: str,
    *,
    position: Optional[int] = None,
    line: Optional[int] = None,
    column: Optional[int] = None,
) -> CharDescription:
    """Collect the Unicode properties of a single character."""
    if not char:
        raise ValueError("describe_char() needs a character")
    char = char[0]
    return CharDescription(
        char=char,
        codepoint=ord(char),
        name=unicodedata.name(char, "") or NO_NAME_LABEL,
        category=unicodedata.category(char),
        bidirectional=unicodedata.bidirectional(char),
        combining=unicodedata.combining(char),
        decomposition=unicodedata.decomposition(char),
        east_asian_width=unicodedata.east_asian_width(char),
        mirrored=bool(unicodedata.mirrored(char)),
        numeric=unicodedata.numeric(char, None),
        utf8=char.encode("utf-8", errors="surrogatepass"),
        utf16=utf16_units(char),
        position=position,
        line=line,
        column=column,
    )
