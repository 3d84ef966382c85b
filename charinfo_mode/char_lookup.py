from __future__ import annotations

import unicodedata
from typing import Optional, Tuple

from charinfo_mode.host import EditorHost


def char_name(char: Optional[str]) -> Optional[str]:
    """Official Unicode name of ``char``, or None when the database has none."""
    if not char:
        return None
    return unicodedata.name(char[0], None)


def lookup_cursor_char(host: EditorHost) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(char, name)`` for the cursor of the selected surface."""
    surface = host.selected_surface()
    if surface is None:
        return None, None
    char = host.char_at_cursor(surface)
    if not char:
        return None, None
    return char, char_name(char)
