from __future__ import annotations

from rich.text import Text

def ascii_to_markup(text: str) -> str:
    if not text:
        return ""
    return Text.from_ansi(text).markup

def strip_markup(markup: str) -> str:
    return Text.from_markup(markup).plain
