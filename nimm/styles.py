"""ANSI styling for rendered frames.

Colours are written as SGR parameters for a 256-colour terminal, which is what
every client we serve is assumed to support.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

RESET = "\x1b[0m"
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

# #626262
MUTED = "38;5;241"
# #7D56F4
CURSOR_BACKGROUND = "48;5;99"
# ANSI magenta
MARKED = "35"

HELP_KEY = "38;5;241"
HELP_DESC = "38;5;239"
HELP_SEPARATOR = "38;5;237"


@dataclass(frozen=True, slots=True)
class Style:
    bold: bool = False
    foreground: str | None = None
    background: str | None = None

    def render(self, text: str) -> str:
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        if self.foreground:
            codes.append(self.foreground)
        if self.background:
            codes.append(self.background)
        if not codes or not text:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{RESET}"


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


normal_style = Style()
title_style = Style(bold=True)
rules_style = Style(foreground=MUTED)
cursor_style = Style(bold=True, background=CURSOR_BACKGROUND)
