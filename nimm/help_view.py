from __future__ import annotations

from dataclasses import dataclass

from nimm.keys import KeyBinding, KeyMap
from nimm.styles import HELP_DESC, HELP_KEY, HELP_SEPARATOR, Style, strip_ansi

ELLIPSIS = "…"
SHORT_SEPARATOR = " • "
FULL_SEPARATOR = "    "

_key_style = Style(foreground=HELP_KEY)
_desc_style = Style(foreground=HELP_DESC)
_separator_style = Style(foreground=HELP_SEPARATOR)


@dataclass(slots=True)
class HelpView:
    """Key binding help, either a single line or a multi-column panel.

    `width` caps the rendered width; `0` means unlimited. Entries that do not fit
    are dropped and an ellipsis is shown instead, when there is room for it.
    """

    show_all: bool = False
    width: int = 0

    def view(self, keys: KeyMap) -> str:
        if self.show_all:
            return self.full_view(keys.full_help())
        return self.short_view(keys.short_help())

    def _tail(self, used: int) -> str:
        """Return the ellipsis tail if adding more would overflow, `""` if nothing fits."""

        tail = " " + ELLIPSIS
        if used + len(tail) < self.width:
            return _separator_style.render(tail)
        return ""

    def short_view(self, bindings: list[KeyBinding]) -> str:
        out = ""
        used = 0
        for i, binding in enumerate(bindings):
            sep = SHORT_SEPARATOR if i > 0 else ""
            item_width = len(sep) + len(binding.help_key) + 1 + len(binding.help_desc)
            if self.width > 0 and used + item_width > self.width:
                out += self._tail(used)
                break
            out += (
                _separator_style.render(sep)
                + _key_style.render(binding.help_key)
                + " "
                + _desc_style.render(binding.help_desc)
            )
            used += item_width
        return out

    def full_view(self, groups: list[list[KeyBinding]]) -> str:
        columns: list[list[str]] = []
        used = 0
        tail = ""
        for i, group in enumerate(groups):
            if not group:
                continue
            sep = FULL_SEPARATOR if columns else ""
            key_width = max(len(b.help_key) for b in group)
            desc_width = max(len(b.help_desc) for b in group)
            column_width = len(sep) + key_width + 1 + desc_width
            if self.width > 0 and used + column_width > self.width:
                tail = self._tail(used)
                break

            last = i == len(groups) - 1
            lines: list[str] = []
            for b in group:
                line = (
                    sep
                    + _key_style.render(b.help_key)
                    + " " * (key_width - len(b.help_key) + 1)
                    + _desc_style.render(b.help_desc)
                )
                if not last:
                    line += " " * (desc_width - len(b.help_desc))
                lines.append(line)
            columns.append(lines)
            used += column_width

        if not columns:
            return tail

        height = max(len(c) for c in columns)
        rows: list[str] = []
        for r in range(height):
            parts: list[str] = []
            for c, lines in enumerate(columns):
                if r < len(lines):
                    parts.append(lines[r])
                elif c < len(columns) - 1:
                    # Keep later columns aligned when this one is shorter.
                    parts.append(" " * _plain_width(lines[0]))
            rows.append("".join(parts).rstrip(" "))
        if tail:
            rows[0] += tail
        return "\n".join(rows)


def _plain_width(text: str) -> int:
    return len(strip_ansi(text))
