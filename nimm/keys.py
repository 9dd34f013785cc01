from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeyBinding:
    keys: tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, key: str) -> bool:
        return key in self.keys


@dataclass(frozen=True, slots=True)
class KeyMap:
    up: KeyBinding
    down: KeyBinding
    left: KeyBinding
    right: KeyBinding
    help: KeyBinding
    quit: KeyBinding
    submit: KeyBinding
    select: KeyBinding

    def short_help(self) -> list[KeyBinding]:
        """Bindings shown in the one-line help."""

        return [self.help, self.quit]

    def full_help(self) -> list[list[KeyBinding]]:
        """Bindings shown in the expanded help, one list per column."""

        return [
            [self.up, self.down, self.left, self.right],
            [self.select, self.submit, self.help, self.quit],
        ]


DEFAULT_KEYS = KeyMap(
    up=KeyBinding(keys=("up", "k"), help_key="↑/k", help_desc="move up"),
    down=KeyBinding(keys=("down", "j"), help_key="↓/j", help_desc="move down"),
    left=KeyBinding(keys=("left", "h"), help_key="←/h", help_desc="move left"),
    right=KeyBinding(keys=("right", "l"), help_key="→/l", help_desc="move right"),
    help=KeyBinding(keys=("?",), help_key="?", help_desc="toggle help"),
    quit=KeyBinding(keys=("q", "esc", "ctrl+c"), help_key="q", help_desc="quit"),
    submit=KeyBinding(keys=("enter",), help_key="ENTER", help_desc="submit"),
    select=KeyBinding(keys=(" ", "space"), help_key="SPACE", help_desc="select"),
)
