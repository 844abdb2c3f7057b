from __future__ import annotations

from .base import Command


class ParseCommand(Command):
    action = "parse"

    def __init__(self, text: str | None, default_text: str | None = None) -> None:
        self._text = text
        self._default_text = default_text

    def run(self) -> int:
        default = self._parse_or_exit(self._default_text)
        value = self._parse_or_exit(self._text, default)
        if value is None:
            raise SystemExit("No size given and no default set")

        print(f"{value.singles} {value}")
        return 0
