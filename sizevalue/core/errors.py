from __future__ import annotations


class SizeParseError(ValueError):
    def __init__(self, text: str) -> None:
        super().__init__(f"failed to parse '{text}'")
        self.text = text
