from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from ..core.errors import SizeParseError
from ..core.size_value import SizeValue, parse_size_value


class Command(ABC):
    action: ClassVar[str]

    @abstractmethod
    def run(self) -> int:
        raise NotImplementedError

    @staticmethod
    def _parse_or_exit(
        text: str | None,
        default: SizeValue | None = None,
    ) -> SizeValue | None:
        try:
            return parse_size_value(text, default)
        except SizeParseError as exc:
            raise SystemExit(f"Invalid size format: {exc.text}") from exc
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
