from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JsonConfig:
    sort_keys: bool = True
    indent: int | None = None  # None renders compact output
    ensure_ascii: bool = False

    @property
    def separators(self) -> tuple[str, str]:
        if self.indent is None:
            return (",", ":")
        return (",", ": ")


DEFAULT_JSON_CONFIG = JsonConfig()
