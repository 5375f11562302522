from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SerializerConfig:
    sort_keys: bool = False
    indent: int | None = None  # None selects compact output, e.g. "[1,2,3]"
    ensure_ascii: bool = True

    @property
    def separators(self) -> tuple[str, str]:
        if self.indent is None:
            return (",", ":")
        return (",", ": ")


DEFAULT_SERIALIZER_CONFIG = SerializerConfig()
