from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CsskitConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None
    json_sort_keys: bool = True
