"""Append-only log of available domains."""

from __future__ import annotations

from pathlib import Path


class AvailableDomainLog:
    """Append one domain per line, creating the file on first write."""

    def __init__(self, path: str) -> None:
        self._path = Path(path)

    def record(self, domain: str) -> None:
        with self._path.open("a", encoding="utf-8") as file_obj:
            file_obj.write(f"{domain}\n")
