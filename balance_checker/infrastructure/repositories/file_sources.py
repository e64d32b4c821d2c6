"""File-backed sources for balance reports."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path

from balance_checker.config import SETTINGS
from balance_checker.domain.repositories import BalanceFileSource
from balance_checker.infrastructure.parsing.utils import ensure_text


class PathBalanceFile(BalanceFileSource):
    """A balance report on disk; only the final path component is its name."""

    def __init__(self, path: Path | str, encoding: str | None = None) -> None:
        self._path = Path(path)
        self._encoding = encoding or SETTINGS.encoding

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def path(self) -> Path:
        return self._path

    def read_text(self) -> str:
        return ensure_text(self._path, encoding=self._encoding)


class UploadedBalanceFile(BalanceFileSource):
    def __init__(self, name: str, data: BytesIO | bytes, encoding: str | None = None) -> None:
        self._name = name
        self._data = data.getvalue() if isinstance(data, BytesIO) else data
        self._encoding = encoding or SETTINGS.encoding

    @property
    def name(self) -> str:
        return self._name

    def read_text(self) -> str:
        return ensure_text(self._data, encoding=self._encoding)
