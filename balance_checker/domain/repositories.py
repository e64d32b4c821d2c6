"""Interfaces anchoring the domain layer to its collaborators."""
from __future__ import annotations

from typing import Mapping, Protocol


class BalanceFileSource(Protocol):
    """Provides a balance file's name and its whole content as text."""

    @property
    def name(self) -> str:
        ...

    def read_text(self) -> str:
        ...


class ResultSink(Protocol):
    """Receives the outcome of a validation for display."""

    def show_success(self, message: str) -> None:
        ...

    def show_failure(self, message: str, details: Mapping[str, str] | None = None) -> None:
        ...
