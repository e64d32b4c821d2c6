"""Validation toolkit for TVWXYB balance report files."""
from balance_checker.application.use_cases import BalanceValidationContext, ValidateBalanceFileUseCase
from balance_checker.domain.results import (
    FailureKind,
    ValidationFailure,
    ValidationOutcome,
    ValidationSuccess,
)
from balance_checker.domain.services import BalanceFileValidator, validate
from balance_checker.infrastructure.repositories.file_sources import (
    PathBalanceFile,
    UploadedBalanceFile,
)

__all__ = [
    "validate",
    "BalanceFileValidator",
    "BalanceValidationContext",
    "ValidateBalanceFileUseCase",
    "FailureKind",
    "ValidationFailure",
    "ValidationOutcome",
    "ValidationSuccess",
    "PathBalanceFile",
    "UploadedBalanceFile",
]
