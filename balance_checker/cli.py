"""Command-line entrypoint for balance file validation."""
from __future__ import annotations

import argparse
import codecs
import json
import sys

import structlog

from balance_checker.application.use_cases import BalanceValidationContext, ValidateBalanceFileUseCase
from balance_checker.config import SETTINGS, configure_logging
from balance_checker.domain.services import BalanceFileValidator
from balance_checker.infrastructure.repositories.file_sources import PathBalanceFile
from balance_checker.presentation.result_report import render_text, response_to_dict

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_UNREADABLE = 2


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate TVWXYB balance report files")
    parser.add_argument("files", nargs="+", type=str, help="Path(s) to balance .txt files")
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    parser.add_argument("--encoding", type=str, default=SETTINGS.encoding, help="File encoding (default: %(default)s)")
    parser.add_argument("--log-level", type=str, default=SETTINGS.log_level, help="Log level (DEBUG, INFO, ...)")
    args = parser.parse_args(argv)
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        parser.error(f"unknown encoding: {args.encoding}")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.log_level)

    use_case = ValidateBalanceFileUseCase(BalanceValidationContext(validator=BalanceFileValidator()))
    exit_code = EXIT_OK
    payloads: list[dict[str, object]] = []

    for path in args.files:
        source = PathBalanceFile(path, encoding=args.encoding)
        try:
            response = use_case.execute(source)
        except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
            logger.error("balance_file_unreadable", path=path, error=str(exc))
            print(f"Cannot read {path}: {exc.strerror or exc}", file=sys.stderr)
            exit_code = max(exit_code, EXIT_UNREADABLE)
            continue

        if not response.passed:
            exit_code = max(exit_code, EXIT_REJECTED)
        if args.format == "json":
            payloads.append(response_to_dict(response))
        else:
            print(render_text(response.outcome, response.file_name))
            print()

    if args.format == "json":
        print(json.dumps(payloads, ensure_ascii=False, indent=2))
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
