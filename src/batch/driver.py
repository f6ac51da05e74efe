"""Batch Driver — обработка файла с парами десятичных литералов.

Читает токены из файла, разбивает на пары (A, B), для каждой пары запускает
Validator → Normalizer → Engine → Formatter и печатает отчёт.

CLI:
    decimal-sum [input_file] [--format text|json] [--workers N]
                [--validate-contracts] [--log-level LEVEL]

Если input_file не указан, имя файла запрашивается в stdin.
"""

import argparse
import logging
import sys
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from src.batch.case_processor import CaseResult, evaluate_pair
from src.batch.config import BatchConfig, ReportFormat
from src.batch.report import (
    BatchSummary,
    format_case_json,
    format_case_lines,
    format_summary_json,
    header_line,
)
from src.batch.token_source import discarded_token, iter_token_pairs, read_tokens
from src.core.contracts import validate_batch_report

logger = logging.getLogger(__name__)

PROMPT = "Enter input file name: "


@dataclass(frozen=True)
class BatchReport:
    """Результаты batch-прогона (в порядке входных пар)."""

    results: Tuple[CaseResult, ...]
    summary: BatchSummary


class BatchDriver:
    """Batch-обработка пар литералов.

    Пары независимы: при workers > 1 они распределяются по ProcessPoolExecutor,
    результаты собираются в исходном порядке.
    """

    def __init__(self, config: Optional[BatchConfig] = None):
        self.config = config or BatchConfig()

    def run(self, tokens: Sequence[str]) -> BatchReport:
        """Обработка последовательности токенов.

        Args:
            tokens: Токены; берутся по два, одиночный хвост отбрасывается

        Returns:
            BatchReport с результатами и итогами

        Raises:
            jsonschema.ValidationError: Если включена проверка контрактов
                и отчёт не соответствует схеме
        """
        tokens = list(tokens)
        pairs = list(iter_token_pairs(tokens))

        if self.config.workers > 1 and len(pairs) > 1:
            logger.info("Processing %d cases with %d workers", len(pairs), self.config.workers)
            with ProcessPoolExecutor(max_workers=self.config.workers) as pool:
                results = tuple(pool.map(evaluate_pair, pairs))
        else:
            logger.info("Processing %d cases", len(pairs))
            results = tuple(evaluate_pair(pair) for pair in pairs)

        summary = BatchSummary.from_results(results, discarded_token(tokens))
        logger.info(
            "Processed %d cases: ok=%d invalid=%d",
            summary.total_cases,
            summary.ok_cases,
            summary.invalid_cases,
        )

        if self.config.validate_contracts:
            self._validate_contracts(results, summary)

        return BatchReport(results=results, summary=summary)

    def process_file(self, path: Union[str, Path]) -> BatchReport:
        """Обработка файла с токенами.

        Raises:
            OSError: Если файл не удаётся прочитать
        """
        return self.run(read_tokens(path))

    def render(self, report: BatchReport) -> List[str]:
        """Строки отчёта в формате из конфигурации."""
        if self.config.report_format == ReportFormat.JSON:
            lines = [format_case_json(result) for result in report.results]
            lines.append(format_summary_json(report.summary))
            return lines

        text_lines: List[str] = []
        for result in report.results:
            text_lines.extend(format_case_lines(result))
        return text_lines

    def _validate_contracts(self, results: Iterable[CaseResult], summary: BatchSummary) -> None:
        checked = validate_batch_report((result.to_dict() for result in results), summary.to_dict())
        logger.debug("Contract validation passed for %d case reports", checked)


# =============================================================================
# CLI
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decimal-sum",
        description="Validate pairs of decimal literals and print their exact sums",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="File with whitespace-separated literals (prompted for when omitted)",
    )
    parser.add_argument(
        "--format",
        dest="report_format",
        choices=[f.value for f in ReportFormat],
        default=ReportFormat.TEXT.value,
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes for independent cases (default: 1)",
    )
    parser.add_argument(
        "--validate-contracts",
        action="store_true",
        help="Validate JSON reports against the bundled JSON Schema contracts",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def prompt_filename() -> Optional[str]:
    """Запрос имени файла в stdin.

    Пустые строки пропускаются: имя файла это первый токен первой непустой
    строки. None, если stdin закончился раньше.
    """
    prompt = PROMPT
    while True:
        try:
            answer = input(prompt)
        except EOFError:
            return None
        tokens = answer.split()
        if tokens:
            return tokens[0]
        # Приглашение печатается один раз
        prompt = ""


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Точка входа CLI. Возвращает exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = BatchConfig(
            report_format=ReportFormat(args.report_format),
            workers=args.workers,
            validate_contracts=args.validate_contracts,
            log_level=args.log_level.upper(),
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    filename = args.input_file or prompt_filename()
    if not filename:
        print("Failed to read file name.", file=sys.stderr)
        return 1

    driver = BatchDriver(config)
    try:
        tokens = read_tokens(filename)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s: %s", filename, e)
        print(f"Error: could not open file '{filename}'.", file=sys.stderr)
        return 1

    if config.report_format == ReportFormat.TEXT:
        print(header_line(filename))
        print()

    report = driver.run(tokens)
    for line in driver.render(report):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
