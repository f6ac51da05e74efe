"""Report — рендеринг результатов batch-прогона.

Text формат (на каждый кейс):

    Case <n>: <A> + <B>
      -> INVALID: '<token>' is not a valid double literal.
    <пустая строка>

или

    Case <n>: <A> + <B>
      -> <norm A> + <norm B> = <sum>
    <пустая строка>

JSON формат: одна строка JSON на кейс (case_report) и итоговая строка
(batch_summary).
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from src.batch.case_processor import CaseResult
from src.core.contracts import CONTRACT_SCHEMA_VERSION
from src.core.math.formatter import format_decimal


@dataclass(frozen=True)
class BatchSummary:
    """Итоги batch-прогона."""

    total_cases: int
    ok_cases: int
    invalid_cases: int
    discarded_token: Optional[str]

    @classmethod
    def from_results(
        cls, results: Sequence[CaseResult], discarded_token: Optional[str] = None
    ) -> "BatchSummary":
        ok = sum(1 for result in results if result.is_ok)
        return cls(
            total_cases=len(results),
            ok_cases=ok,
            invalid_cases=len(results) - ok,
            discarded_token=discarded_token,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Представление для batch_summary контракта."""
        return {
            "schema_version": CONTRACT_SCHEMA_VERSION,
            "total_cases": self.total_cases,
            "ok_cases": self.ok_cases,
            "invalid_cases": self.invalid_cases,
            "discarded_token": self.discarded_token,
        }


def header_line(source_name: str) -> str:
    return f"Processing test cases from '{source_name}'..."


def format_case_lines(result: CaseResult) -> List[str]:
    """Строки text-отчёта для одного кейса (включая завершающую пустую)."""
    lines = [f"Case {result.case_number}: {result.literal_a} + {result.literal_b}"]

    if not result.is_ok:
        for check in result.invalid_literals:
            lines.append(f"  -> INVALID: '{check.literal}' is not a valid double literal.")
    else:
        lines.append(
            f"  -> {format_decimal(result.normalized_a)} + {format_decimal(result.normalized_b)}"
            f" = {format_decimal(result.total)}"
        )

    lines.append("")
    return lines


def format_case_json(result: CaseResult) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False)


def format_summary_json(summary: BatchSummary) -> str:
    return json.dumps(summary.to_dict(), ensure_ascii=False)
