"""Batch — обработка файлов с парами десятичных литералов.

- token_source: чтение токенов и разбиение на пары
- case_processor: Validator → Normalizer → Engine для одной пары
- report: text / JSON отчёт
- driver: BatchDriver и CLI (decimal-sum)
"""

from .case_processor import CaseProcessor, CaseResult, CaseStatus, evaluate_pair
from .config import BatchConfig, ReportFormat
from .driver import BatchDriver, BatchReport, main
from .report import BatchSummary, format_case_lines
from .token_source import TokenPair, iter_token_pairs, read_tokens

__all__ = [
    "BatchConfig",
    "ReportFormat",
    "CaseProcessor",
    "CaseResult",
    "CaseStatus",
    "evaluate_pair",
    "BatchDriver",
    "BatchReport",
    "BatchSummary",
    "format_case_lines",
    "TokenPair",
    "iter_token_pairs",
    "read_tokens",
    "main",
]
