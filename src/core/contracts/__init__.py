"""
Contract Validation Module

Модуль для валидации JSON отчётов batch-прогона.
"""

from .validators import (
    CONTRACT_SCHEMA_VERSION,
    BatchSummaryValidator,
    CaseReportValidator,
    ContractValidator,
    SchemaLoader,
    get_default_loader,
    validate_batch_report,
    validate_batch_summary,
    validate_case_report,
)

__all__ = [
    # Constants
    "CONTRACT_SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CaseReportValidator",
    "BatchSummaryValidator",
    # Functions
    "get_default_loader",
    "validate_batch_report",
    "validate_case_report",
    "validate_batch_summary",
]
