"""Batch Config — параметры batch-прогона.

Frozen dataclass с дефолтами; CLI (driver.main) строит экземпляр из аргументов.
"""

import logging
from dataclasses import dataclass
from enum import Enum


class ReportFormat(str, Enum):
    """Формат отчёта"""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class BatchConfig:
    """Конфигурация batch-прогона.

    - report_format: text (построчный отчёт) или json (JSON lines)
    - workers: число процессов; 1 → обработка в текущем процессе
    - validate_contracts: проверка отчётов против JSON Schema
    - log_level: уровень логирования для CLI
    """
    report_format: ReportFormat = ReportFormat.TEXT
    workers: int = 1
    validate_contracts: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level: {self.log_level}")
