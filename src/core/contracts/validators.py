"""
JSON Schema Contract Validators

Модуль для валидации JSON отчётов batch-прогона согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы поставляются вместе с пакетом (package data) в
src/core/contracts/schema/ и читаются через importlib.resources:
- case_report.json (результат одной пары литералов)
- batch_summary.json (итоги прогона)

Загрузчик по умолчанию создаётся лениво, при первой проверке контракта:
импорт пакета и text-отчёт схемы не читают.
"""

import json
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Версия контрактов, записываемая в каждый отчёт
CONTRACT_SCHEMA_VERSION = "1"

CASE_REPORT_SCHEMA = "case_report"
BATCH_SUMMARY_SCHEMA = "batch_summary"

SchemaDir = Union[Path, Traversable]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


def _default_schema_dir() -> SchemaDir:
    """Каталог схем внутри установленного пакета."""
    return resources.files(__package__) / "schema"


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы, поставляемые с пакетом; schema_dir
    позволяет указать другой каталог (Path или Traversable).
    """

    def __init__(self, schema_dir: Optional[SchemaDir] = None):
        self._schema_dir = schema_dir if schema_dir is not None else _default_schema_dir()
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> SchemaDir:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'case_report')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_file = self._schema_dir / f"{schema_name}.json"
        if not schema_file.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_file}")

        schema = json.loads(schema_file.read_text(encoding="utf-8"))

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Загрузчик по умолчанию (создаётся при первом обращении)
_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_default_loader() -> SchemaLoader:
    """
    Общий загрузчик поставляемых схем.

    Raises:
        RuntimeError: Если каталог схем отсутствует в установленном пакете
    """
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or get_default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class CaseReportValidator(ContractValidator):
    """Валидатор для case_report контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(CASE_REPORT_SCHEMA, loader)


class BatchSummaryValidator(ContractValidator):
    """Валидатор для batch_summary контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(BATCH_SUMMARY_SCHEMA, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_case_report(data: Dict[str, Any]) -> None:
    """
    Валидация case_report данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CaseReportValidator().validate(data)


def validate_batch_summary(data: Dict[str, Any]) -> None:
    """
    Валидация batch_summary данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BatchSummaryValidator().validate(data)


def validate_batch_report(
    case_reports: Iterable[Dict[str, Any]],
    summary: Dict[str, Any],
    loader: Optional[SchemaLoader] = None,
) -> int:
    """
    Валидация полного JSON отчёта: все case_report и итоговый batch_summary.

    Каждая схема компилируется один раз на прогон.

    Returns:
        Количество проверенных case_report

    Raises:
        ValidationError: На первом отчёте, не соответствующем схеме
    """
    case_validator = CaseReportValidator(loader)
    checked = 0
    for report in case_reports:
        case_validator.validate(report)
        checked += 1
    BatchSummaryValidator(loader).validate(summary)
    return checked
