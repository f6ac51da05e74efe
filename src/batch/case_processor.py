"""Case Processor — обработка одной пары литералов.

Pipeline для пары (A, B):
1. Validator: оба литерала проверяются по грамматике
2. Если хотя бы один невалиден → INVALID, арифметика пропускается
3. Normalizer: A и B → каноническое DecimalValue
4. Engine: точная сумма A + B

Каждая пара обрабатывается независимо (нет shared state), поэтому
evaluate_pair можно отправлять в process pool.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from src.batch.token_source import TokenPair
from src.core.contracts import CONTRACT_SCHEMA_VERSION
from src.core.domain.decimal_value import DecimalValue
from src.core.math.decimal_arithmetic import add
from src.core.math.formatter import format_decimal
from src.core.math.literal_grammar import LiteralCheck, check_literal
from src.core.math.normalizer import normalize


class CaseStatus(str, Enum):
    """Статус обработки пары"""

    OK = "OK"
    INVALID = "INVALID"


@dataclass(frozen=True)
class CaseResult:
    """Результат обработки одной пары."""

    case_number: int
    literal_a: str
    literal_b: str
    status: CaseStatus

    # Невалидные литералы (в порядке A, B)
    invalid_literals: Tuple[LiteralCheck, ...]

    # Только для OK
    normalized_a: Optional[DecimalValue]
    normalized_b: Optional[DecimalValue]
    total: Optional[DecimalValue]

    @property
    def is_ok(self) -> bool:
        return self.status == CaseStatus.OK

    def to_dict(self) -> Dict[str, Any]:
        """Представление для case_report контракта."""

        def render(value: Optional[DecimalValue]) -> Optional[str]:
            return format_decimal(value) if value is not None else None

        return {
            "schema_version": CONTRACT_SCHEMA_VERSION,
            "case_number": self.case_number,
            "literal_a": self.literal_a,
            "literal_b": self.literal_b,
            "status": self.status.value,
            "invalid_literals": [
                {"literal": check.literal, "reason": check.reason}
                for check in self.invalid_literals
            ],
            "normalized_a": render(self.normalized_a),
            "normalized_b": render(self.normalized_b),
            "sum": render(self.total),
        }


class CaseProcessor:
    """Validator → Normalizer → Engine для одной пары литералов.

    Stateless: один экземпляр обслуживает любое число пар.
    """

    def evaluate(self, case_number: int, literal_a: str, literal_b: str) -> CaseResult:
        """Обработка пары литералов.

        Args:
            case_number: Номер кейса (с 1)
            literal_a: Сырой литерал A
            literal_b: Сырой литерал B

        Returns:
            CaseResult; для INVALID normalized_*/total равны None
        """
        checks = (check_literal(literal_a), check_literal(literal_b))
        invalid = tuple(check for check in checks if not check.is_valid)

        if invalid:
            return CaseResult(
                case_number=case_number,
                literal_a=literal_a,
                literal_b=literal_b,
                status=CaseStatus.INVALID,
                invalid_literals=invalid,
                normalized_a=None,
                normalized_b=None,
                total=None,
            )

        value_a = normalize(literal_a)
        value_b = normalize(literal_b)

        return CaseResult(
            case_number=case_number,
            literal_a=literal_a,
            literal_b=literal_b,
            status=CaseStatus.OK,
            invalid_literals=(),
            normalized_a=value_a,
            normalized_b=value_b,
            total=add(value_a, value_b),
        )


def evaluate_pair(pair: TokenPair) -> CaseResult:
    """Обработка TokenPair (top-level функция для process pool)."""
    return CaseProcessor().evaluate(pair.case_number, pair.literal_a, pair.literal_b)
