"""Token Source — чтение токенов и разбиение на пары.

Токены разделены любыми пробельными символами. Пары берутся по два токена;
обработка останавливается, когда остаётся меньше двух токенов (одиночный
завершающий токен отбрасывается с предупреждением в лог).
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPair:
    """Пара сырых литералов (A, B) с номером кейса (с 1)."""

    case_number: int
    literal_a: str
    literal_b: str


def split_tokens(text: str) -> List[str]:
    """Разбиение текста на токены по пробельным символам."""
    return text.split()


def read_tokens(path: Union[str, Path]) -> List[str]:
    """Чтение всех токенов из UTF-8 файла.

    Raises:
        OSError: Если файл не удаётся открыть или прочитать
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    tokens = split_tokens(text)
    logger.debug("Read %d tokens from %s", len(tokens), path)
    return tokens


def discarded_token(tokens: List[str]) -> Optional[str]:
    """Одиночный завершающий токен без пары (или None)."""
    if len(tokens) % 2 == 1:
        return tokens[-1]
    return None


def iter_token_pairs(tokens: Iterable[str]) -> Iterator[TokenPair]:
    """Итератор по парам токенов.

    Args:
        tokens: Последовательность токенов

    Yields:
        TokenPair для каждой полной пары, в порядке входа
    """
    iterator = iter(tokens)
    case_number = 0
    for literal_a in iterator:
        literal_b = next(iterator, None)
        if literal_b is None:
            logger.warning("Discarding unpaired trailing token '%s'", literal_a)
            return
        case_number += 1
        yield TokenPair(case_number=case_number, literal_a=literal_a, literal_b=literal_b)
