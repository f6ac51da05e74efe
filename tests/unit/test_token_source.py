"""Тесты для Token Source.

Coverage:
- Разбиение токенов на пары, отбрасывание одиночного хвоста
- Чтение токенов из файла
"""

import logging

import pytest

from src.batch.token_source import (
    TokenPair,
    discarded_token,
    iter_token_pairs,
    read_tokens,
    split_tokens,
)


class TestTokenSource:
    """Тесты Token Source."""

    def test_pairs_numbered_from_one(self):
        pairs = list(iter_token_pairs(["1", "2", "3", "4"]))
        assert pairs == [
            TokenPair(case_number=1, literal_a="1", literal_b="2"),
            TokenPair(case_number=2, literal_a="3", literal_b="4"),
        ]

    def test_odd_trailing_token_discarded(self, caplog):
        """Одиночный хвост отбрасывается с warning в лог."""
        with caplog.at_level(logging.WARNING, logger="src.batch.token_source"):
            pairs = list(iter_token_pairs(["1", "2", "3"]))

        assert len(pairs) == 1
        assert "Discarding unpaired trailing token '3'" in caplog.text

    def test_empty_input(self):
        assert list(iter_token_pairs([])) == []

    def test_single_token(self):
        assert list(iter_token_pairs(["5"])) == []

    def test_discarded_token(self):
        assert discarded_token(["1", "2", "3"]) == "3"
        assert discarded_token(["1", "2"]) is None
        assert discarded_token([]) is None

    def test_split_on_any_whitespace(self):
        """Пары не привязаны к строкам файла."""
        assert split_tokens("1 1.0\n\t+0001.0\n\n-0001.005  ") == ["1", "1.0", "+0001.0", "-0001.005"]

    def test_read_tokens(self, tmp_path):
        path = tmp_path / "cases.txt"
        path.write_text("1 1.0\n-5. 3\n", encoding="utf-8")
        assert read_tokens(path) == ["1", "1.0", "-5.", "3"]

    def test_read_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            read_tokens(tmp_path / "missing.txt")

