"""Tests for column type inference and value compatibility."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

import pytest

from SQLCHECK.utils.sql.tokens import TokenKind
from SQLCHECK.utils.sql.type_inference import (
    DataType,
    describe_value_kind,
    infer_column_type,
    is_value_compatible,
)


class TestInferColumnType:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("name", DataType.STRING),
            ("first_name", DataType.STRING),
            ("Email", DataType.STRING),
            ("HOME_ADDRESS", DataType.STRING),
            ("user_id", DataType.NUMBER),
            ("price", DataType.NUMBER),
            ("Age", DataType.NUMBER),
            ("paid", DataType.NUMBER),
            ("created_at", DataType.UNKNOWN),
            ("foo", DataType.UNKNOWN),
        ],
    )
    def test_inference(self, name, expected):
        assert infer_column_type(name) is expected
    
    @pytest.mark.parametrize("name", ["price_code", "status_id", "type_count"])
    def test_string_words_win_over_number_words(self, name):
        assert infer_column_type(name) is DataType.STRING


class TestCompatibility:
    @pytest.mark.parametrize(
        "column_type,value_kind,expected",
        [
            (DataType.STRING, TokenKind.STRING_LITERAL, True),
            (DataType.STRING, TokenKind.IDENTIFIER, True),
            (DataType.STRING, TokenKind.NUMBER, False),
            (DataType.NUMBER, TokenKind.NUMBER, True),
            (DataType.NUMBER, TokenKind.IDENTIFIER, True),
            (DataType.NUMBER, TokenKind.STRING_LITERAL, False),
            (DataType.DATE, TokenKind.STRING_LITERAL, True),
            (DataType.DATE, TokenKind.NUMBER, False),
            (DataType.DATE, TokenKind.IDENTIFIER, False),
            (DataType.BOOLEAN, TokenKind.NUMBER, True),
            (DataType.BOOLEAN, TokenKind.STRING_LITERAL, True),
            (DataType.UNKNOWN, TokenKind.NUMBER, True),
            (DataType.UNKNOWN, TokenKind.IDENTIFIER, True),
        ],
    )
    def test_table(self, column_type, value_kind, expected):
        assert is_value_compatible(value_kind, column_type) is expected
    
    @pytest.mark.parametrize(
        "value_kind,label",
        [
            (TokenKind.STRING_LITERAL, "string"),
            (TokenKind.NUMBER, "number"),
            (TokenKind.IDENTIFIER, "identifier"),
        ],
    )
    def test_value_labels(self, value_kind, label):
        assert describe_value_kind(value_kind) == label
