"""Tests for error details and context logging."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

import logging

from SQLCHECK.utils.error_handling import ErrorContext, log_error_with_context
from SQLCHECK.utils.sql.errors import (
    LexicalErrorDetail,
    SemanticErrorDetail,
    SQLArityError,
    SyntaxErrorDetail,
    create_lexical_error,
    create_syntax_error,
)


class TestErrorDetails:
    def test_lexical_message(self):
        detail = LexicalErrorDetail(message="Unexpected character: \"", position=4, invalid_char='"')
        text = detail.format_message()
        assert text.startswith("Lexical error: Unexpected character")
        assert "Location: position 4" in text
        assert "single quotes" in text
    
    def test_non_ascii_character_code(self):
        text = LexicalErrorDetail(message="Unexpected character: é", invalid_char="é").format_message()
        assert "U+00E9" in text
    
    def test_syntax_expected_lists(self):
        one = SyntaxErrorDetail(message="m", expected=["FROM"]).format_message()
        many = SyntaxErrorDetail(message="m", expected=list("abcdefg")).format_message()
        assert "Expected: FROM" in one
        assert "(and 2 more)" in many
    
    def test_semantic_factories(self):
        arity = SemanticErrorDetail.create_arity_mismatch(3, 2)
        assert arity.format_message().startswith("[Arity Mismatch] Column count (3)")
        mismatch = SemanticErrorDetail.create_type_mismatch("age", "number", "string")
        assert "Column: age" in mismatch.format_message()
    
    def test_exceptions_format_their_detail(self):
        error = create_syntax_error("Expected table name.", position=3, found="';'")
        assert str(error).splitlines()[0] == "Syntax error: Expected table name."
        assert error.message == "Expected table name."
        lex = create_lexical_error("Unterminated string literal.", position=0, invalid_char="'")
        assert lex.detail.position == 0
        assert isinstance(SQLArityError(SemanticErrorDetail.create_arity_mismatch(1, 2)), Exception)


class TestLogErrorWithContext:
    def test_logs_stage_and_query(self, caplog):
        context = ErrorContext(query="SELECT  *\nFROM", stage="syntax", token_count=4)
        with caplog.at_level(logging.DEBUG, logger="SQLCHECK"):
            log_error_with_context(create_syntax_error("Expected table name."), context)
        message = caplog.records[-1].getMessage()
        assert "Validation failed at syntax stage" in message
        assert "Query: SELECT * FROM" in message
        assert "Tokens: 4" in message
        assert message.endswith("Syntax error: Expected table name.")
    
    def test_level_and_long_query_preview(self, caplog):
        context = ErrorContext(query="x" * 200, stage="lexical", additional_context={"line": 3})
        with caplog.at_level(logging.DEBUG, logger="SQLCHECK"):
            log_error_with_context(ValueError("boom"), context, level="warning")
        levels = [r.levelno for r in caplog.records]
        assert logging.WARNING in levels
        assert "..." in caplog.records[0].getMessage()
        assert "Additional context" in caplog.records[-1].getMessage()
