"""Tests for the validation façade (check_sql / check / check_many)."""

import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

import logging

import pytest

from SQLCHECK.utils.sql import (
    ErrorKind,
    KeywordVocabulary,
    ValidationResult,
    ValidationStage,
    check,
    check_many,
    check_sql,
)


VALID_QUERIES = [
    "SELECT * FROM users;",
    "SELECT id, name FROM users WHERE age > 18;",
    "INSERT INTO users (id, name, email) VALUES (1, 'Alice', 'a@x.com');",
    "UPDATE users SET name = 'Bob' WHERE id = 1;",
    "DELETE FROM users WHERE id = 5;",
]


class TestValidQueries:
    @pytest.mark.parametrize("sql", VALID_QUERIES)
    def test_valid(self, sql):
        result = check_sql(sql)
        assert result.ok is True
        assert result.diagnostics == []
        assert result.error_kind is None
        assert result.stage_failed is None
        assert result.query == sql
        assert result.get_summary() == "SQL query is valid."
    
    def test_statement_and_token_count(self):
        result = check_sql("DELETE FROM users WHERE id = 5;")
        assert result.statement == "DELETE"
        # DELETE FROM users WHERE id = 5 ; END_OF_INPUT
        assert result.token_count == 9


class TestFailures:
    @pytest.mark.parametrize(
        "sql,kind,stage",
        [
            ("SELECT * FROM t WHERE name = 'abc", ErrorKind.LEX, ValidationStage.LEXICAL),
            ("SELECT 3. FROM t;", ErrorKind.LEX, ValidationStage.LEXICAL),
            ("SELEC * FROM users;", ErrorKind.SYNTAX, ValidationStage.SYNTAX),
            ("SELECT * FROM users", ErrorKind.SYNTAX, ValidationStage.SYNTAX),
            ("INSERT INTO t (a, b) VALUES (1);", ErrorKind.ARITY, ValidationStage.SEMANTIC),
            ("INSERT INTO t (name) VALUES (123);", ErrorKind.TYPE, ValidationStage.SEMANTIC),
        ],
    )
    def test_single_diagnostic(self, sql, kind, stage):
        result = check_sql(sql)
        assert result.ok is False
        assert len(result.diagnostics) == 1
        assert result.error_kind is kind
        assert result.stage_failed is stage
        assert result.get_summary().startswith("Error: ")
    
    def test_lex_failure_has_no_tokens(self):
        assert check_sql("'open").token_count == 0
    
    def test_keyword_suggestion_in_diagnostic(self):
        result = check_sql("SELEC * FROM users;")
        first_line = result.diagnostics[0].splitlines()[0]
        assert first_line == "Syntax error: Unknown keyword 'SELEC'. Did you mean 'SELECT'?"
    
    def test_arity_diagnostic(self):
        result = check_sql("INSERT INTO t (a, b) VALUES (1);")
        assert "Column count (2) does not match value count (1)." in result.diagnostics[0]
    
    def test_type_diagnostic(self):
        result = check_sql("INSERT INTO t (name) VALUES (123);")
        assert "Expected string but got number" in result.diagnostics[0]
    
    @pytest.mark.parametrize("sql", ["", None])
    def test_empty_input(self, sql):
        result = check_sql(sql)
        assert result.ok is False
        assert result.error_kind is ErrorKind.SYNTAX
    
    def test_failure_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="SQLCHECK"):
            check_sql("SELECT * FROM users")
        assert any("Validation failed at syntax stage" in r.getMessage() for r in caplog.records)


class TestDeterminism:
    @pytest.mark.parametrize(
        "sql",
        VALID_QUERIES + ["SELEC * FROM t;", "INSERT INTO t (a) VALUES (1, 2);", "a ! b"],
    )
    def test_same_input_same_result(self, sql):
        assert check_sql(sql) == check_sql(sql)
    
    def test_parallel_calls_match_sequential(self):
        queries = VALID_QUERIES * 4 + ["SELEC * FROM t;", "'x", "INSERT INTO t (age) VALUES ('x');"] * 4
        sequential = [check_sql(q) for q in queries]
        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(check_sql, queries))
        assert parallel == sequential


class TestAliasesAndBatches:
    def test_check_alias(self):
        assert check is check_sql
        assert isinstance(check("DELETE FROM t;"), ValidationResult)
    
    def test_check_many_keeps_order(self):
        results = check_many(["SELECT * FROM t;", "DELETE t;", "UPDATE t SET a = 1;"])
        assert [r.ok for r in results] == [True, False, True]
        assert [r.query for r in results] == ["SELECT * FROM t;", "DELETE t;", "UPDATE t SET a = 1;"]
    
    def test_check_many_empty(self):
        assert check_many([]) == []
    
    def test_empty_vocabulary_is_used_as_given(self):
        result = check_sql("SELECT * FROM t;", vocabulary=KeywordVocabulary([]))
        assert result.ok is False
        assert result.diagnostics[0].splitlines()[0] == "Syntax error: Expected a SQL statement."
