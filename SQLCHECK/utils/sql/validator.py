"""Grammar validator for the SQLCHECK statement subset.

LL(1) recursive descent over the tokens produced by lexer.py, following
STATEMENT_GRAMMAR in grammar.py. Each rule is a method that decides its path
from the next unconsumed token; the cursor never moves backward.

Semantic checks embedded in INSERT:
- column count must equal value count (SQLArityError)
- each value must fit the column type inferred from its name (SQLTypeError)

The first failure is raised; nothing is accumulated.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from SQLCHECK.utils.logging import get_logger
from SQLCHECK.utils.similarity import suggest_keyword

from .errors import (
    SemanticErrorDetail,
    SQLArityError,
    SQLSyntaxError,
    SQLTypeError,
    SQLValidationError,
    create_syntax_error,
)
from .models import ParseResult
from .tokens import COMPARISON_KINDS, VALUE_KINDS, Token, TokenKind
from .type_inference import Column, DataType, describe_value_kind, infer_column_type, is_value_compatible
from .vocabulary import DEFAULT_VOCABULARY, KeywordVocabulary

logger = get_logger(__name__)


_VALUE_MESSAGE = "Expected a value (string, number, or identifier)."
_VALUE_EXPECTED = ["string", "number", "identifier"]


class GrammarValidator:
    """Validates one token sequence against the statement grammar."""

    def __init__(self, tokens: Sequence[Token], vocabulary: Optional[KeywordVocabulary] = None) -> None:
        if not tokens or tokens[-1].kind is not TokenKind.END_OF_INPUT:
            raise ValueError("Token sequence must end with END_OF_INPUT")
        self.tokens = tokens
        self.vocabulary = DEFAULT_VOCABULARY if vocabulary is None else vocabulary
        self.current = 0

    def validate(self) -> TokenKind:
        """Validate the whole sequence; return the statement kind."""
        statement = self._statement()
        # Stray semicolons after the statement are tolerated
        while self._match(TokenKind.SEMICOLON):
            pass
        if not self._is_at_end():
            raise self._error("Unexpected tokens after statement.", expected=["end of input"])
        return statement

    # ------------------------------------------------------------------ #
    # Token cursor
    # ------------------------------------------------------------------ #

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _is_at_end(self) -> bool:
        return self._peek().kind is TokenKind.END_OF_INPUT

    def _advance(self) -> Token:
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _check(self, kind: TokenKind) -> bool:
        if self._is_at_end():
            return False
        return self._peek().kind is kind

    def _match(self, *kinds: TokenKind) -> bool:
        for kind in kinds:
            if self._check(kind):
                self._advance()
                return True
        return False

    def _consume(self, kind: TokenKind, message: str, expected: Optional[str] = None) -> Token:
        if self._check(kind):
            return self._advance()
        raise self._error(message, expected=[expected or kind.value])

    def _error(self, message: str, expected: Optional[List[str]] = None) -> SQLSyntaxError:
        token = self._peek()
        return create_syntax_error(
            message=message,
            position=token.position,
            found=token.describe(),
            expected=expected,
        )

    # ------------------------------------------------------------------ #
    # Statements
    # ------------------------------------------------------------------ #

    def _statement(self) -> TokenKind:
        if self._match(TokenKind.SELECT):
            self._select_statement()
            return TokenKind.SELECT
        if self._match(TokenKind.INSERT):
            self._insert_statement()
            return TokenKind.INSERT
        if self._match(TokenKind.UPDATE):
            self._update_statement()
            return TokenKind.UPDATE
        if self._match(TokenKind.DELETE):
            self._delete_statement()
            return TokenKind.DELETE

        token = self._peek()
        if token.kind is TokenKind.IDENTIFIER:
            suggestion = suggest_keyword(token.lexeme.upper(), self.vocabulary.spellings())
            if suggestion:
                raise create_syntax_error(
                    message=f"Unknown keyword '{token.lexeme}'. Did you mean '{suggestion}'?",
                    position=token.position,
                    found=token.describe(),
                    suggestion=suggestion,
                )
        raise self._error(
            "Expected a SQL statement.",
            expected=[kind.value for kind in (TokenKind.SELECT, TokenKind.INSERT, TokenKind.UPDATE, TokenKind.DELETE)],
        )

    def _select_statement(self) -> None:
        # SELECT column1, column2, ... FROM table1, ... [WHERE condition];
        self._column_list()
        self._consume(TokenKind.FROM, "Expected 'FROM' after SELECT columns.")
        self._table_list()
        if self._match(TokenKind.WHERE):
            self._condition()
        self._consume(TokenKind.SEMICOLON, "Expected ';' at the end of SELECT statement.", "';'")

    def _insert_statement(self) -> None:
        # INSERT INTO table [(column1, ...)] VALUES (value1, ...);
        self._consume(TokenKind.INTO, "Expected 'INTO' after INSERT.")
        self._consume(TokenKind.IDENTIFIER, "Expected table name after INTO.", "table name")

        columns: List[Column] = []
        has_column_list = False
        if self._match(TokenKind.LEFT_PAREN):
            has_column_list = True
            columns = self._column_declarations()
            self._consume(TokenKind.RIGHT_PAREN, "Expected ')' after column list.", "')'")

        self._consume(TokenKind.VALUES, "Expected 'VALUES' after table name or column list.")
        self._consume(TokenKind.LEFT_PAREN, "Expected '(' after VALUES.", "'('")
        values = self._value_list()
        self._consume(TokenKind.RIGHT_PAREN, "Expected ')' after value list.", "')'")

        if has_column_list:
            self._check_insert_semantics(columns, values)

        self._consume(TokenKind.SEMICOLON, "Expected ';' at the end of INSERT statement.", "';'")

    def _update_statement(self) -> None:
        # UPDATE table SET column1 = value1, ... [WHERE condition];
        self._consume(TokenKind.IDENTIFIER, "Expected table name after UPDATE.", "table name")
        self._consume(TokenKind.SET, "Expected 'SET' after table name.")
        self._assignment_list()
        if self._match(TokenKind.WHERE):
            self._condition()
        self._consume(TokenKind.SEMICOLON, "Expected ';' at the end of UPDATE statement.", "';'")

    def _delete_statement(self) -> None:
        # DELETE FROM table [WHERE condition];
        self._consume(TokenKind.FROM, "Expected 'FROM' after DELETE.")
        self._consume(TokenKind.IDENTIFIER, "Expected table name after FROM.", "table name")
        if self._match(TokenKind.WHERE):
            self._condition()
        self._consume(TokenKind.SEMICOLON, "Expected ';' at the end of DELETE statement.", "';'")

    # ------------------------------------------------------------------ #
    # Lists and clauses
    # ------------------------------------------------------------------ #

    def _column_list(self) -> None:
        if self._match(TokenKind.ASTERISK):
            return
        self._consume(TokenKind.IDENTIFIER, "Expected column name.", "column name")
        while self._match(TokenKind.COMMA):
            self._consume(TokenKind.IDENTIFIER, "Expected column name.", "column name")

    def _column_declarations(self) -> List[Column]:
        if self._match(TokenKind.ASTERISK):
            return [Column("*", DataType.UNKNOWN)]
        columns = [self._column_declaration()]
        while self._match(TokenKind.COMMA):
            columns.append(self._column_declaration())
        return columns

    def _column_declaration(self) -> Column:
        token = self._consume(TokenKind.IDENTIFIER, "Expected column name.", "column name")
        return Column(token.lexeme, infer_column_type(token.lexeme))

    def _table_list(self) -> None:
        self._consume(TokenKind.IDENTIFIER, "Expected table name.", "table name")
        while self._match(TokenKind.COMMA):
            self._consume(TokenKind.IDENTIFIER, "Expected table name.", "table name")

    def _value(self) -> Token:
        if self._peek().kind in VALUE_KINDS:
            return self._advance()
        raise self._error(_VALUE_MESSAGE, expected=_VALUE_EXPECTED)

    def _value_list(self) -> List[Token]:
        values = [self._value()]
        while self._match(TokenKind.COMMA):
            values.append(self._value())
        return values

    def _assignment_list(self) -> None:
        self._assignment()
        while self._match(TokenKind.COMMA):
            self._assignment()

    def _assignment(self) -> None:
        self._consume(TokenKind.IDENTIFIER, "Expected column name.", "column name")
        self._consume(TokenKind.EQUAL, "Expected '=' after column name.", "'='")
        self._value()

    def _condition(self) -> None:
        # NOT is lexed but has no production here
        self._term()
        while self._match(TokenKind.AND, TokenKind.OR):
            self._term()

    def _term(self) -> None:
        self._consume(TokenKind.IDENTIFIER, "Expected column name in condition.", "column name")
        if self._peek().kind in COMPARISON_KINDS:
            self._advance()
        else:
            raise self._error(
                "Expected a comparison operator.",
                expected=["=", "<", ">", "<=", ">=", "<>", "!="],
            )
        self._value()

    # ------------------------------------------------------------------ #
    # INSERT semantics
    # ------------------------------------------------------------------ #

    def _check_insert_semantics(self, columns: List[Column], values: List[Token]) -> None:
        if len(columns) != len(values):
            raise SQLArityError(SemanticErrorDetail.create_arity_mismatch(len(columns), len(values)))

        for column, value in zip(columns, values):
            if not is_value_compatible(value.kind, column.expected_type):
                raise SQLTypeError(SemanticErrorDetail.create_type_mismatch(
                    column=column.name,
                    expected_type=column.expected_type.value,
                    actual_type=describe_value_kind(value.kind),
                ))


def validate_tokens(
    tokens: Sequence[Token],
    vocabulary: Optional[KeywordVocabulary] = None,
    return_model: bool = False,
) -> Union[TokenKind, ParseResult]:
    """Validate a token sequence against the statement grammar.

    Args:
        tokens: Tokens from tokenize_sql(), ending with END_OF_INPUT
        vocabulary: Keyword table used for typo suggestions (defaults to DEFAULT_VOCABULARY)
        return_model: If True, returns ParseResult instead of raising

    Returns:
        If return_model=False: the validated statement kind
        If return_model=True: ParseResult

    Raises:
        SQLSyntaxError, SQLArityError, SQLTypeError: first failure (only when return_model=False)
    """
    try:
        statement = GrammarValidator(tokens, vocabulary).validate()
    except SQLValidationError as e:
        logger.debug(f"Grammar validation failed ({e.kind.value}): {e.message}")
        if return_model:
            return ParseResult.from_error(e)
        raise

    logger.debug(f"Validated {statement.value} statement ({len(tokens)} tokens)")
    if return_model:
        return ParseResult.from_success(statement.value)
    return statement
