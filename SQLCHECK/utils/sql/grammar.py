"""Grammars for the SQLCHECK statement subset.

Two grammars live here:
- SQL_LEXER_GRAMMAR: Lark terminal definitions used by the lexer. Only the
  terminals matter; the `start` rule exists so Lark keeps every terminal.
- STATEMENT_GRAMMAR: the statement grammar enforced by the recursive-descent
  validator (validator.py). It is reference text, not fed to Lark.
"""

# NOTE: Keywords are not Lark terminals. Every word is lexed as WORD and then
# classified against the KeywordVocabulary, so the keyword table stays a single
# immutable value shared by the lexer and the validator.

SQL_LEXER_GRAMMAR = r"""
start: _token*

_token: WORD
      | NUMBER
      | STRING_LITERAL
      | LESS_EQUAL
      | NOT_EQUAL
      | GREATER_EQUAL
      | LESS_THAN
      | GREATER_THAN
      | EQUAL
      | COMMA
      | SEMICOLON
      | LEFT_PAREN
      | RIGHT_PAREN
      | ASTERISK

// Words: keywords or identifiers (classified after lexing)
WORD: /[A-Za-z_][A-Za-z0-9_]*/

// Numbers: a trailing '.' without a digit is not part of the number
NUMBER: /[0-9]+(\.[0-9]+)?/

// Single-quoted strings, no escapes
STRING_LITERAL: /'[^']*'/

// Comparison operators (two-character forms are tried first)
LESS_EQUAL: "<="
NOT_EQUAL: "<>" | "!="
GREATER_EQUAL: ">="
LESS_THAN: "<"
GREATER_THAN: ">"
EQUAL: "="

// Punctuation
COMMA: ","
SEMICOLON: ";"
LEFT_PAREN: "("
RIGHT_PAREN: ")"
ASTERISK: "*"

WS: /[ \t\n\r\f\v]+/
%ignore WS
"""


STATEMENT_GRAMMAR = """\
statement      := selectStmt | insertStmt | updateStmt | deleteStmt
selectStmt     := SELECT columnList FROM tableList (WHERE condition)? ';'
insertStmt     := INSERT INTO IDENTIFIER ('(' columnDeclList ')')? VALUES '(' valueList ')' ';'
updateStmt     := UPDATE IDENTIFIER SET assignmentList (WHERE condition)? ';'
deleteStmt     := DELETE FROM IDENTIFIER (WHERE condition)? ';'
columnList     := '*' | IDENTIFIER (',' IDENTIFIER)*
columnDeclList := '*' | IDENTIFIER (',' IDENTIFIER)*
tableList      := IDENTIFIER (',' IDENTIFIER)*
assignmentList := IDENTIFIER '=' value (',' IDENTIFIER '=' value)*
valueList      := value (',' value)*
condition      := term ((AND | OR) term)*
term           := IDENTIFIER compareOp value
value          := STRING | NUMBER | IDENTIFIER
compareOp      := '=' | '<' | '>' | '<=' | '>=' | '<>' | '!='
"""
