"""Command line shell around the SQL validator.

Interactive mode reads one query per line, echoes the tokens, and prints the
verdict until the exit command (or end of input). Batch mode validates every
non-blank line of a file.

Usage:
    python -m SQLCHECK.cli
    python -m SQLCHECK.cli --file queries.sql
    python -m SQLCHECK.cli --no-tokens --log-level DEBUG
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

import yaml
from pydantic import ValidationError

from SQLCHECK.config import CLISettings, LoggingSettings, get_cli_settings, get_logging_settings
from SQLCHECK.utils.logging import get_logger, setup_logging
from SQLCHECK.utils.sql import STATEMENT_GRAMMAR, check_many, check_sql, tokenize_sql

logger = get_logger(__name__)


def print_tokens(sql: str, out: TextIO) -> None:
    """Print the token stream of `sql` (nothing if it does not tokenize)."""
    result = tokenize_sql(sql, return_model=True)
    if not result.success:
        return
    out.write("Tokens:\n")
    for token in result.tokens:
        if token.kind == "END_OF_INPUT":
            continue
        out.write(f"  Type: {token.kind}, Lexeme: '{token.lexeme}'\n")


def run_interactive(
    settings: CLISettings,
    show_tokens: bool,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Read-validate-print loop. Returns the process exit status."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    out.write(f"Enter SQL query (or '{settings.exit_command}' to quit):\n")
    checked = 0
    while True:
        out.write(settings.prompt)
        out.flush()
        line = stdin.readline()
        if not line:
            break
        sql = line.rstrip("\r\n")
        if sql.strip() == settings.exit_command:
            break
        
        out.write(f"Validating: {sql}\n")
        if show_tokens:
            print_tokens(sql, out)
        result = check_sql(sql)
        out.write(f"{result.get_summary()}\n\n")
        checked += 1
    
    logger.info(f"Interactive session ended after {checked} queries")
    return 0


def run_batch(path: Path, out: Optional[TextIO] = None) -> int:
    """Validate each non-blank line of `path`. Returns 1 if any line failed."""
    out = out or sys.stdout
    lines = path.read_text(encoding="utf-8").splitlines()
    numbered = [(n, line) for n, line in enumerate(lines, 1) if line.strip()]
    results = check_many(line for _, line in numbered)
    
    failed = 0
    for (line_no, _), result in zip(numbered, results):
        if result.ok:
            out.write(f"[OK] line {line_no}: {result.statement}\n")
        else:
            failed += 1
            first_line = result.diagnostics[0].splitlines()[0]
            out.write(f"[FAIL] line {line_no}: {first_line}\n")
    
    out.write(f"\n{len(results) - failed} valid, {failed} invalid\n")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlcheck",
        description="Check SELECT/INSERT/UPDATE/DELETE statements without executing them.",
    )
    parser.add_argument("--file", type=Path, help="Validate each non-blank line of this file")
    parser.add_argument("--config", help="Path to an alternative config.yaml")
    parser.add_argument("--log-level", help="Override the configured logging level")
    tokens = parser.add_mutually_exclusive_group()
    tokens.add_argument("--show-tokens", dest="show_tokens", action="store_true", default=None,
                        help="Echo the token stream before each verdict")
    tokens.add_argument("--no-tokens", dest="show_tokens", action="store_false",
                        help="Do not echo tokens")
    parser.add_argument("--grammar", action="store_true", help="Print the accepted grammar and exit")
    return parser


def _load_settings(config_path: Optional[str]) -> Tuple[LoggingSettings, CLISettings]:
    return get_logging_settings(config_path), get_cli_settings(config_path)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    
    try:
        log_settings, cli_settings = _load_settings(args.config)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        # Configuration is unusable; log with defaults and bail out
        setup_logging(level=args.log_level or LoggingSettings().level)
        logger.error(f"Cannot load configuration: {e}")
        return 2
    
    setup_logging(
        level=args.log_level or log_settings.level,
        format_type=log_settings.format_type,
        log_to_file=log_settings.log_to_file,
        log_file=log_settings.log_file,
    )
    
    if args.grammar:
        sys.stdout.write(STATEMENT_GRAMMAR)
        return 0
    
    if args.file:
        if not args.file.exists():
            logger.error(f"File not found: {args.file}")
            return 2
        try:
            return run_batch(args.file)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read {args.file}: {e}")
            return 2
    
    show_tokens = cli_settings.show_tokens if args.show_tokens is None else args.show_tokens
    return run_interactive(cli_settings, show_tokens)


if __name__ == "__main__":
    sys.exit(main())
