"""
Command-line entry point for exprlib.

Usage
-----
    python -m exprlib <command> [options]

Commands
--------
    eval        Evaluate an expression and print the signed result
    tokens      Print the token stream of an expression
    ast         Print the parsed expression tree
    selftest    Run the built-in (or a YAML) table of expressions
"""

from __future__ import annotations

import argparse
import sys
import textwrap
from collections.abc import Sequence
from typing import TextIO

from exprlib import __version__, evaluate
from exprlib.core.expressions import BinaryOp, ExprNode, Literal, UnaryOp
from exprlib.diagnostics.collector import DiagnosticCollector
from exprlib.parser.errors import ExpressionError
from exprlib.parser.parser import parse
from exprlib.parser.scanner import Scanner
from exprlib.selftest import (
    DEFAULT_CASES,
    SelfTestConfigError,
    format_result,
    load_cases,
    run_cases,
)


def _report(diag: DiagnosticCollector) -> None:
    if len(diag):
        sys.stderr.write(diag.format_all() + "\n")


def dump_tree(node: ExprNode | None, out: TextIO) -> None:
    """Write an indented, one-node-per-line rendering of *node*."""
    stack: list[tuple[ExprNode | None, int]] = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        pad = "  " * depth
        if current is None:
            out.write(f"{pad}<empty>\n")
        elif isinstance(current, Literal):
            out.write(f"{pad}Literal {current.token.lexeme}\n")
        elif isinstance(current, BinaryOp):
            out.write(f"{pad}Binary {current.op}\n")
            stack.append((current.right, depth + 1))
            stack.append((current.left, depth + 1))
        elif isinstance(current, UnaryOp):
            out.write(f"{pad}Unary {current.op}\n")
            stack.append((current.operand, depth + 1))
        else:
            out.write(f"{pad}<{type(current).__name__}>\n")


# ═══════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════


def cmd_eval(args: argparse.Namespace) -> int:
    """Handle the 'eval' command."""
    diag = DiagnosticCollector()
    try:
        value = evaluate(args.expression, strict=args.strict, diagnostics=diag, filename="<expr>")
    except ExpressionError:
        _report(diag)
        return 1
    _report(diag)
    sys.stdout.write(f"{value}\n")
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the 'tokens' command."""
    diag = DiagnosticCollector()
    for tok in Scanner(args.expression, "<expr>", diag).tokenize():
        sys.stdout.write(f"{tok.kind.name} {tok.lexeme}\n")
    _report(diag)
    return 1 if diag.has_errors() else 0


def cmd_ast(args: argparse.Namespace) -> int:
    """Handle the 'ast' command."""
    tree, diag = parse(args.expression, "<expr>")
    dump_tree(tree, sys.stdout)
    _report(diag)
    return 1 if diag.has_errors() else 0


def cmd_selftest(args: argparse.Namespace) -> int:
    """Handle the 'selftest' command."""
    if args.cases:
        try:
            cases = load_cases(args.cases)
        except SelfTestConfigError as e:
            sys.stderr.write(f"error: {e}\n")
            return 1
    else:
        cases = list(DEFAULT_CASES)

    results = run_cases(cases)
    for result in results:
        sys.stdout.write(format_result(result) + "\n")
        if args.verbose:
            for d in result.diagnostics:
                sys.stdout.write(f"  {d}\n")
    failed = sum(1 for r in results if not r.passed)
    sys.stdout.write(f"{len(results) - failed} passed, {failed} failed\n")
    return 1 if failed else 0


# ═══════════════════════════════════════════════════════════════════════════
# ARGUMENT PARSER
# ═══════════════════════════════════════════════════════════════════════════


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the exprlib CLI."""
    parser = argparse.ArgumentParser(
        prog="exprlib",
        description="Scan, parse and evaluate integer arithmetic expressions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            examples:
              %(prog)s eval "(4 + 3) * 8"
              %(prog)s eval --strict "12abc + 3"
              %(prog)s tokens "4 + 3 * 8"
              %(prog)s ast "10 - 4 - 3 - 2"
              %(prog)s selftest --cases cases.yaml
        """),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    p_eval = subparsers.add_parser("eval", help="Evaluate an expression")
    p_eval.add_argument("expression", help="Expression text")
    p_eval.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Fail on any diagnostic, including unconsumed trailing input",
    )
    p_eval.set_defaults(func=cmd_eval)

    p_tokens = subparsers.add_parser("tokens", help="Print the token stream")
    p_tokens.add_argument("expression", help="Expression text")
    p_tokens.set_defaults(func=cmd_tokens)

    p_ast = subparsers.add_parser("ast", help="Print the expression tree")
    p_ast.add_argument("expression", help="Expression text")
    p_ast.set_defaults(func=cmd_ast)

    p_selftest = subparsers.add_parser("selftest", help="Run the expression table")
    p_selftest.add_argument(
        "--cases",
        default=None,
        help="YAML file with a 'cases' list (default: built-in table)",
    )
    p_selftest.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Show diagnostics for each case",
    )
    p_selftest.set_defaults(func=cmd_selftest)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except KeyboardInterrupt:
        sys.stderr.write("\nInterrupted.\n")
        return 130


if __name__ == "__main__":
    sys.exit(main())
