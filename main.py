from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, Sequence
from tokens import Token
from lexer import Lexer
from parser import Parser
from ast_nodes import ASTNode, ProgramNode
from ast_interpreter import Evaluator
from pretty_printer import PrettyPrinter
from translators import TRANSLATORS

log = logging.getLogger("tinypascal")

SAMPLE_PROGRAM = """
Begin
  begin
    nUmber := 2;
    a := number;
    b := 10 * a + 10 * number DIV 4;
    _c := a - - b
  end;
  x := 11;
  number := 3;
END.
"""

# Everything the core raises derives from one of these.
REPORTED_ERRORS = (SyntaxError, NameError, ArithmeticError, ValueError, RuntimeError)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(format="{message}", style="{")
    if verbose:
        log.setLevel(logging.INFO)


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()


def parse(text: str) -> ASTNode:
    """Parse source text into an AST (a program or a lone expression)."""
    return Parser(Lexer(text)).parse()


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    translations: Sequence[str] = (),
) -> bool:
    """Process one input: lex, parse, evaluate and optionally translate.

    Programs print their final variables; lone expressions print their value
    followed by the requested translations. Returns False when an error was
    reported.
    """
    try:
        if print_tokens or log.isEnabledFor(logging.INFO):
            tokens = lex(text)
            log.info("lexed %d tokens", len(tokens))
        if print_tokens:
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens):
                print(f"  {i:3}: {token}")

        ast = parse(text)
        log.info("parsed %s", ast.type)
        if print_ast:
            print("\nAST:")
            print(PrettyPrinter.print_ast(ast))

        evaluator = Evaluator()
        value = evaluator.calculate(ast)
        log.info("evaluated %s, %d variable(s) assigned", ast.type, len(evaluator.environment))

        if isinstance(ast, ProgramNode):
            for name, var_value in evaluator.environment.items():
                print(f"{name} = {var_value}")
            return True

        print(value)
        for notation in translations:
            print(f"{notation}: {TRANSLATORS[notation]().translate(ast)}")
        return True
    except REPORTED_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return False


def interactive_mode(print_tokens: bool = False, print_ast: bool = False) -> None:
    """Read one program or expression per line until 'quit'."""
    print("\nInteractive Pascal Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nExiting...")
            break

        if line.lower() in ("quit", "exit"):
            print("Goodbye!")
            break
        if not line:
            continue

        process_program(
            line,
            print_tokens=print_tokens,
            print_ast=print_ast,
            translations=tuple(TRANSLATORS),
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate a Pascal-subset program or translate an arithmetic expression"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--file", "-f", dest="file", help="Path to source file to process")
    group.add_argument(
        "--expr", "-e", dest="expr", help="Arithmetic expression to evaluate and translate"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument("--print-ast", dest="print_ast", action="store_true", help="Print AST")
    parser.add_argument(
        "--translate",
        dest="translate",
        choices=[*TRANSLATORS, "all"],
        default="all",
        help="Notation(s) used for --expr output",
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true", help="Log pipeline stages"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    translations: Sequence[str] = ()
    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}", file=sys.stderr)
            return 1
    elif args.expr is not None:
        text = args.expr
        translations = tuple(TRANSLATORS) if args.translate == "all" else (args.translate,)
    else:
        log.info("no input given, running the bundled sample program")
        text = SAMPLE_PROGRAM

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        translations=translations,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
