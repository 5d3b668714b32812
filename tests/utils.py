from lexer import Lexer
from parser import Parser
from ast_interpreter import Evaluator


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text)).parse()


def evaluate(text: str) -> Evaluator:
    """Parse and evaluate `text`, returning the evaluator for inspection."""
    evaluator = Evaluator()
    evaluator.calculate(parse_text(text))
    return evaluator
