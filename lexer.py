"""
Lexer for the Pascal subset.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    hands out `Token` objects (defined in `tokens.py`) one at a time through
    `get_next_token()`. The parser pulls tokens on demand; `tokenize()`
    collects the whole stream for debugging and tests.
- It recognizes reserved words (`program`, `var`, `begin`, `end`, `integer`,
    `real`, `div`) case-insensitively, identifiers, integer and real
    constants, the `:=` assignment operator, punctuation and the arithmetic
    operators. Whitespace and `{ ... }` comments are skipped.

Examples:
    Input:  "BEGIN x := 2.5 div 1 END."
    Tokens: [BEGIN, IDENTIFIER('x'), ASSIGN, REAL_CONST('2.5'), INTEGER_DIV,
             INTEGER_CONST('1'), END, DOT, EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- A number only becomes a real constant when the `.` is followed by a digit,
    so the final `end.` of a program (or `3.`) keeps its `DOT` token.
- Identifier spelling is preserved verbatim in the token value; only the
    keyword check lower-cases the run.
- Comments do not nest. An unterminated comment swallows the rest of input.
- Character classes are ASCII only. Non-ASCII digits, letters or spaces
    are unexpected characters and raise `LexicalError`.
"""

from __future__ import annotations
import string
from typing import Optional, List
from tokens import Token, TokenType
from errors import LexicalError


RESERVED_KEYWORDS = {
    "program": TokenType.PROGRAM,
    "var": TokenType.VAR,
    "begin": TokenType.BEGIN,
    "end": TokenType.END,
    "integer": TokenType.INTEGER,
    "real": TokenType.REAL,
    "div": TokenType.INTEGER_DIV,
}

WHITESPACE = frozenset(string.whitespace)
IDENT_START = frozenset(string.ascii_letters + "_")
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch in string.digits


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MUL,
    "/": TokenType.FLOAT_DIV,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMICOLON,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
}


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def error(self) -> LexicalError:
        return LexicalError(self.current_char, self.pos, self.line, self.column)

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char in WHITESPACE:
            self.advance()

    def skip_comment(self) -> None:
        """Skip a `{ ... }` comment, including both braces."""
        while self.current_char is not None and self.current_char != "}":
            self.advance()

        if self.current_char == "}":
            self.advance()

    def number(self) -> Token:
        """Scan an integer constant, or a real constant if `.digit` follows."""
        start = self.pos
        result = []

        while is_digit(self.current_char):
            result.append(self.current_char)
            self.advance()

        peek = self.peek_char()
        if self.current_char == "." and is_digit(peek):
            result.append(self.current_char)
            self.advance()
            while is_digit(self.current_char):
                result.append(self.current_char)
                self.advance()
            return Token(TokenType.REAL_CONST, "".join(result), start)

        return Token(TokenType.INTEGER_CONST, "".join(result), start)

    def identifier(self) -> Token:
        """Scan an identifier, mapping it to a keyword token when reserved."""
        start = self.pos
        result = []

        while self.current_char in IDENT_CHARS:
            result.append(self.current_char)
            self.advance()

        word = "".join(result)
        keyword = RESERVED_KEYWORDS.get(word.lower())
        if keyword is not None:
            return Token(keyword, None, start)
        return Token(TokenType.IDENTIFIER, word, start)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while self.current_char is not None:
            if self.current_char in WHITESPACE:
                self.skip_whitespace()
                continue

            if self.current_char == "{":
                self.skip_comment()
                continue

            if is_digit(self.current_char):
                return self.number()

            if self.current_char in IDENT_START:
                return self.identifier()

            # `:=` has to be checked before the lone colon.
            if self.current_char == ":":
                start = self.pos
                self.advance()
                if self.current_char == "=":
                    self.advance()
                    return Token(TokenType.ASSIGN, None, start)
                return Token(TokenType.COLON, None, start)

            token_type = SINGLE_CHAR_TOKENS.get(self.current_char)
            if token_type is not None:
                start = self.pos
                self.advance()
                return Token(token_type, None, start)

            raise self.error()

        return Token(TokenType.EOF, None, self.pos)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, ending with EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
