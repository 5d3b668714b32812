"""
Parser for the Pascal subset.

Overview and approach:
- This parser is a hand-written recursive-descent parser. Each grammar rule
    has one `parse_*` method and the methods call each other in the shape of
    the grammar:

        program      := [ 'program' IDENT ';' ] block '.' EOF
        block        := declarations compound
        declarations := ( 'var' (varDecl ';')+ )?
        varDecl      := IDENT (',' IDENT)* ':' typeSpec
        typeSpec     := 'integer' | 'real'
        compound     := 'begin' statementList 'end'
        statementList:= statement (';' statement)*
        statement    := compound | assignment | /* empty */
        assignment   := IDENT ':=' expr
        expr         := term (('+' | '-') term)*
        term         := factor (('*' | 'div' | '/') factor)*
        factor       := ('+' | '-') factor | INT | REAL | '(' expr ')' | IDENT

Key points:
- The parser pulls tokens from the lexer and holds exactly one token of
    lookahead in `self.current`. `expect()` is the only method that consumes
    it: it checks the kind and pulls the next token, or raises `ParseError`.
- Operator precedence is encoded by call depth (`parse_expression` ->
    `parse_term` -> `parse_factor`). The `while` loops in the first two build
    left-associative chains; unary `+`/`-` recurse into `parse_factor`, so
    `- - b` gives two nested `UnaryOpNode`s.
- A statement that starts with neither `begin` nor an identifier consumes no
    tokens and becomes a `NoOpNode`. That is how `;;` and a trailing `;`
    before `end` are accepted.
- There is no error recovery: the first mismatch raises.
- Both nesting of compounds and of parenthesized expressions use the Python
    call stack, so pathological nesting depth ends in `RecursionError`.
"""

from __future__ import annotations
from typing import Dict, List
from tokens import Token, TokenType
from lexer import Lexer
from ast_nodes import *
from symbols import SymbolType
from errors import ParseError


EXPR_OPERATORS: Dict[TokenType, BinaryOperator] = {
    TokenType.PLUS: BinaryOperator.PLUS,
    TokenType.MINUS: BinaryOperator.MINUS,
}

TERM_OPERATORS: Dict[TokenType, BinaryOperator] = {
    TokenType.MUL: BinaryOperator.MUL,
    TokenType.INTEGER_DIV: BinaryOperator.INTEGER_DIV,
    TokenType.FLOAT_DIV: BinaryOperator.FLOAT_DIV,
}

UNARY_OPERATORS: Dict[TokenType, UnaryOperator] = {
    TokenType.PLUS: UnaryOperator.PLUS,
    TokenType.MINUS: UnaryOperator.MINUS,
}

TYPE_SPECS: Dict[TokenType, SymbolType] = {
    TokenType.INTEGER: SymbolType.INTEGER,
    TokenType.REAL: SymbolType.REAL,
}


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current: Token = self.lexer.get_next_token()

    def error(self, *expected: TokenType) -> ParseError:
        return ParseError(expected, self.current, self.current.pos)

    def expect(self, expected_type: TokenType) -> Token:
        """Expect and consume token of given type."""
        if self.current.type != expected_type:
            raise self.error(expected_type)
        token = self.current
        self.current = self.lexer.get_next_token()
        return token

    def parse_program(self) -> ProgramNode:
        """Parse a complete program: [program IDENT ;] block . EOF"""
        name = None
        if self.current.type == TokenType.PROGRAM:
            self.expect(TokenType.PROGRAM)
            name = self.expect(TokenType.IDENTIFIER).value
            self.expect(TokenType.SEMICOLON)

        block = self.parse_block()
        self.expect(TokenType.DOT)
        self.expect(TokenType.EOF)
        return ProgramNode(name=name, block=block)

    def parse_block(self) -> BlockNode:
        declarations = self.parse_declarations()
        compound = self.parse_compound()
        return BlockNode(declarations=declarations, compound=compound)

    def parse_declarations(self) -> List[VarDeclNode]:
        """Parse an optional `var` section. Types are recorded, never checked."""
        declarations: List[VarDeclNode] = []
        if self.current.type != TokenType.VAR:
            return declarations

        self.expect(TokenType.VAR)
        # At least one declaration must follow `var`.
        declarations.append(self.parse_variable_declaration())
        self.expect(TokenType.SEMICOLON)
        while self.current.type == TokenType.IDENTIFIER:
            declarations.append(self.parse_variable_declaration())
            self.expect(TokenType.SEMICOLON)
        return declarations

    def parse_variable_declaration(self) -> VarDeclNode:
        """Parse `a, b, c : type`."""
        names = [self.expect(TokenType.IDENTIFIER).value]
        while self.current.type == TokenType.COMMA:
            self.expect(TokenType.COMMA)
            names.append(self.expect(TokenType.IDENTIFIER).value)

        self.expect(TokenType.COLON)
        var_type = self.parse_type()
        return VarDeclNode(names=names, var_type=var_type)

    def parse_type(self) -> SymbolType:
        var_type = TYPE_SPECS.get(self.current.type)
        if var_type is None:
            raise self.error(*TYPE_SPECS)
        self.expect(self.current.type)
        return var_type

    def parse_compound(self) -> StatementListNode:
        """Parse `begin statementList end`."""
        self.expect(TokenType.BEGIN)
        node = self.parse_statement_list()
        self.expect(TokenType.END)
        return node

    def parse_statement_list(self) -> StatementListNode:
        node = StatementListNode(children=[self.parse_statement()])
        while self.current.type == TokenType.SEMICOLON:
            self.expect(TokenType.SEMICOLON)
            node.children.append(self.parse_statement())
        return node

    def parse_statement(self) -> ASTNode:
        match self.current.type:
            case TokenType.BEGIN:
                return self.parse_compound()
            case TokenType.IDENTIFIER:
                return self.parse_assignment()
            case _:
                return NoOpNode()

    def parse_assignment(self) -> AssignmentNode:
        target = self.expect(TokenType.IDENTIFIER).value
        self.expect(TokenType.ASSIGN)
        return AssignmentNode(target=target, value=self.parse_expression())

    def parse_expression(self) -> ASTNode:
        """expr := term (('+' | '-') term)*"""
        node = self.parse_term()
        while self.current.type in EXPR_OPERATORS:
            operator = EXPR_OPERATORS[self.current.type]
            self.expect(self.current.type)
            node = BinaryOpNode(left=node, operator=operator, right=self.parse_term())
        return node

    def parse_term(self) -> ASTNode:
        """term := factor (('*' | 'div' | '/') factor)*"""
        node = self.parse_factor()
        while self.current.type in TERM_OPERATORS:
            operator = TERM_OPERATORS[self.current.type]
            self.expect(self.current.type)
            node = BinaryOpNode(left=node, operator=operator, right=self.parse_factor())
        return node

    def parse_factor(self) -> ASTNode:
        token = self.current

        match token.type:
            case TokenType.PLUS | TokenType.MINUS:
                self.expect(token.type)
                operand = self.parse_factor()
                return UnaryOpNode(operator=UNARY_OPERATORS[token.type], operand=operand)

            case TokenType.INTEGER_CONST:
                self.expect(TokenType.INTEGER_CONST)
                return NumberNode(value=int(token.value))

            case TokenType.REAL_CONST:
                self.expect(TokenType.REAL_CONST)
                return NumberNode(value=float(token.value))

            case TokenType.LPAREN:
                self.expect(TokenType.LPAREN)
                node = self.parse_expression()
                self.expect(TokenType.RPAREN)
                return node

            case TokenType.IDENTIFIER:
                self.expect(TokenType.IDENTIFIER)
                return VariableNode(name=token.value)

            case _:
                raise self.error(
                    TokenType.PLUS,
                    TokenType.MINUS,
                    TokenType.INTEGER_CONST,
                    TokenType.REAL_CONST,
                    TokenType.LPAREN,
                    TokenType.IDENTIFIER,
                )

    def parse(self) -> ASTNode:
        """Parse a full program, or a lone expression when the text is not one."""
        if self.current.type in (TokenType.PROGRAM, TokenType.VAR, TokenType.BEGIN):
            return self.parse_program()

        node = self.parse_expression()
        self.expect(TokenType.EOF)
        return node
