"""Translate arithmetic expression trees into linear notations.

`PostfixTranslator` renders reverse Polish notation (`2 3 4 * +`) and
`LispTranslator` renders fully parenthesized prefix notation
(`(+ 2 (* 3 4))`). Both accept only number literals and binary operators.
Unary operators have no spelling in either notation, so a `UnaryOpNode`
anywhere in the tree raises `UnsupportedTranslationError`; so does any
variable, statement or declaration node. Nothing is returned on failure.
"""

from __future__ import annotations
from ast_nodes import *
from visitor import NodeVisitor
from errors import UndefinedOperatorError, UnsupportedTranslationError


class ExpressionTranslator(NodeVisitor):
    notation = ""

    def __init__(self):
        self.result = ""

    def translate(self, node: ASTNode) -> str:
        node.accept(self)
        return self.result

    def unsupported(self, node: ASTNode) -> UnsupportedTranslationError:
        return UnsupportedTranslationError(node.type, self.notation)

    @staticmethod
    def operator_symbol(node: BinaryOpNode) -> str:
        if not isinstance(node.operator, BinaryOperator):
            raise UndefinedOperatorError(node.operator)
        return node.operator.value

    def visit_number(self, node: NumberNode) -> None:
        self.result = str(node.value)

    def visit_unary_op(self, node: UnaryOpNode) -> None:
        raise self.unsupported(node)

    def visit_variable(self, node: VariableNode) -> None:
        raise self.unsupported(node)

    def visit_program(self, node: ProgramNode) -> None:
        raise self.unsupported(node)

    def visit_block(self, node: BlockNode) -> None:
        raise self.unsupported(node)

    def visit_var_decl(self, node: VarDeclNode) -> None:
        raise self.unsupported(node)

    def visit_statement_list(self, node: StatementListNode) -> None:
        raise self.unsupported(node)

    def visit_assignment(self, node: AssignmentNode) -> None:
        raise self.unsupported(node)

    def visit_no_op(self, node: NoOpNode) -> None:
        raise self.unsupported(node)


class PostfixTranslator(ExpressionTranslator):
    notation = "postfix"

    def visit_binary_op(self, node: BinaryOpNode) -> None:
        op = self.operator_symbol(node)
        left = self.translate(node.left)
        right = self.translate(node.right)
        self.result = f"{left} {right} {op}"


class LispTranslator(ExpressionTranslator):
    notation = "lisp"

    def visit_binary_op(self, node: BinaryOpNode) -> None:
        op = self.operator_symbol(node)
        left = self.translate(node.left)
        right = self.translate(node.right)
        self.result = f"({op} {left} {right})"


TRANSLATORS = {
    PostfixTranslator.notation: PostfixTranslator,
    LispTranslator.notation: LispTranslator,
}
