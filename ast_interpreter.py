"""Tree-walking evaluator for the Pascal subset.

`Evaluator` is a `NodeVisitor` that keeps an accumulator (the value of the
last expression it computed) and an `Environment` of assigned variables.
Traversal is plain recursive dispatch through `accept()`; the Python call
stack is the traversal stack.

Numeric rules:
- Integer constants stay `int`, real constants are `float`; an operation
  mixing the two produces a `float`.
- `div` truncates toward zero (`-7 div 2 == -3`). With a real operand the
  truncated quotient is returned as a real.
- `/` always produces a real quotient.
- A zero divisor raises `DivisionByZeroError` for both divisions.

Declarations in a `var` section are accepted and ignored: evaluation does
not consult declared types.
"""

from typing import Dict
from ast_nodes import *
from symbols import Environment, Number
from visitor import NodeVisitor
from errors import DivisionByZeroError, UnboundVariableError, UndefinedOperatorError


def _truncating_div(lv: Number, rv: Number) -> Number:
    quotient = abs(lv) // abs(rv)
    # A zero quotient keeps its sign off so reals never come out as -0.0.
    if quotient and (lv < 0) != (rv < 0):
        quotient = -quotient
    return quotient


class Evaluator(NodeVisitor):
    def __init__(self):
        self.environment = Environment()
        self.accumulator: Number = 0

    def calculate(self, node: ASTNode) -> Number:
        """Evaluate `node` and return the accumulator."""
        node.accept(self)
        return self.accumulator

    def visit_program(self, node: ProgramNode) -> None:
        node.block.accept(self)

    def visit_block(self, node: BlockNode) -> None:
        for decl in node.declarations:
            decl.accept(self)
        node.compound.accept(self)

    def visit_var_decl(self, node: VarDeclNode) -> None:
        pass

    def visit_statement_list(self, node: StatementListNode) -> None:
        for child in node.children:
            child.accept(self)

    def visit_assignment(self, node: AssignmentNode) -> None:
        self.environment.assign(node.target, self.calculate(node.value))

    def visit_no_op(self, node: NoOpNode) -> None:
        pass

    def visit_variable(self, node: VariableNode) -> None:
        try:
            self.accumulator = self.environment.lookup(node.name)
        except KeyError:
            raise UnboundVariableError(node.name) from None

    def visit_number(self, node: NumberNode) -> None:
        self.accumulator = node.value

    def visit_binary_op(self, node: BinaryOpNode) -> None:
        lv = self.calculate(node.left)
        rv = self.calculate(node.right)
        match node.operator:
            case BinaryOperator.PLUS:
                self.accumulator = lv + rv
            case BinaryOperator.MINUS:
                self.accumulator = lv - rv
            case BinaryOperator.MUL:
                self.accumulator = lv * rv
            case BinaryOperator.INTEGER_DIV:
                if rv == 0:
                    raise DivisionByZeroError(node.operator)
                self.accumulator = _truncating_div(lv, rv)
            case BinaryOperator.FLOAT_DIV:
                if rv == 0:
                    raise DivisionByZeroError(node.operator)
                self.accumulator = lv / rv
            case _:
                raise UndefinedOperatorError(node.operator)

    def visit_unary_op(self, node: UnaryOpNode) -> None:
        value = self.calculate(node.operand)
        match node.operator:
            case UnaryOperator.PLUS:
                self.accumulator = +value
            case UnaryOperator.MINUS:
                self.accumulator = -value
            case _:
                raise UndefinedOperatorError(node.operator)


def interpret_program(prog: ASTNode) -> Dict[str, Number]:
    """Evaluate a program (or any node) and return the final variables.

    The mapping is keyed by the spelling each variable was first assigned
    with.
    """
    evaluator = Evaluator()
    evaluator.calculate(prog)
    return evaluator.environment.as_dict()
