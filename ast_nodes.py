"""AST node definitions for the Pascal subset.

This module defines the concrete AST node dataclasses built by the parser and
walked by the visitors (evaluator, translators, pretty-printer). Each node is
a dataclass carrying its operator, child nodes or names. The `NodeType` enum
names the node kinds for error messages and debugging.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the node
    kind (`NodeType`).
- The node set is closed. Every node implements `accept(visitor)` by calling
    the one `visit_*` method of `visitor.NodeVisitor` that matches its own
    class, so algorithms never branch on `node.type`.
- Children are owned by exactly one parent; nodes never point back up the
    tree or sideways to siblings.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, List, Optional, Union
from symbols import SymbolType

if TYPE_CHECKING:
    from visitor import NodeVisitor


class NodeType(Enum):
    NUMBER = auto()
    VARIABLE = auto()
    BINARY_OP = auto()
    UNARY_OP = auto()
    NO_OP = auto()
    ASSIGNMENT = auto()
    STATEMENT_LIST = auto()
    VAR_DECL = auto()
    BLOCK = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


class BinaryOperator(Enum):
    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    INTEGER_DIV = "div"
    FLOAT_DIV = "/"

    def __str__(self) -> str:
        return self.value


class UnaryOperator(Enum):
    PLUS = "+"
    MINUS = "-"

    def __str__(self) -> str:
        return self.value


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType

    def accept(self, visitor: NodeVisitor) -> Any:
        """Call the `visit_*` method of `visitor` matching this node class.

        Every concrete node overrides this; the base only fails loudly.
        """
        raise NotImplementedError(f"{type(self).__name__} does not accept visitors")


# Expression Nodes
@dataclass
class NumberNode(ASTNode):
    type: NodeType = NodeType.NUMBER
    value: Union[int, float] = 0

    @property
    def is_real(self) -> bool:
        return isinstance(self.value, float)

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_number(self)


@dataclass
class VariableNode(ASTNode):
    type: NodeType = NodeType.VARIABLE
    name: str = ""

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_variable(self)


@dataclass
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=lambda: NumberNode())
    operator: BinaryOperator = BinaryOperator.PLUS
    right: ASTNode = field(default_factory=lambda: NumberNode())

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_binary_op(self)


@dataclass
class UnaryOpNode(ASTNode):
    type: NodeType = NodeType.UNARY_OP
    operator: UnaryOperator = UnaryOperator.MINUS
    operand: ASTNode = field(default_factory=lambda: NumberNode())

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_unary_op(self)


# Statement Nodes
@dataclass
class NoOpNode(ASTNode):
    type: NodeType = NodeType.NO_OP

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_no_op(self)


@dataclass
class AssignmentNode(ASTNode):
    type: NodeType = NodeType.ASSIGNMENT
    target: str = ""
    value: ASTNode = field(default_factory=lambda: NumberNode())

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_assignment(self)


@dataclass
class StatementListNode(ASTNode):
    type: NodeType = NodeType.STATEMENT_LIST
    children: List[ASTNode] = field(default_factory=list)

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_statement_list(self)


# Declaration Nodes
@dataclass
class VarDeclNode(ASTNode):
    type: NodeType = NodeType.VAR_DECL
    names: List[str] = field(default_factory=list)
    var_type: SymbolType = SymbolType.INTEGER

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_var_decl(self)


@dataclass
class BlockNode(ASTNode):
    type: NodeType = NodeType.BLOCK
    declarations: List[VarDeclNode] = field(default_factory=list)
    compound: StatementListNode = field(default_factory=StatementListNode)

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_block(self)


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    name: Optional[str] = None
    block: BlockNode = field(default_factory=BlockNode)

    def accept(self, visitor: NodeVisitor) -> Any:
        return visitor.visit_program(self)
