"""Visitor protocol for the AST.

`NodeVisitor` declares one abstract `visit_*` method per node class in
`ast_nodes.py`. A node's `accept()` calls the matching method, so the pair
(node class, visitor class) selects the behaviour without any `isinstance`
checks or `match` on `node.type` (double dispatch).

Adding an algorithm means writing a new `NodeVisitor` subclass; the node
classes stay untouched. Adding a node class means adding an abstract method
here, after which every visitor that does not implement it fails to
instantiate with `TypeError`.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any
from ast_nodes import *


class NodeVisitor(ABC):
    def visit(self, node: ASTNode) -> Any:
        """Dispatch `node` to the matching `visit_*` method."""
        return node.accept(self)

    @abstractmethod
    def visit_program(self, node: ProgramNode) -> Any: ...

    @abstractmethod
    def visit_block(self, node: BlockNode) -> Any: ...

    @abstractmethod
    def visit_var_decl(self, node: VarDeclNode) -> Any: ...

    @abstractmethod
    def visit_statement_list(self, node: StatementListNode) -> Any: ...

    @abstractmethod
    def visit_assignment(self, node: AssignmentNode) -> Any: ...

    @abstractmethod
    def visit_no_op(self, node: NoOpNode) -> Any: ...

    @abstractmethod
    def visit_variable(self, node: VariableNode) -> Any: ...

    @abstractmethod
    def visit_number(self, node: NumberNode) -> Any: ...

    @abstractmethod
    def visit_binary_op(self, node: BinaryOpNode) -> Any: ...

    @abstractmethod
    def visit_unary_op(self, node: UnaryOpNode) -> Any: ...
