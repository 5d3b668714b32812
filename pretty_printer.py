"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node)` which renders an AST into a
readable multi-line string. The printer is a `NodeVisitor` like the
evaluator and the translators, and is intended for debugging, tests and the
command-line `--print-ast` option rather than for producing source code.

Examples:
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from typing import List
from ast_nodes import *
from visitor import NodeVisitor


class PrettyPrinter(NodeVisitor):
    def __init__(self):
        self.lines: List[str] = []
        self.indent = 0
        self.prefix = ""

    @staticmethod
    def print_ast(node: ASTNode) -> str:
        """Pretty print AST and return as string."""
        printer = PrettyPrinter()
        node.accept(printer)
        return "\n".join(printer.lines)

    def emit(self, text: str) -> None:
        self.lines.append(f"{' ' * self.indent}{self.prefix}{text}")
        self.prefix = ""

    def child(self, node: ASTNode, prefix: str = "", step: int = 2) -> None:
        self.indent += step
        self.prefix = prefix
        node.accept(self)
        self.indent -= step

    def visit_program(self, node: ProgramNode) -> None:
        self.emit(f"Program({node.name})" if node.name else "Program")
        self.child(node.block, "block: ")

    def visit_block(self, node: BlockNode) -> None:
        self.emit("Block")
        for i, decl in enumerate(node.declarations):
            self.child(decl, f"decl[{i}]: ", 4)
        self.child(node.compound, "body: ", 4)

    def visit_var_decl(self, node: VarDeclNode) -> None:
        self.emit(f"VarDecl({', '.join(node.names)}: {node.var_type})")

    def visit_statement_list(self, node: StatementListNode) -> None:
        self.emit("StatementList")
        for i, stmt in enumerate(node.children):
            self.child(stmt, f"stmt[{i}]: ", 4)

    def visit_assignment(self, node: AssignmentNode) -> None:
        self.emit(f"Assignment({node.target})")
        self.child(node.value, "value: ")

    def visit_no_op(self, node: NoOpNode) -> None:
        self.emit("NoOp")

    def visit_variable(self, node: VariableNode) -> None:
        self.emit(f"Variable({node.name})")

    def visit_number(self, node: NumberNode) -> None:
        kind = "Real" if node.is_real else "Integer"
        self.emit(f"{kind}Literal({node.value})")

    def visit_binary_op(self, node: BinaryOpNode) -> None:
        self.emit(f"BinaryOp({node.operator})")
        self.child(node.left, "left: ")
        self.child(node.right, "right: ")

    def visit_unary_op(self, node: UnaryOpNode) -> None:
        self.emit(f"UnaryOp({node.operator})")
        self.child(node.operand)
