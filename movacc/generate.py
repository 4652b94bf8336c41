"""Walk an AST and emit assembly for it."""

from __future__ import annotations

from .codegen import CodeGenerator
from .errors import CompileError
from .symbols import SymbolTable
from .syntax_tree import ASTNode, NodeOp


def generate(
    node: ASTNode, reg: int | None, codegen: CodeGenerator, symbols: SymbolTable
) -> int | None:
    """Emit code for ``node`` and return the register holding its result.

    ``reg`` is the register an lvalue store should take its value from.
    """
    left = generate(node.left, None, codegen, symbols) if node.left else None
    right = generate(node.right, left, codegen, symbols) if node.right else None

    op = node.op
    if op == NodeOp.ADD:
        return codegen.add(left, right)
    if op == NodeOp.SUB:
        return codegen.sub(left, right)
    if op == NodeOp.MUL:
        return codegen.mul(left, right)
    if op == NodeOp.DIV:
        return codegen.div(left, right)
    if op == NodeOp.IDENTIFIER:
        return codegen.load_global(symbols.name_of(node.value))
    if op == NodeOp.LVIDENTIFIER:
        if reg is None:
            raise CompileError("No value to store into a variable")
        return codegen.store_global(reg, symbols.name_of(node.value))
    if op == NodeOp.INTLIT:
        return codegen.load_int(node.value)
    if op == NodeOp.ASSIGN:
        return right
    raise CompileError(f"Unknown AST operation {op} in generate()")