import io

import pytest

from movacc.codegen import CodeGenerator
from movacc.errors import CompileError
from movacc.generate import generate
from movacc.symbols import SymbolTable
from movacc.syntax_tree import ASTNode, NodeOp, make_leaf, make_node


def _setup():
    out = io.StringIO()
    return out, CodeGenerator(out), SymbolTable()


def test_literal_is_loaded():
    out, cg, symbols = _setup()
    assert generate(make_leaf(NodeOp.INTLIT, 7), None, cg, symbols) == 0
    assert out.getvalue() == "\tmovq\t$7, %r8\n"


def test_binary_add_emits_loads_then_add():
    out, cg, symbols = _setup()
    tree = make_node(NodeOp.ADD, make_leaf(NodeOp.INTLIT, 2), make_leaf(NodeOp.INTLIT, 3), 0)
    reg = generate(tree, None, cg, symbols)
    lines = out.getvalue().splitlines()
    assert lines[0] == "\tmovq\t$2, %r8"
    assert lines[1] == "\tmovq\t$3, %r9"
    assert lines[2] == "\taddq\t%r8, %r9"
    assert reg == 1


def test_all_registers_released_after_print():
    out, cg, symbols = _setup()
    tree = make_node(NodeOp.SUB, make_leaf(NodeOp.INTLIT, 9), make_leaf(NodeOp.INTLIT, 4), 0)
    cg.print_int(generate(tree, None, cg, symbols))
    assert [cg.load_int(i) for i in range(4)] == [0, 1, 2, 3]


def test_assignment_stores_into_variable():
    out, cg, symbols = _setup()
    slot = symbols.add("x")
    tree = make_node(NodeOp.ASSIGN, make_leaf(NodeOp.INTLIT, 5), make_leaf(NodeOp.LVIDENTIFIER, slot), 0)
    generate(tree, None, cg, symbols)
    assert out.getvalue() == "\tmovq\t$5, %r8\n\tmovq\t%r8, x(%rip)\n"


def test_identifier_is_loaded_from_memory():
    out, cg, symbols = _setup()
    slot = symbols.add("y")
    generate(make_leaf(NodeOp.IDENTIFIER, slot), None, cg, symbols)
    assert out.getvalue() == "\tmovq\ty(%rip), %r8\n"


def test_unknown_operation_raises():
    _, cg, symbols = _setup()
    with pytest.raises(CompileError, match="Unknown AST operation"):
        generate(ASTNode(99), None, cg, symbols)