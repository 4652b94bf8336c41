"""Recursive-descent statement parser with a precedence-climbing expression parser."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .codegen import CodeGenerator
from .errors import CompileError
from .generate import generate
from .symbols import SymbolTable
from .syntax_tree import ASTNode, NodeOp, make_leaf, make_node
from .tokens import Token, TokenType

_TOKEN_OPS = {
    TokenType.PLUS: NodeOp.ADD,
    TokenType.MINUS: NodeOp.SUB,
    TokenType.STAR: NodeOp.MUL,
    TokenType.SLASH: NodeOp.DIV,
    TokenType.INTLIT: NodeOp.INTLIT,
}

_PRECEDENCE = {
    TokenType.PLUS: 10,
    TokenType.MINUS: 10,
    TokenType.STAR: 20,
    TokenType.SLASH: 20,
}

_EXPRESSION_END = (TokenType.SEMICOLON, TokenType.RIGHTPAREN)


def token_to_op(kind: TokenType) -> NodeOp:
    """Map an operator or literal token kind to its AST operation."""
    try:
        return _TOKEN_OPS[kind]
    except KeyError:
        raise CompileError(f"Unknown token {int(kind)} in token_to_op()") from None


class Parser:
    """Parses a token stream and emits code statement by statement."""

    def __init__(
        self, tokens: Iterable[Token], codegen: CodeGenerator, symbols: SymbolTable
    ) -> None:
        self._tokens = iter(tokens)
        self.codegen = codegen
        self.symbols = symbols
        self.token = next(self._tokens, Token(TokenType.EOF))

    def _advance(self) -> None:
        self.token = next(self._tokens, Token(TokenType.EOF, line=self.token.line))

    def match(self, kind: TokenType, what: str) -> Token:
        """Consume the current token if it is of ``kind`` and return it."""
        current = self.token
        if current.kind != kind:
            raise CompileError(f"'{what}' expected", current.line)
        self._advance()
        return current

    def semi(self) -> None:
        self.match(TokenType.SEMICOLON, ";")

    def left_paren(self) -> None:
        self.match(TokenType.LEFTPAREN, "(")

    def right_paren(self) -> None:
        self.match(TokenType.RIGHTPAREN, ")")

    def identifier(self) -> str:
        """Consume an identifier and return its name."""
        return self.match(TokenType.IDENTIFIER, "identifier").text

    def _primary(self) -> ASTNode:
        tok = self.token
        if tok.kind == TokenType.INTLIT:
            node = make_leaf(NodeOp.INTLIT, tok.value)
        elif tok.kind == TokenType.IDENTIFIER:
            slot = self.symbols.find(tok.text)
            if slot is None:
                raise CompileError(f"Undeclared variable {tok.text}", tok.line)
            node = make_leaf(NodeOp.IDENTIFIER, slot)
        else:
            raise CompileError("syntax error", tok.line)
        self._advance()
        return node

    def _precedence(self, kind: TokenType) -> int:
        precedence = _PRECEDENCE.get(kind, 0)
        if precedence == 0:
            raise CompileError("Syntax error", self.token.line)
        return precedence

    def binary_expression(self, ptp: int) -> ASTNode:
        """Parse an expression whose operators bind tighter than ``ptp``."""
        left = self._primary()
        kind = self.token.kind
        if kind in _EXPRESSION_END:
            return left
        while self._precedence(kind) > ptp:
            self._advance()
            right = self.binary_expression(_PRECEDENCE[kind])
            left = make_node(token_to_op(kind), left, right, 0)
            kind = self.token.kind
            if kind in _EXPRESSION_END:
                return left
        return left

    def print_statement(self) -> None:
        self.match(TokenType.PRINT, "друкаваць")
        self.left_paren()
        tree = self.binary_expression(0)
        reg = generate(tree, None, self.codegen, self.symbols)
        self.codegen.print_int(reg)
        self.codegen.free_all_registers()
        self.right_paren()
        self.semi()

    def assignment(self) -> None:
        line = self.token.line
        name = self.identifier()
        slot = self.symbols.find(name)
        if slot is None:
            raise CompileError(f"Undeclared variable {name}", line)
        target = make_leaf(NodeOp.LVIDENTIFIER, slot)
        self.match(TokenType.EQUALS, "=")
        value = self.binary_expression(0)
        tree = make_node(NodeOp.ASSIGN, value, target, 0)
        generate(tree, None, self.codegen, self.symbols)
        self.codegen.free_all_registers()
        self.semi()

    def int_declaration(self) -> None:
        self.match(TokenType.INT, "цэлы")
        name = self.identifier()
        self.symbols.add(name)
        self.codegen.global_symbol(name)
        self.semi()

    def statements(self) -> None:
        """Parse statements until the end of input."""
        while True:
            kind = self.token.kind
            if kind == TokenType.PRINT:
                self.print_statement()
            elif kind == TokenType.INT:
                self.int_declaration()
            elif kind == TokenType.IDENTIFIER:
                self.assignment()
            elif kind == TokenType.EOF:
                return
            else:
                raise CompileError(f"Syntax error, with token {int(kind)}", self.token.line)


def compile_tokens(tokens: Iterable[Token], out: TextIO) -> SymbolTable:
    """Compile a whole token stream into assembly written to ``out``."""
    codegen = CodeGenerator(out)
    symbols = SymbolTable()
    parser = Parser(tokens, codegen, symbols)
    codegen.preamble()
    parser.statements()
    codegen.postamble()
    return symbols