# movacc

`movacc` is a small compiler for a toy language whose keywords are in
Belarusian. It takes a stream of tokens, parses it with a
precedence-climbing (Pratt) expression parser and writes x86-64 assembly
in AT&T syntax.

## The language

A program is a sequence of statements:

```
цэлы x;
x = 2 + 3 * 4;
друкаваць(x - 1);
```

- `цэлы name;` declares a global integer variable.
- `name = expression;` assigns to a declared variable.
- `друкаваць(expression);` prints the value of an expression.

Expressions use integer literals, variables and the operators `+`, `-`,
`*` and `/`, with `*` and `/` binding tighter than `+` and `-`. There are
no parentheses inside expressions.

Any mistake, such as a missing `;`, an unexpected token or the use of an
undeclared variable, raises `movacc.errors.CompileError`. Its `message`
and `line` attributes hold the description and, where known, the line
number taken from the offending token.

## Using it from Python

The token kinds are the members of `movacc.tokens.TokenType`; each token
is a frozen `movacc.tokens.Token` with `kind`, `value` (for integer
literals), `text` (for identifiers) and `line`.
`movacc.parser.compile_tokens(tokens, out)` writes the complete assembly
listing — preamble, the program, postamble — to the text stream `out` and
returns the resulting `SymbolTable`:

```python
import io

from movacc.parser import compile_tokens
from movacc.tokens import Token, TokenType as T

tokens = [
    Token(T.INT), Token(T.IDENTIFIER, text="x"), Token(T.SEMICOLON),
    Token(T.IDENTIFIER, text="x"), Token(T.EQUALS),
    Token(T.INTLIT, 2), Token(T.PLUS), Token(T.INTLIT, 3), Token(T.SEMICOLON),
    Token(T.PRINT), Token(T.LEFTPAREN), Token(T.IDENTIFIER, text="x"),
    Token(T.RIGHTPAREN), Token(T.SEMICOLON),
]
out = io.StringIO()
compile_tokens(tokens, out)
print(out.getvalue())
```

The building blocks can also be used on their own:

- `movacc.parser.Parser` parses statements one by one (`statements`,
  `print_statement`, `assignment`, `int_declaration`,
  `binary_expression`) and emits code as it goes; `token_to_op` maps an
  operator token kind to its `NodeOp`.
- `movacc.syntax_tree` holds `ASTNode`, the `NodeOp` kinds and the
  `make_node`, `make_leaf` and `make_unary` helpers.
- `movacc.generate.generate(node, reg, codegen, symbols)` walks a tree and
  emits code for it, returning the register that holds the result.
- `movacc.symbols.SymbolTable` keeps global variable names in numbered
  slots (`add`, `find`, `name_of`); it holds up to 1024 names by default
  and raises `CompileError` when full.
- `movacc.codegen.CodeGenerator` writes instructions to a text stream and
  hands out the four scratch registers `%r8`–`%r11`, raising
  `CompileError` when they run out or when a free register is freed again.

```python
import io

from movacc.codegen import CodeGenerator
from movacc.symbols import SymbolTable

symbols = SymbolTable(1024)
slot = symbols.add("x")
assert symbols.find("x") == slot

out = io.StringIO()
codegen = CodeGenerator(out)
codegen.global_symbol("x")
r = codegen.load_int(42)
codegen.store_global(r, "x")
print(out.getvalue())
```

## Output

The generated assembly defines `main` and a `printint` helper that calls
`printf`; it follows the Windows x64 calling convention (first argument in
`%rcx`) and can be assembled and linked with a GCC toolchain for that
platform.

## What it does not do

`movacc` has no scanner: it does not read program text, so turning source
into `Token` values is left to the caller. It also has no command-line
program and does not write any file itself; the assembly goes to whatever
text stream is passed in.