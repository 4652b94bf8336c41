"""x86-64 assembly emission with a small register pool."""

from __future__ import annotations

from typing import TextIO

from .errors import CompileError

_REGISTERS = ("%r8", "%r9", "%r10", "%r11")

_PREAMBLE = (
    "\t.text\n"
    ".LC0:\n"
    '\t.string\t"%d\\n"\n'
    "printint:\n"
    "\tpushq\t%rbp\n"
    "\tmovq\t%rsp, %rbp\n"
    "\tsubq\t$32, %rsp\n"
    "\tmovl\t%ecx, -4(%rbp)\n"
    "\tmovl\t-4(%rbp), %eax\n"
    "\tmovl\t%eax, %edx\n"
    "\tleaq\t.LC0(%rip), %rcx\n"
    "\tcall\tprintf\n"
    "\tnop\n"
    "\tleave\n"
    "\tret\n"
    "\n"
    "\t.globl\tmain\n"
    "main:\n"
    "\tpushq\t%rbp\n"
    "\tmovq\t%rsp, %rbp\n"
    "\tsubq\t$32, %rsp\n"
)

_POSTAMBLE = "\txorl\t%eax, %eax\n\tleave\n\tret\n"


class CodeGenerator:
    """Writes assembly to a text stream; register numbers index the pool."""

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self._free = [True] * len(_REGISTERS)

    def _emit(self, text: str) -> None:
        self.out.write(text)

    def _alloc(self) -> int:
        for reg, free in enumerate(self._free):
            if free:
                self._free[reg] = False
                return reg
        raise CompileError("Out of registers!")

    def _release(self, reg: int) -> None:
        if self._free[reg]:
            raise CompileError(f"Error trying to free register {reg}")
        self._free[reg] = True

    def free_all_registers(self) -> None:
        """Mark every register as available."""
        self._free = [True] * len(_REGISTERS)

    def preamble(self) -> None:
        """Emit the print helper and the start of main."""
        self.free_all_registers()
        self._emit(_PREAMBLE)

    def postamble(self) -> None:
        """Emit the end of main."""
        self._emit(_POSTAMBLE)

    def load_int(self, value: int) -> int:
        reg = self._alloc()
        self._emit(f"\tmovq\t${value}, {_REGISTERS[reg]}\n")
        return reg

    def add(self, r1: int, r2: int) -> int:
        self._emit(f"\taddq\t{_REGISTERS[r1]}, {_REGISTERS[r2]}\n")
        self._release(r1)
        return r2

    def sub(self, r1: int, r2: int) -> int:
        self._emit(f"\tsubq\t{_REGISTERS[r2]}, {_REGISTERS[r1]}\n")
        self._release(r2)
        return r1

    def mul(self, r1: int, r2: int) -> int:
        self._emit(f"\timulq\t{_REGISTERS[r1]}, {_REGISTERS[r2]}\n")
        self._release(r1)
        return r2

    def div(self, r1: int, r2: int) -> int:
        self._emit(
            f"\tmovq\t{_REGISTERS[r1]},%rax\n"
            "\tcqo\n"
            f"\tidivq\t{_REGISTERS[r2]}\n"
            f"\tmovq\t%rax,{_REGISTERS[r1]}\n"
        )
        self._release(r2)
        return r1

    def print_int(self, r: int) -> None:
        self._emit(f"\tmovq\t{_REGISTERS[r]}, %rcx\n\tcall\tprintint\n")
        self._release(r)

    def load_global(self, name: str) -> int:
        reg = self._alloc()
        self._emit(f"\tmovq\t{name}(%rip), {_REGISTERS[reg]}\n")
        return reg

    def store_global(self, r: int, name: str) -> int:
        self._emit(f"\tmovq\t{_REGISTERS[r]}, {name}(%rip)\n")
        self._release(r)
        return r

    def global_symbol(self, name: str) -> None:
        self._emit(f"\t.comm\t{name}, 8\n")