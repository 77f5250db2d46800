from __future__ import annotations

import itertools
import os
from typing import List

from calcir.ir import ir
from calcir.logger import LOG
from calcir.semantics import registry

DEFAULT_MODULE_ID = "calcir"


class IrGenCtx:
    """
    Owns all the state of one compilation: declared names, the temporary
    counter, the current source line, and the emitted instructions.
    """

    def __init__(self, module_id: str = DEFAULT_MODULE_ID):
        self.module_id = module_id
        self.line = 0
        self.registry = registry.VariableRegistry()
        # `%0` belongs to the unnamed entry block of `main`.
        self.temp_generator = itertools.count(1)
        self.instrs: List[ir.Instr] = []

    def new_temp(self) -> ir.Temp:
        temp = ir.Temp(next(self.temp_generator))
        self.registry.declare(temp.name)
        return temp

    def add_instr(self, instr: ir.Instr):
        LOG.debug("line %d: %s", self.line, instr)
        self.instrs.append(instr)

    def declare_slot(self, name: str) -> ir.Slot:
        """
        Returns the stack slot for the source variable `name`, emitting its
        `alloca` the first time the name is seen.
        """
        slot = ir.Slot(name)
        if self.registry.declare(name):
            self.add_instr(ir.Alloca(slot))
        return slot

    def __str__(self) -> str:
        ll = []
        self.emit_header(ll)
        self.emit_main(ll)
        return "\n".join(ll) + "\n"

    def emit_header(self, ll):
        ll += [
            f"; ModuleID = '{self.module_id}'",
            "declare i32 @printf(i8*, ...)",
            f"{ir.FMT_STR_NAME} = constant {ir.FMT_STR_TYPE} c\"%d\\0A\\00\"",
        ]

    def instr_lines(self) -> List[str]:
        return [instr.to_llvm() for instr in self.instrs]

    def emit_main(self, ll):
        ll.append("define i32 @main() {")
        for line in self.instr_lines():
            ll.append("  " + line)
        ll += [
            "  ret i32 0",
            "}",
        ]

    def write_to_file(self, filename="./out.ll"):
        ll = str(self)
        dirname = os.path.dirname(filename)
        if dirname:
            os.makedirs(dirname, exist_ok=True)
        with open(filename, "w") as out:
            out.write(ll)
