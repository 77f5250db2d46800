from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

import rply

from calcir.ir import gen_ctx, ir
from calcir.semantics import reduce


class Stmt(ABC):

    @abstractmethod
    def to_ir(self, ctx: gen_ctx.IrGenCtx) -> None:
        raise NotImplementedError


@dataclass
class Assign(Stmt):
    """
    x = (y + 1) * 2
    """
    target: str
    expr: List[rply.Token]

    def to_ir(self, ctx: gen_ctx.IrGenCtx) -> None:
        # The slot exists before the right-hand side is reduced, so `x = x`
        # on first use loads from the fresh (uninitialized) slot.
        slot = ctx.declare_slot(self.target)
        value = reduce.resolve(ctx, reduce.reduce_expr(ctx, self.expr))
        ctx.add_instr(ir.Store(value, slot))


@dataclass
class Print(Stmt):
    """
    (y + 1) * 2
    """
    expr: List[rply.Token]

    def to_ir(self, ctx: gen_ctx.IrGenCtx) -> None:
        value = reduce.resolve(ctx, reduce.reduce_expr(ctx, self.expr))
        ctx.add_instr(ir.PrintInt(ctx.new_temp(), value))
