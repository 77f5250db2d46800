"""
Reduction of a flat expression fragment to a single operand.

A fragment is a list whose items are either lexer tokens or `ir.Temp`
values standing in for already-reduced sub-fragments. Parenthesised groups
are collapsed first, innermost and rightmost first. Then each operator is
eliminated in its own pass, in the order `*`, `/`, `-`, `+`, always taking
the leftmost remaining occurrence. Instructions are emitted as each
operator is eliminated, so the order of the passes is also the order of the
generated code.
"""
from __future__ import annotations

import re
from typing import List, Optional, Union

import rply

from calcir import errors
from calcir.ir import gen_ctx, ir
from calcir.semantics import registry

Item = Union[rply.Token, ir.Temp]

OPERATOR_PASSES = [
    ("STAR", ir.MNEMONICS["*"]),
    ("SLASH", ir.MNEMONICS["/"]),
    ("MINUS", ir.MNEMONICS["-"]),
    ("PLUS", ir.MNEMONICS["+"]),
]

OPERATORS = {"PLUS", "MINUS", "STAR", "SLASH"}
PARENS = {"LPAREN", "RPAREN"}

DIGITS = re.compile(r"[0-9]+")
I32_MAX = 2 ** 31 - 1


def token_type(item: Item) -> Optional[str]:
    if isinstance(item, rply.Token):
        return item.gettokentype()
    return None


def item_text(item: Item) -> str:
    if isinstance(item, ir.Temp):
        return item.name
    return item.getstr()


def first_index(frag: List[Item], tok_type: str, start: int = 0) -> Optional[int]:
    for i in range(start, len(frag)):
        if token_type(frag[i]) == tok_type:
            return i
    return None


def last_index(frag: List[Item], tok_type: str) -> Optional[int]:
    for i in reversed(range(len(frag))):
        if token_type(frag[i]) == tok_type:
            return i
    return None


def resolve(ctx: gen_ctx.IrGenCtx, item: Item) -> ir.Value:
    """
    Turns a fragment item into an IR operand. Literals are used as
    immediates, temporaries as they are, and every use of a source variable
    gets its own `load`.
    """
    if isinstance(item, ir.Temp):
        return item

    text = item.getstr()
    if DIGITS.fullmatch(text) and int(text) <= I32_MAX:
        return ir.Const(int(text))

    if text in ctx.registry and not registry.is_temp(text):
        temp = ctx.new_temp()
        ctx.add_instr(ir.Load(temp, ir.Slot(text)))
        return temp

    raise errors.UndefinedVariable(ctx.line, text)


def check_operand(ctx: gen_ctx.IrGenCtx, frag: List[Item], index: int, operator: str):
    if not 0 <= index < len(frag):
        raise errors.MissingOperand(ctx.line, operator)
    if token_type(frag[index]) in OPERATORS | PARENS:
        raise errors.MissingOperand(ctx.line, operator)


def reduce_operator(ctx: gen_ctx.IrGenCtx, frag: List[Item], tok_type: str, mnemonic: str):
    """
    Eliminates every `tok_type` operator from the parenthesis-free `frag`,
    in place, from left to right.
    """
    while True:
        idx = first_index(frag, tok_type)
        if idx is None:
            return

        operator = frag[idx].getstr()
        left_idx, right_idx = idx - 1, idx + 1
        check_operand(ctx, frag, left_idx, operator)
        check_operand(ctx, frag, right_idx, operator)

        left = resolve(ctx, frag[left_idx])
        right = resolve(ctx, frag[right_idx])
        res = ctx.new_temp()
        ctx.add_instr(ir.BinaryOp(mnemonic, res, left, right))

        frag[left_idx:right_idx + 1] = [res]


def reduce_expr(ctx: gen_ctx.IrGenCtx, frag: List[Item]) -> Item:
    """
    Reduces `frag` to a single item, emitting the instructions that compute
    it. The result may still be an unresolved token (a lone literal or
    variable); pass it to `resolve` to get an operand.
    """
    frag = list(frag)

    while any(token_type(item) in PARENS for item in frag):
        begin = last_index(frag, "LPAREN")
        if begin is None:
            raise errors.MissingParenthesis(ctx.line, "left")
        end = first_index(frag, "RPAREN", start=begin + 1)
        if end is None:
            raise errors.MissingParenthesis(ctx.line, "right")

        frag[begin:end + 1] = [reduce_expr(ctx, frag[begin + 1:end])]

    for tok_type, mnemonic in OPERATOR_PASSES:
        reduce_operator(ctx, frag, tok_type, mnemonic)

    if not frag:
        raise errors.MissingOperand(ctx.line, None)
    if len(frag) > 1:
        raise errors.MissingOperator(ctx.line, item_text(frag[1]))

    [result] = frag
    return result
