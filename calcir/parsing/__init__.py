import re
from typing import List

import rply

from calcir import errors
from calcir.semantics import syntax
from . import lexer

IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def strip_whitespace(src_text: str) -> str:
    return re.sub(r"\s+", "", src_text)


def tokenize(src_text: str) -> List[rply.Token]:
    return list(lexer.lexer.lex(strip_whitespace(src_text)))


def parse_line(src_text: str, line: int) -> syntax.Stmt:
    """
    Turns one source line into either an `Assign` or a `Print` statement. The
    right-hand side is left as a flat token list; it is reduced later, while
    generating code.
    """
    tokens = tokenize(src_text)
    eq_indices = [i for i, tok in enumerate(tokens) if tok.gettokentype() == "EQ"]

    if not eq_indices:
        return syntax.Print(tokens)

    if len(eq_indices) > 1:
        raise errors.InvalidAssignment(line, strip_whitespace(src_text))

    [eq] = eq_indices
    lhs, rhs = tokens[:eq], tokens[eq + 1:]
    if not lhs or not rhs:
        raise errors.MissingOperand(line, "=")

    [target, *rest] = lhs
    if rest or target.gettokentype() != "OPERAND" or not IDENT.fullmatch(target.getstr()):
        raise errors.InvalidAssignment(line, strip_whitespace(src_text))

    return syntax.Assign(target.getstr(), rhs)
