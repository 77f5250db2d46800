from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict

TEMP_PREFIX = "%"

FMT_STR_NAME = "@print.str"
FMT_STR_TYPE = "[4 x i8]"

MNEMONICS: Dict[str, str] = {
    "*": "mul",
    "/": "sdiv",
    "-": "sub",
    "+": "add",
}


class ToLlvm(ABC):

    @abstractmethod
    def to_llvm(self) -> str:
        pass

    def __str__(self):
        return self.to_llvm()


class Value(ToLlvm, ABC):
    pass


@dataclass(frozen=True)
class Const(Value):
    """An immediate `i32` operand."""
    val: int

    def to_llvm(self) -> str:
        return str(self.val)


@dataclass(frozen=True)
class Temp(Value):
    """A compiler-generated value, defined once."""
    id: int

    @property
    def name(self) -> str:
        return f"{TEMP_PREFIX}{self.id}"

    def to_llvm(self) -> str:
        return self.name


@dataclass(frozen=True)
class Slot(ToLlvm):
    """The stack slot holding a source variable. Not an operand by itself."""
    name: str

    def to_llvm(self) -> str:
        return f"%{self.name}"


class Instr(ToLlvm, ABC):
    pass


@dataclass
class Alloca(Instr):
    slot: Slot

    def to_llvm(self) -> str:
        return f"{self.slot.to_llvm()} = alloca i32"


@dataclass
class Store(Instr):
    value: Value
    slot: Slot

    def to_llvm(self) -> str:
        return f"store i32 {self.value.to_llvm()}, i32* {self.slot.to_llvm()}"


@dataclass
class Load(Instr):
    res: Temp
    slot: Slot

    def to_llvm(self) -> str:
        return f"{self.res.to_llvm()} = load i32* {self.slot.to_llvm()}"


@dataclass
class BinaryOp(Instr):
    op: str
    res: Temp
    arg1: Value
    arg2: Value

    def __post_init__(self):
        assert self.op in set(MNEMONICS.values())

    def to_llvm(self) -> str:
        return (
            f"{self.res.to_llvm()} = {self.op} i32 "
            f"{self.arg1.to_llvm()}, {self.arg2.to_llvm()}"
        )


@dataclass
class PrintInt(Instr):
    """
    Prints `arg` followed by a newline through `printf`. The call returns an
    `i32`, which has to be numbered like any other temporary.
    """
    CALLEE: ClassVar[str] = "call i32 (i8*, ...)* @printf"

    res: Temp
    arg: Value

    def to_llvm(self) -> str:
        fmt_ptr = f"i8* getelementptr ({FMT_STR_TYPE}* {FMT_STR_NAME}, i32 0, i32 0)"
        return f"{self.res.to_llvm()} = {self.CALLEE}({fmt_ptr}, i32 {self.arg.to_llvm()})"
