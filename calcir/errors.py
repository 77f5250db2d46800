from typing import Optional


class CompileError(Exception):
    """
    Base class of every diagnostic the compiler can report. Each subclass
    maps to a distinct process exit code.
    """
    exit_code = 1

    def __init__(self, line: int):
        super().__init__()
        self.line = line

    def description(self) -> str:
        return "compilation failed"

    @property
    def msg(self) -> str:
        return f"Error: Line {self.line}: {self.description()}."

    def __str__(self):
        return self.msg


class UndefinedVariable(CompileError):
    exit_code = 1

    def __init__(self, line: int, name: str):
        super().__init__(line)
        self.name = name

    def description(self) -> str:
        return f"undefined variable {self.name}"


class MissingParenthesis(CompileError):
    exit_code = 2

    def __init__(self, line: int, side: str):
        super().__init__(line)
        assert side in {"left", "right"}
        self.side = side

    def description(self) -> str:
        return f"{self.side} parenthesis is missing"


class MissingOperand(CompileError):
    exit_code = 3

    def __init__(self, line: int, operator: Optional[str]):
        super().__init__(line)
        self.operator = operator

    def description(self) -> str:
        if self.operator is None:
            return "missing variable in empty expression"
        return f"missing variable near {self.operator}"


class MissingOperator(CompileError):
    exit_code = 4

    def __init__(self, line: int, operand: str):
        super().__init__(line)
        self.operand = operand

    def description(self) -> str:
        return f"missing operator near {self.operand}"


class InvalidAssignment(CompileError):
    exit_code = 5

    def __init__(self, line: int, text: str):
        super().__init__(line)
        self.text = text

    def description(self) -> str:
        return f"invalid assignment {self.text}"
