from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SymTableError(Exception):
    """Contract violation on a SymTable."""


class EmptySymTableError(SymTableError):
    def __init__(self, message: str = "Symbol table has no scopes."):
        super().__init__(message)


class WrongArgumentError(SymTableError):
    pass


class DuplicateSymbolError(SymTableError):
    def __init__(self, name: str):
        super().__init__(f"Duplicate symbol in innermost scope: {name}")
        self.name = name


class Severity(Enum):
    FATAL = "fatal"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    line: int
    char: int
    message: str

    def __str__(self):
        tag = "SemanticError" if self.severity is Severity.FATAL else "Warning"
        return f"[{tag}] L{self.line}:C{self.char} {self.message}"


@dataclass
class ErrorReporter:
    """Append-only sink for semantic diagnostics."""
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def report(self, severity: Severity, line: int, char: int, message: str) -> Diagnostic:
        diag = Diagnostic(severity, line, char, message)
        self.diagnostics.append(diag)
        return diag

    def fatal(self, line: int, char: int, message: str) -> Diagnostic:
        return self.report(Severity.FATAL, line, char, message)

    def warning(self, line: int, char: int, message: str) -> Diagnostic:
        return self.report(Severity.WARNING, line, char, message)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.FATAL]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return any(d.severity is Severity.FATAL for d in self.diagnostics)

    def __len__(self):
        return len(self.diagnostics)

    def __iter__(self):
        return iter(self.diagnostics)


# Messages
MULTIPLY_DECLARED = "Multiply declared identifier"
UNDECLARED = "Undeclared identifier"
DOT_ACCESS_NON_STRUCT = "Dot-access of non-struct type"
INVALID_FIELD = "Invalid struct field name"
VOID_NON_FUNCTION = "Non-function declared void"
INVALID_STRUCT_NAME = "Invalid name of struct type"
