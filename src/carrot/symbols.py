from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, List, Optional
from .types import Type, ErrorType, StructDefType, StructType

if TYPE_CHECKING:
    from .scope import SymTable


class Category(Enum):
    NORMAL = auto()
    FUNCTION = auto()
    FORMAL = auto()
    STRUCT_VAR = auto()
    STRUCT_DECL = auto()
    UNDEFINED = auto()


@dataclass(eq=False)
class Symbol:
    type: Type

    @property
    def category(self) -> Category:
        raise NotImplementedError

    def __str__(self):
        return str(self.type)


@dataclass(eq=False)
class NormalSymbol(Symbol):
    @property
    def category(self) -> Category:
        return Category.NORMAL


@dataclass(eq=False)
class FormalSymbol(Symbol):
    @property
    def category(self) -> Category:
        return Category.FORMAL


@dataclass(eq=False)
class FunctionSymbol(Symbol):
    """A function signature; ``type`` is the return type."""
    formals: List[Symbol] = field(default_factory=list)

    @property
    def category(self) -> Category:
        return Category.FUNCTION

    def add_formal(self, sym: Symbol) -> None:
        self.formals.append(sym)

    def __str__(self):
        return ",".join(str(f) for f in self.formals) + "->" + str(self.type)


@dataclass(eq=False)
class StructDeclSymbol(Symbol):
    """A struct definition. Owns the table of its fields once analyzed."""
    type: Type = field(default_factory=StructDefType)
    fields: Optional['SymTable'] = None

    @property
    def category(self) -> Category:
        return Category.STRUCT_DECL


@dataclass(eq=False)
class StructVarSymbol(Symbol):
    type: StructType
    decl: Optional[StructDeclSymbol] = None

    @property
    def category(self) -> Category:
        return Category.STRUCT_VAR

    @property
    def fields(self) -> Optional['SymTable']:
        return self.decl.fields if self.decl is not None else None


@dataclass(eq=False)
class UndefinedSymbol(Symbol):
    type: Type = field(default_factory=ErrorType)

    @property
    def category(self) -> Category:
        return Category.UNDEFINED

    def __str__(self):
        return ""
