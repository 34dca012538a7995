from dataclasses import dataclass

# Types
class Type:
    """Base of the closed set of Carrot types.

    Two types are equal when they are the same variant; ``StructType``
    also compares the struct name.
    """

    def __eq__(self, other) -> bool:
        return isinstance(other, Type) and type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def copy(self) -> 'Type':
        return type(self)()

    def is_error(self) -> bool: return False
    def is_int(self) -> bool: return False
    def is_bool(self) -> bool: return False
    def is_void(self) -> bool: return False
    def is_string(self) -> bool: return False
    def is_fn(self) -> bool: return False
    def is_struct(self) -> bool: return False
    def is_struct_def(self) -> bool: return False

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class ErrorType(Type):
    def is_error(self): return True
    def __str__(self): return "error"

class IntType(Type):
    def is_int(self): return True
    def __str__(self): return "int"

class BoolType(Type):
    def is_bool(self): return True
    def __str__(self): return "bool"

class VoidType(Type):
    def is_void(self): return True
    def __str__(self): return "void"

class StringType(Type):
    def is_string(self): return True
    def __str__(self): return "String"

class FnType(Type):
    def is_fn(self): return True
    def __str__(self): return "function"

class StructDefType(Type):
    def is_struct_def(self): return True
    def __str__(self): return "struct"


@dataclass(eq=False)
class StructType(Type):
    name: str

    def __eq__(self, other) -> bool:
        return isinstance(other, StructType) and self.name == other.name

    def __hash__(self) -> int:
        return hash((StructType, self.name))

    def copy(self) -> 'StructType':
        return StructType(self.name)

    def is_struct(self): return True
    def __str__(self): return self.name


# Helpers
ERROR = ErrorType()
INT = IntType()
BOOL = BoolType()
VOID = VoidType()
STRING = StringType()
FN = FnType()
STRUCT_DEF = StructDefType()
