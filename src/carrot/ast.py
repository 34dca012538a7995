"""Abstract-syntax tree of a Carrot program.

The parser builds the tree once; nodes are frozen and compare by identity,
so they can key side tables such as the checker's resolved symbols.

    Program             decls
    VarDecl             type, id, size
    FnDecl              type, id, formals, body
    FormalDecl          type, id
    StructDecl          id, decls
    FnBody              decls, stmts

    IntNode, BoolNode, VoidNode, StructNode(id)

    AssignStmt          assign
    PreIncStmt, PreDecStmt, PostIncStmt, PostDecStmt, ReadStmt, WriteStmt
                        exp
    IfStmt, WhileStmt, RepeatStmt
                        exp, decls, stmts
    IfElseStmt          exp, then_decls, then_stmts, else_decls, else_stmts
    CallStmt            call
    ReturnStmt          exp (possibly None)

    IntLit, StrLit, TrueLit, FalseLit, IdNode
    DotAccess           loc, id
    AssignExp           lhs, exp
    CallExp             id, args
    UnaryMinus, Not     exp
    Plus, Minus, Times, Divide, And, Or, Equals, NotEquals,
    Less, Greater, LessEq, GreaterEq
                        exp1, exp2
"""
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

# value of VarDecl.size for declarations that are not struct-typed
NOT_STRUCT = -1


@dataclass(frozen=True)
class Token:
    """Lexer output: 1-based position plus the literal payload, if any."""
    line: int
    char: int
    value: Any = None


class NodeVisitor:
    """Dispatches ``node.accept(self)`` to ``visit<NodeClass>``."""

    def visit(self, node: 'Node'):
        return node.accept(self)

    def visitChildren(self, node: 'Node'):
        res = None
        for child in node.children():
            r = self.visit(child)
            if r is not None:
                res = r
        return res

    def generic_visit(self, node: 'Node'):
        raise NotImplementedError(f"{type(self).__name__} has no visit{type(node).__name__}")


@dataclass(frozen=True, eq=False)
class Node:
    def accept(self, visitor: NodeVisitor):
        meth = getattr(visitor, "visit" + type(self).__name__, None)
        if meth is None:
            return visitor.generic_visit(self)
        return meth(self)

    def children(self) -> Tuple['Node', ...]:
        kids = []
        for value in self.__dict__.values():
            if isinstance(value, Node):
                kids.append(value)
            elif isinstance(value, tuple):
                kids.extend(v for v in value if isinstance(v, Node))
        return tuple(kids)


# ---------------- Expressions ----------------

@dataclass(frozen=True, eq=False)
class ExpNode(Node):
    """Every expression exposes its 1-based ``line`` and ``char``."""


@dataclass(frozen=True, eq=False)
class _Leaf(ExpNode):
    line: int
    char: int


@dataclass(frozen=True, eq=False)
class IntLit(_Leaf):
    value: int = 0

    @classmethod
    def from_token(cls, tok: Token) -> 'IntLit':
        return cls(tok.line, tok.char, tok.value)


@dataclass(frozen=True, eq=False)
class StrLit(_Leaf):
    value: str = ""

    @classmethod
    def from_token(cls, tok: Token) -> 'StrLit':
        return cls(tok.line, tok.char, tok.value)


@dataclass(frozen=True, eq=False)
class TrueLit(_Leaf):
    pass


@dataclass(frozen=True, eq=False)
class FalseLit(_Leaf):
    pass


@dataclass(frozen=True, eq=False)
class IdNode(_Leaf):
    name: str = ""

    @classmethod
    def from_token(cls, tok: Token) -> 'IdNode':
        return cls(tok.line, tok.char, tok.value)

    def __str__(self):
        return self.name


@dataclass(frozen=True, eq=False)
class _Derived(ExpNode):
    """Expression positioned at its first child."""

    def _anchor(self) -> ExpNode:
        raise NotImplementedError

    @property
    def line(self) -> int:
        return self._anchor().line

    @property
    def char(self) -> int:
        return self._anchor().char


@dataclass(frozen=True, eq=False)
class DotAccess(_Derived):
    loc: ExpNode
    id: IdNode

    def _anchor(self):
        return self.loc


@dataclass(frozen=True, eq=False)
class AssignExp(_Derived):
    lhs: ExpNode
    exp: ExpNode

    def _anchor(self):
        return self.lhs


@dataclass(frozen=True, eq=False)
class CallExp(_Derived):
    id: IdNode
    args: Tuple[ExpNode, ...] = ()

    def _anchor(self):
        return self.id


@dataclass(frozen=True, eq=False)
class UnaryExp(_Derived):
    exp: ExpNode

    def _anchor(self):
        return self.exp


@dataclass(frozen=True, eq=False)
class BinaryExp(_Derived):
    exp1: ExpNode
    exp2: ExpNode

    def _anchor(self):
        return self.exp1


class UnaryMinus(UnaryExp): pass
class Not(UnaryExp): pass

class Plus(BinaryExp): pass
class Minus(BinaryExp): pass
class Times(BinaryExp): pass
class Divide(BinaryExp): pass
class And(BinaryExp): pass
class Or(BinaryExp): pass
class Equals(BinaryExp): pass
class NotEquals(BinaryExp): pass
class Less(BinaryExp): pass
class Greater(BinaryExp): pass
class LessEq(BinaryExp): pass
class GreaterEq(BinaryExp): pass


# ---------------- Types ----------------

@dataclass(frozen=True, eq=False)
class TypeNode(Node):
    pass


@dataclass(frozen=True, eq=False)
class IntNode(TypeNode):
    def __str__(self): return "int"


@dataclass(frozen=True, eq=False)
class BoolNode(TypeNode):
    def __str__(self): return "bool"


@dataclass(frozen=True, eq=False)
class VoidNode(TypeNode):
    def __str__(self): return "void"


@dataclass(frozen=True, eq=False)
class StructNode(TypeNode):
    id: IdNode

    def __str__(self): return self.id.name


# ---------------- Declarations ----------------

@dataclass(frozen=True, eq=False)
class DeclNode(Node):
    pass


@dataclass(frozen=True, eq=False)
class VarDecl(DeclNode):
    type: TypeNode
    id: IdNode
    size: int = NOT_STRUCT


@dataclass(frozen=True, eq=False)
class FormalDecl(DeclNode):
    type: TypeNode
    id: IdNode


@dataclass(frozen=True, eq=False)
class FnBody(Node):
    decls: Tuple[DeclNode, ...] = ()
    stmts: Tuple['StmtNode', ...] = ()


@dataclass(frozen=True, eq=False)
class FnDecl(DeclNode):
    type: TypeNode
    id: IdNode
    formals: Tuple[FormalDecl, ...] = ()
    body: FnBody = field(default_factory=FnBody)


@dataclass(frozen=True, eq=False)
class StructDecl(DeclNode):
    id: IdNode
    decls: Tuple[DeclNode, ...] = ()


@dataclass(frozen=True, eq=False)
class Program(Node):
    decls: Tuple[DeclNode, ...] = ()


# ---------------- Statements ----------------

@dataclass(frozen=True, eq=False)
class StmtNode(Node):
    pass


@dataclass(frozen=True, eq=False)
class AssignStmt(StmtNode):
    assign: AssignExp


@dataclass(frozen=True, eq=False)
class _ExpStmt(StmtNode):
    exp: ExpNode


class PreIncStmt(_ExpStmt): pass
class PreDecStmt(_ExpStmt): pass
class PostIncStmt(_ExpStmt): pass
class PostDecStmt(_ExpStmt): pass
class ReadStmt(_ExpStmt): pass
class WriteStmt(_ExpStmt): pass


@dataclass(frozen=True, eq=False)
class _BlockStmt(StmtNode):
    exp: ExpNode
    decls: Tuple[DeclNode, ...] = ()
    stmts: Tuple[StmtNode, ...] = ()


class IfStmt(_BlockStmt): pass
class WhileStmt(_BlockStmt): pass
class RepeatStmt(_BlockStmt): pass


@dataclass(frozen=True, eq=False)
class IfElseStmt(StmtNode):
    exp: ExpNode
    then_decls: Tuple[DeclNode, ...] = ()
    then_stmts: Tuple[StmtNode, ...] = ()
    else_decls: Tuple[DeclNode, ...] = ()
    else_stmts: Tuple[StmtNode, ...] = ()


@dataclass(frozen=True, eq=False)
class CallStmt(StmtNode):
    call: CallExp


@dataclass(frozen=True, eq=False)
class ReturnStmt(StmtNode):
    exp: Optional[ExpNode] = None

