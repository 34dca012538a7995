import logging
from typing import Dict, Iterable, List, Optional
from . import ast as A
from .errors import (
    DuplicateSymbolError,
    ErrorReporter,
    DOT_ACCESS_NON_STRUCT,
    INVALID_FIELD,
    INVALID_STRUCT_NAME,
    MULTIPLY_DECLARED,
    UNDECLARED,
    VOID_NON_FUNCTION,
)
from .scope import SymTable
from .symbols import (
    Category,
    FormalSymbol,
    FunctionSymbol,
    NormalSymbol,
    StructDeclSymbol,
    StructVarSymbol,
    Symbol,
    UndefinedSymbol,
)
from .types import BOOL, INT, VOID, StructType, Type

logger = logging.getLogger(__name__)


class SemanticChecker(A.NodeVisitor):
    """Name analysis of a Carrot program.

    Declarations are entered into ``symtab``; every identifier use is
    resolved innermost-first and recorded in ``symbols``. Problems are
    reported to ``reporter`` and never stop the pass. ``SymTable`` contract
    violations other than duplicates propagate to the caller.
    """

    def __init__(self, reporter: Optional[ErrorReporter] = None):
        self.symtab = SymTable()
        # scope that receives declarations; a struct's field table while
        # its body is analyzed, otherwise ``symtab``
        self.table = self.symtab
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.symbols: Dict[A.Node, Symbol] = {}

    # ---------------- Infra ----------------

    @property
    def errors(self) -> List[str]:
        return [str(d) for d in self.reporter.errors]

    def err(self, node: A.ExpNode, message: str):
        self.reporter.fatal(node.line, node.char, message)

    def symbol_of(self, node: A.Node) -> Optional[Symbol]:
        return self.symbols.get(node)

    def check(self, program: A.Program) -> ErrorReporter:
        self.visit(program)
        logger.info("semantic check finished with %d error(s)", len(self.reporter.errors))
        return self.reporter

    def _visit_all(self, nodes: Iterable[A.Node]):
        for n in nodes:
            self.visit(n)

    def _block(self, decls, stmts):
        self.symtab.add_scope()
        try:
            self._visit_all(decls)
            self._visit_all(stmts)
        finally:
            self.symtab.remove_scope()

    def _type_of(self, tnode: A.TypeNode) -> Type:
        if isinstance(tnode, A.IntNode):
            return INT
        if isinstance(tnode, A.BoolNode):
            return BOOL
        if isinstance(tnode, A.VoidNode):
            return VOID
        if isinstance(tnode, A.StructNode):
            return StructType(tnode.id.name)
        raise TypeError(f"unknown type node {type(tnode).__name__}")

    def _declare(self, id_node: A.IdNode, sym: Symbol) -> bool:
        try:
            self.table.add_decl(id_node.name, sym)
        except DuplicateSymbolError:
            self.err(id_node, MULTIPLY_DECLARED)
            return False
        self.symbols[id_node] = sym
        logger.debug("declared %s : %s (%s)", id_node.name, sym, sym.category.name)
        return True

    def _struct_decl(self, tnode: A.StructNode) -> Optional[StructDeclSymbol]:
        sym = self.symtab.lookup_global(tnode.id.name)
        if sym is None or sym.category is not Category.STRUCT_DECL:
            self.err(tnode.id, INVALID_STRUCT_NAME)
            return None
        self.symbols[tnode.id] = sym
        return sym

    # ---------------- Declarations ----------------

    def visitProgram(self, node: A.Program):
        self._visit_all(node.decls)

    def visitVarDecl(self, node: A.VarDecl):
        vtype = self._type_of(node.type)
        if vtype.is_void():
            self.err(node.id, VOID_NON_FUNCTION)
            return None

        existing = self.table.lookup_local(node.id.name)
        if existing is not None and existing.category is Category.FORMAL:
            return None

        if node.size == A.NOT_STRUCT and not isinstance(node.type, A.StructNode):
            sym: Symbol = NormalSymbol(vtype)
        else:
            if not isinstance(node.type, A.StructNode):
                raise TypeError(f"struct-sized declaration of '{node.id.name}' without a struct type")
            decl = self._struct_decl(node.type)
            if decl is None:
                return None
            sym = StructVarSymbol(vtype, decl)
        self._declare(node.id, sym)
        return None

    def visitFnDecl(self, node: A.FnDecl):
        fn = FunctionSymbol(self._type_of(node.type))
        self._declare(node.id, fn)

        self.symtab.add_scope()
        try:
            for formal in node.formals:
                sym = self.visit(formal)
                fn.add_formal(sym)
            self._visit_all(node.body.decls)
            self._visit_all(node.body.stmts)
        finally:
            self.symtab.remove_scope()
        return fn

    def visitFormalDecl(self, node: A.FormalDecl) -> Symbol:
        sym = FormalSymbol(self._type_of(node.type))
        if sym.type.is_void():
            self.err(node.id, VOID_NON_FUNCTION)
        else:
            self._declare(node.id, sym)
        return sym

    def visitStructDecl(self, node: A.StructDecl):
        sym = StructDeclSymbol()
        if not self._declare(node.id, sym):
            return None

        fields = SymTable()
        outer = self.table
        self.table = fields
        try:
            self._visit_all(node.decls)
        finally:
            self.table = outer
        sym.fields = fields
        return sym

    # ---------------- Statements ----------------

    def visitAssignStmt(self, node: A.AssignStmt):
        self.visit(node.assign)

    def _visit_operand(self, node):
        self.visit(node.exp)

    visitPreIncStmt = _visit_operand
    visitPreDecStmt = _visit_operand
    visitPostIncStmt = _visit_operand
    visitPostDecStmt = _visit_operand
    visitReadStmt = _visit_operand
    visitWriteStmt = _visit_operand

    def visitIfStmt(self, node: A.IfStmt):
        self.visit(node.exp)
        self._block(node.decls, node.stmts)

    def visitIfElseStmt(self, node: A.IfElseStmt):
        self.visit(node.exp)
        self._block(node.then_decls, node.then_stmts)
        self._block(node.else_decls, node.else_stmts)

    def visitWhileStmt(self, node: A.WhileStmt):
        self.visit(node.exp)
        self._block(node.decls, node.stmts)

    def visitRepeatStmt(self, node: A.RepeatStmt):
        self.visit(node.exp)
        self._block(node.decls, node.stmts)

    def visitCallStmt(self, node: A.CallStmt):
        self.visit(node.call)

    def visitReturnStmt(self, node: A.ReturnStmt):
        if node.exp is not None:
            self.visit(node.exp)

    # ---------------- Expressions ----------------

    def _literal(self, node) -> Symbol:
        return UndefinedSymbol()

    visitIntLit = _literal
    visitStrLit = _literal
    visitTrueLit = _literal
    visitFalseLit = _literal

    def visitIdNode(self, node: A.IdNode) -> Symbol:
        sym = self.symtab.lookup_global(node.name)
        if sym is None:
            self.err(node, UNDECLARED)
            sym = UndefinedSymbol()
        self.symbols[node] = sym
        return sym

    def visitDotAccess(self, node: A.DotAccess) -> Symbol:
        base = self.visit(node.loc)
        if base.category is not Category.STRUCT_VAR:
            self.err(node.loc, DOT_ACCESS_NON_STRUCT)
            return self._resolved(node, UndefinedSymbol())

        fields = base.fields
        field = fields.lookup_global(node.id.name) if fields is not None else None
        if field is None:
            self.err(node.id, INVALID_FIELD)
            return self._resolved(node, UndefinedSymbol())
        self.symbols[node.id] = field
        return self._resolved(node, field)

    def visitAssignExp(self, node: A.AssignExp) -> Symbol:
        self.visit(node.exp)
        return self._resolved(node, self.visit(node.lhs))

    def visitCallExp(self, node: A.CallExp) -> Symbol:
        self._visit_all(node.args)
        return self._resolved(node, self.visit(node.id))

    def _unary(self, node: A.UnaryExp) -> Symbol:
        return self.visit(node.exp)

    visitUnaryMinus = _unary
    visitNot = _unary

    def _binary(self, node: A.BinaryExp) -> Symbol:
        self.visit(node.exp2)
        return self.visit(node.exp1)

    visitPlus = _binary
    visitMinus = _binary
    visitTimes = _binary
    visitDivide = _binary
    visitAnd = _binary
    visitOr = _binary
    visitEquals = _binary
    visitNotEquals = _binary
    visitLess = _binary
    visitGreater = _binary
    visitLessEq = _binary
    visitGreaterEq = _binary

    def _resolved(self, node: A.Node, sym: Symbol) -> Symbol:
        self.symbols[node] = sym
        return sym


def analyze(program: A.Program, reporter: Optional[ErrorReporter] = None) -> SemanticChecker:
    """Run one semantic pass over ``program`` and return the checker."""
    checker = SemanticChecker(reporter)
    checker.check(program)
    return checker
