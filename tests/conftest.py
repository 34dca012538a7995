import os, sys

ROOT = os.path.dirname(os.path.dirname(__file__))
sys.path.append(os.path.join(ROOT, "src"))

from carrot import ast as A
from carrot.checker import SemanticChecker


def ident(name: str, line: int = 1, char: int = 1) -> A.IdNode:
    return A.IdNode(line, char, name)

def int_var(name: str, line: int = 1, char: int = 5) -> A.VarDecl:
    return A.VarDecl(A.IntNode(), ident(name, line, char))

def bool_var(name: str, line: int = 1, char: int = 6) -> A.VarDecl:
    return A.VarDecl(A.BoolNode(), ident(name, line, char))

def struct_var(struct: str, name: str, line: int = 1, char: int = 12) -> A.VarDecl:
    return A.VarDecl(A.StructNode(ident(struct, line, 8)), ident(name, line, char), size=0)

def struct_decl(name: str, *fields: A.DeclNode, line: int = 1) -> A.StructDecl:
    return A.StructDecl(ident(name, line, 8), tuple(fields))

def formal(name: str, tnode: A.TypeNode = None, line: int = 1, char: int = 1) -> A.FormalDecl:
    return A.FormalDecl(tnode or A.IntNode(), ident(name, line, char))

def fn(name, formals=(), decls=(), stmts=(), rtype=None, line=1) -> A.FnDecl:
    return A.FnDecl(rtype or A.VoidNode(), ident(name, line, 6),
                    tuple(formals), A.FnBody(tuple(decls), tuple(stmts)))

def assign(lhs: A.ExpNode, rhs: A.ExpNode) -> A.AssignStmt:
    return A.AssignStmt(A.AssignExp(lhs, rhs))

def dot(base: A.ExpNode, field: str, line: int = 1, char: int = 3) -> A.DotAccess:
    return A.DotAccess(base, ident(field, line, char))

def lit(value: int = 0, line: int = 1, char: int = 1) -> A.IntLit:
    return A.IntLit(line, char, value)

def program(*decls: A.DeclNode) -> A.Program:
    return A.Program(tuple(decls))


def check(prog: A.Program) -> SemanticChecker:
    checker = SemanticChecker()
    checker.check(prog)
    return checker

def messages(checker: SemanticChecker) -> list:
    return [d.message for d in checker.reporter.diagnostics]
