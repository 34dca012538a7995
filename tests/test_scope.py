import io
import pytest

from carrot.errors import DuplicateSymbolError, EmptySymTableError, WrongArgumentError
from carrot.scope import SymTable
from carrot.symbols import FormalSymbol, NormalSymbol
from carrot.types import BOOL, INT


def test_new_table_has_one_scope():
    t = SymTable()
    assert len(t) == 1
    assert t.lookup_local("x") is None
    assert t.lookup_global("x") is None

def test_scope_count_follows_pushes_and_pops():
    t = SymTable()
    for _ in range(3):
        t.add_scope()
    t.remove_scope()
    assert len(t) == 1 + 3 - 1

def test_empty_table_rejects_everything_but_add_scope():
    t = SymTable()
    t.remove_scope()
    assert len(t) == 0
    with pytest.raises(EmptySymTableError):
        t.add_decl("x", NormalSymbol(INT))
    with pytest.raises(EmptySymTableError):
        t.lookup_local("x")
    with pytest.raises(EmptySymTableError):
        t.lookup_global("x")
    with pytest.raises(EmptySymTableError):
        t.remove_scope()
    t.add_scope()
    t.add_decl("x", NormalSymbol(INT))
    assert len(t) == 1

def test_empty_check_comes_before_argument_check():
    t = SymTable()
    t.remove_scope()
    with pytest.raises(EmptySymTableError):
        t.add_decl(None, None)

@pytest.mark.parametrize("name, sym, message", [
    (None, NormalSymbol(INT), "Id name is null."),
    ("x", None, "Sym is null."),
    (None, None, "Id name and sym are null."),
])
def test_add_decl_wrong_arguments(name, sym, message):
    t = SymTable()
    with pytest.raises(WrongArgumentError) as exc:
        t.add_decl(name, sym)
    assert str(exc.value) == message
    assert t.lookup_local("x") is None

def test_duplicate_in_same_scope():
    t = SymTable()
    first = NormalSymbol(INT)
    t.add_decl("x", first)
    with pytest.raises(DuplicateSymbolError) as exc:
        t.add_decl("x", NormalSymbol(BOOL))
    assert exc.value.name == "x"
    assert t.lookup_local("x") is first

def test_shadowing_in_new_scope():
    t = SymTable()
    outer = NormalSymbol(INT)
    inner = NormalSymbol(BOOL)
    t.add_decl("x", outer)
    t.add_scope()
    t.add_decl("x", inner)
    assert t.lookup_local("x") is inner
    assert t.lookup_global("x") is inner
    t.remove_scope()
    assert t.lookup_global("x") is outer

def test_lookup_local_sees_only_innermost():
    t = SymTable()
    sym = FormalSymbol(INT)
    t.add_decl("a", sym)
    t.add_scope()
    assert t.lookup_local("a") is None
    assert t.lookup_global("a") is sym

def test_lookup_global_searches_every_scope():
    t = SymTable()
    a, b = NormalSymbol(INT), NormalSymbol(BOOL)
    t.add_decl("a", a)
    t.add_scope()
    t.add_decl("b", b)
    t.add_scope()
    assert t.lookup_global("a") is a
    assert t.lookup_global("b") is b
    assert t.lookup_global("c") is None

def test_dump_lists_scopes_innermost_first():
    t = SymTable()
    t.add_decl("a", NormalSymbol(INT))
    t.add_scope()
    t.add_decl("b", NormalSymbol(BOOL))
    lines = t.dumps().splitlines()
    assert lines[0] == "=== Sym Table ==="
    assert lines[1] == "{b=bool}"
    assert lines[2] == "{a=int}"
    assert str(t) == t.dumps()

def test_print_writes_dump_without_changing_state():
    t = SymTable()
    t.add_decl("a", NormalSymbol(INT))
    out = io.StringIO()
    t.print(out)
    assert "{a=int}" in out.getvalue()
    assert len(t) == 1
    assert t.lookup_local("a") is not None

def test_print_on_empty_table():
    t = SymTable()
    t.remove_scope()
    out = io.StringIO()
    t.print(out)
    assert out.getvalue().strip() == "=== Sym Table ==="
