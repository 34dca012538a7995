import itertools
import logging
from typing import Dict, Optional
from graphviz import Digraph
from . import ast as A
from .symbols import Symbol

logger = logging.getLogger(__name__)


def _label(node: A.Node, symbols: Dict[A.Node, Symbol]) -> str:
    if isinstance(node, A.IdNode):
        sym = symbols.get(node)
        if sym is not None:
            return f"'{node.name}' ({sym})"
        return f"'{node.name}'"
    if isinstance(node, (A.IntLit, A.StrLit)):
        return repr(node.value)
    if isinstance(node, A.TrueLit):
        return "true"
    if isinstance(node, A.FalseLit):
        return "false"
    return type(node).__name__


def _walk(dot, node, symbols, idx_gen):
    my_id = next(idx_gen)
    dot.node(str(my_id), _label(node, symbols))

    for child in node.children():
        child_id = _walk(dot, child, symbols, idx_gen)
        dot.edge(str(my_id), str(child_id))
    return my_id


def ast_to_digraph(tree: A.Node, symbols: Optional[Dict[A.Node, Symbol]] = None) -> Digraph:
    """Build a Digraph of ``tree``; identifiers show their resolved symbol."""
    dot = Digraph(comment="AST", format="svg")
    _walk(dot, tree, symbols or {}, itertools.count())
    return dot


def render_ast_svg(tree: A.Node, symbols: Optional[Dict[A.Node, Symbol]] = None) -> str:
    dot = ast_to_digraph(tree, symbols)
    logger.debug("rendering AST graph with %d statements", len(dot.body))
    return dot.pipe().decode("utf-8")
