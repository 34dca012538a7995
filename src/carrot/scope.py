import logging
import sys
from typing import Dict, List, Optional, TextIO
from .errors import DuplicateSymbolError, EmptySymTableError, WrongArgumentError
from .symbols import Symbol

logger = logging.getLogger(__name__)


class SymTable:
    """Stack of scopes, innermost first.

    A new table holds a single empty scope. Every operation except
    ``add_scope`` raises ``EmptySymTableError`` once all scopes have been
    removed.
    """

    def __init__(self) -> None:
        self._frames: List[Dict[str, Symbol]] = [{}]

    def __len__(self) -> int:
        return len(self._frames)

    def _innermost(self) -> Dict[str, Symbol]:
        if not self._frames:
            raise EmptySymTableError()
        return self._frames[0]

    def add_decl(self, name: Optional[str], sym: Optional[Symbol]) -> None:
        frame = self._innermost()
        if name is None and sym is None:
            raise WrongArgumentError("Id name and sym are null.")
        if name is None:
            raise WrongArgumentError("Id name is null.")
        if sym is None:
            raise WrongArgumentError("Sym is null.")
        if name in frame:
            raise DuplicateSymbolError(name)
        frame[name] = sym

    def add_scope(self) -> None:
        self._frames.insert(0, {})
        logger.debug("scope pushed (depth %d)", len(self._frames))

    def remove_scope(self) -> None:
        if not self._frames:
            raise EmptySymTableError()
        self._frames.pop(0)
        logger.debug("scope popped (depth %d)", len(self._frames))

    def lookup_local(self, name: str) -> Optional[Symbol]:
        return self._innermost().get(name)

    def lookup_global(self, name: str) -> Optional[Symbol]:
        if not self._frames:
            raise EmptySymTableError()
        for frame in self._frames:
            if name in frame:
                return frame[name]
        return None

    def dumps(self) -> str:
        lines = ["=== Sym Table ==="]
        for frame in self._frames:
            body = ", ".join(f"{name}={sym}" for name, sym in frame.items())
            lines.append("{" + body + "}")
        return "\n".join(lines)

    def print(self, file: Optional[TextIO] = None) -> None:
        out = file if file is not None else sys.stdout
        out.write("\n" + self.dumps() + "\n\n")

    def __str__(self):
        return self.dumps()

    def __repr__(self):
        return f"SymTable(depth={len(self._frames)})"
