# ===== SECTION: IMPORTS AND SETUP =====
import logging
from typing import Iterable, List, Set

from ..constants import HELPER_CODE, INDENT


def indent_lines(lines: Iterable[str], level: int = 1) -> List[str]:
    """Indents every non-empty line by `level` indentation units."""
    prefix = INDENT * level
    return [f"{prefix}{line}" if line else line for line in lines]


class CodeBuilder:
    """
    Output buffer for generated TypeScript.

    Collects code fragments in order, records every top-level symbol a fragment
    defines, and tracks which shared helpers the fragments rely on so that the
    file assembler can emit each helper exactly once.
    """

    def __init__(self):
        self.fragments: List[str] = []
        self.definitions: List[str] = []
        self.helpers: Set[str] = set()

    def define(self, symbol: str) -> str:
        """Records a symbol definition and returns the symbol for inline use."""
        if symbol not in self.definitions:
            self.definitions.append(symbol)
        return symbol

    def require_helper(self, name: str) -> str:
        """Registers a shared helper (e.g. the global object accessor) and returns its name."""
        if name not in HELPER_CODE:
            raise KeyError(f"Unknown helper '{name}'")
        if name not in self.helpers:
            logging.debug(f"Registering helper {name}")
            self.helpers.add(name)
        return name

    def append(self, lines: Iterable[str]):
        """Appends one fragment made of the given lines."""
        fragment = "\n".join(lines)
        if fragment.strip():
            self.fragments.append(fragment)

    def helper_code(self) -> List[str]:
        """Returns the code of every registered helper, in a stable order."""
        return [HELPER_CODE[name] for name in sorted(self.helpers)]

    def render(self) -> str:
        """Joins all fragments, separated by a blank line."""
        return "\n\n".join(self.fragments)
