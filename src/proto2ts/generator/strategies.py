# ===== SECTION: IMPORTS AND SETUP =====
from typing import List, Sequence

from ..options import GenerationOptions
from .code_builder import indent_lines


# ===== SECTION: REPRESENTATION STRATEGIES =====

class RepresentationStrategy:
    """
    How an enum is represented in TypeScript.

    Chosen once per enum by `select_strategy`; the declaration emitter is written
    against this interface only.
    """

    def scope_open(self, scope_name: str) -> str:
        raise NotImplementedError

    def declaration_open(self, name: str) -> str:
        raise NotImplementedError

    def member(self, member_name: str, value_literal: str) -> str:
        raise NotImplementedError

    def declaration_close(self, name: str, member_names: Sequence[str]) -> List[str]:
        raise NotImplementedError


class NativeEnumStrategy(RepresentationStrategy):
    """`export enum X { A = 0 }`, or `export const enum` when erased at compile time."""

    def __init__(self, const_enums: bool = False):
        self.const_enums = const_enums

    def scope_open(self, scope_name: str) -> str:
        return f"export declare namespace {scope_name} {{"

    def declaration_open(self, name: str) -> str:
        keyword = "const enum" if self.const_enums else "enum"
        return f"export {keyword} {name} {{"

    def member(self, member_name: str, value_literal: str) -> str:
        return f"{member_name} = {value_literal},"

    def declaration_close(self, name: str, member_names: Sequence[str]) -> List[str]:
        return ["}"]


class LiteralObjectStrategy(RepresentationStrategy):
    """
    `export const X = { A: 0 } as const` with a derived union type.

    An object is not a type, so every member also gets a type alias, kept in a
    namespace of the same name to separate the value and type namespaces.
    """

    def scope_open(self, scope_name: str) -> str:
        # An ambient (declare) namespace cannot hold const initializers
        return f"export namespace {scope_name} {{"

    def declaration_open(self, name: str) -> str:
        return f"export const {name} = {{"

    def member(self, member_name: str, value_literal: str) -> str:
        return f"{member_name}: {value_literal},"

    def declaration_close(self, name: str, member_names: Sequence[str]) -> List[str]:
        lines = [
            "} as const;",
            "",
            f"export type {name} = typeof {name}[keyof typeof {name}];",
            "",
            f"export namespace {name} {{",
        ]
        aliases = [f"export type {member} = typeof {name}.{member};" for member in member_names]
        lines.extend(indent_lines(aliases))
        lines.append("}")
        return lines


def select_strategy(options: GenerationOptions) -> RepresentationStrategy:
    """Picks the representation strategy for one enum."""
    if options.enums_as_literals:
        return LiteralObjectStrategy()
    return NativeEnumStrategy(const_enums=options.const_enums)
