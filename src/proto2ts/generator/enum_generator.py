# ===== SECTION: IMPORTS AND SETUP =====
import logging
from typing import List

from ..comment_formatter import format_doc_comment
from .code_builder import CodeBuilder, indent_lines
from .context import EnumContext
from .unrecognized import UnrecognizedEnum, resolve_unrecognized_enum


def _value_literal(ctx: EnumContext, external_name: str, number: int) -> str:
    """The value a member holds: its quoted wire name for string enums, else its code."""
    if ctx.options.string_enums:
        return f'"{external_name}"'
    return str(number)


def generate_enum_declaration(ctx: EnumContext, builder: CodeBuilder) -> UnrecognizedEnum:
    """
    Emits the TypeScript declaration of an enum.

    Args:
        ctx (EnumContext): The resolved enum
        builder (CodeBuilder): Output buffer the declaration is appended to

    Returns:
        UnrecognizedEnum: Whether a declared value already occupies the sentinel
            code. The conversion emitters must be given this same decision.

    Notes:
        - Aliased values (shared numeric codes) are all declared, in schema order
        - The sentinel member is appended last, and only when no declared value has its code
        - With scope splitting the whole declaration sits inside `namespace Outer { ... }`
    """
    options = ctx.options
    strategy = ctx.strategy
    name = builder.define(ctx.declared_name)

    unrecognized = resolve_unrecognized_enum(ctx.named_values, options)

    members: List[str] = []
    member_names: List[str] = []
    for value_desc, names in ctx.named_values:
        if options.comments:
            members.extend(
                format_doc_comment(value_desc.comment, value_desc.deprecated, prefix=f"{names.member_name} - ")
            )
        members.append(
            strategy.member(names.member_name, _value_literal(ctx, names.external_name, value_desc.number))
        )
        member_names.append(names.member_name)

    if unrecognized.needs_synthesis(options):
        sentinel = options.unrecognized_enum_name
        members.append(
            strategy.member(sentinel, _value_literal(ctx, sentinel, options.unrecognized_enum_value))
        )
        member_names.append(sentinel)

    declaration = [strategy.declaration_open(name)]
    declaration.extend(indent_lines(members))
    declaration.extend(strategy.declaration_close(name, member_names))

    lines: List[str] = []
    if options.comments:
        lines.extend(format_doc_comment(ctx.enum_desc.comment, ctx.enum_desc.deprecated))
    if ctx.scope:
        lines.append(strategy.scope_open(builder.define(ctx.scope.enclosing_scope)))
        lines.extend(indent_lines(declaration))
        lines.append("}")
    else:
        lines.extend(declaration)

    logging.debug(
        f"Declared enum {ctx.reference} with {len(member_names)} members "
        f"(sentinel {'reused' if unrecognized.present else 'absent'})"
    )
    builder.append(lines)
    return unrecognized
