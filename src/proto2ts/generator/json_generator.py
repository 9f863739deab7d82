# ===== SECTION: IMPORTS AND SETUP =====
import logging
from typing import List, Sequence

from ..constants import (
    FROM_JSON_SUFFIX,
    GLOBAL_THIS_NAME,
    INDENT,
    TO_JSON_SUFFIX,
    TO_NUMBER_SUFFIX,
    UNRECOGNIZED_ENUM_ERROR_TEMPLATE,
)
from .code_builder import CodeBuilder, indent_lines
from .context import EnumContext
from .unrecognized import UnrecognizedEnum


# ===== SECTION: HELPERS =====

def _case_arm(labels: Sequence[str], statement: str) -> List[str]:
    """One switch arm: `case` / `default` labels falling through to a single statement."""
    lines = [label if label == "default:" else f"case {label}:" for label in labels]
    lines.append(f"{INDENT}{statement}")
    return lines


def _switch_function(signature: str, arms: List[str]) -> List[str]:
    lines = [f"{signature} {{", f"{INDENT}switch (object) {{"]
    lines.extend(indent_lines(arms, 2))
    lines.append(f"{INDENT}}}")
    lines.append("}")
    return lines


def _unrecognized_error(ctx: EnumContext, builder: CodeBuilder) -> str:
    global_this = builder.require_helper(GLOBAL_THIS_NAME)
    return UNRECOGNIZED_ENUM_ERROR_TEMPLATE.format(global_this=global_this, enum_name=ctx.full_name)


def _quoted(name: str) -> str:
    return f'"{name}"'


# ===== SECTION: JSON DECODE =====

def generate_enum_from_json(ctx: EnumContext, unrecognized: UnrecognizedEnum, builder: CodeBuilder) -> str:
    """
    Emits `<name>FromJSON(object: any)`, mapping a numeric code or wire name to a member.

    Both representations are accepted whatever the JSON encoding mode is.

    Args:
        ctx (EnumContext): The resolved enum
        unrecognized (UnrecognizedEnum): Decision returned by the declaration emitter
        builder (CodeBuilder): Output buffer

    Returns:
        str: The name of the generated function
    """
    options = ctx.options
    ref = ctx.reference
    function_name = builder.define(ctx.function_name(FROM_JSON_SUFFIX))

    arms: List[str] = []
    for value_desc, names in ctx.named_values:
        arms.extend(
            _case_arm([str(value_desc.number), _quoted(names.external_name)], f"return {ref}.{names.member_name};")
        )

    if options.unrecognized_enum:
        if not unrecognized.present:
            sentinel = options.unrecognized_enum_name
            arms.extend(
                _case_arm(
                    [str(options.unrecognized_enum_value), _quoted(sentinel), "default:"],
                    f"return {ref}.{sentinel};",
                )
            )
        else:
            arms.extend(_case_arm(["default:"], f"return {ref}.{unrecognized.member_name};"))
    else:
        arms.extend(_case_arm(["default:"], _unrecognized_error(ctx, builder)))

    builder.append(_switch_function(f"export function {function_name}(object: any): {ref}", arms))
    logging.debug(f"Generated {function_name}")
    return function_name


# ===== SECTION: JSON ENCODE =====

def generate_enum_to_json(ctx: EnumContext, unrecognized: UnrecognizedEnum, builder: CodeBuilder) -> str:
    """
    Emits `<name>ToJSON(object)`, mapping a member to its wire name, or to its
    numeric code when `use_numeric_enum_for_json` is set.
    """
    options = ctx.options
    ref = ctx.reference
    numeric = options.use_numeric_enum_for_json
    function_name = builder.define(ctx.function_name(TO_JSON_SUFFIX))
    return_type = "number" if numeric else "string"

    arms: List[str] = []
    for value_desc, names in ctx.named_values:
        result = str(value_desc.number) if numeric else _quoted(names.external_name)
        arms.extend(_case_arm([f"{ref}.{names.member_name}"], f"return {result};"))

    if options.unrecognized_enum:
        if not unrecognized.present:
            sentinel = options.unrecognized_enum_name
            result = str(options.unrecognized_enum_value) if numeric else _quoted(sentinel)
            arms.extend(_case_arm([f"{ref}.{sentinel}", "default:"], f"return {result};"))
        else:
            result = str(options.unrecognized_enum_value) if numeric else _quoted(unrecognized.external_name)
            arms.extend(_case_arm(["default:"], f"return {result};"))
    else:
        arms.extend(_case_arm(["default:"], _unrecognized_error(ctx, builder)))

    builder.append(
        _switch_function(f"export function {function_name}(object: {ref}): {return_type}", arms)
    )
    logging.debug(f"Generated {function_name}")
    return function_name


# ===== SECTION: NUMERIC ENCODE =====

def generate_enum_to_number(ctx: EnumContext, unrecognized: UnrecognizedEnum, builder: CodeBuilder) -> str:
    """
    Emits `<name>ToNumber(object)` for string enums, mapping a member to its numeric code.

    Values reaching this function are assumed already validated, so the fallback
    always returns the sentinel code and there is no failure path.
    """
    options = ctx.options
    ref = ctx.reference
    function_name = builder.define(ctx.function_name(TO_NUMBER_SUFFIX))

    arms: List[str] = []
    for value_desc, names in ctx.named_values:
        arms.extend(_case_arm([f"{ref}.{names.member_name}"], f"return {value_desc.number};"))

    fallback = f"return {options.unrecognized_enum_value};"
    if unrecognized.needs_synthesis(options):
        arms.extend(_case_arm([f"{ref}.{options.unrecognized_enum_name}", "default:"], fallback))
    else:
        arms.extend(_case_arm(["default:"], fallback))

    builder.append(_switch_function(f"export function {function_name}(object: {ref}): number", arms))
    logging.debug(f"Generated {function_name}")
    return function_name
