# ===== SECTION: IMPORTS AND SETUP =====
import logging
import os
from typing import List, Optional

from ..constants import FILE_HEADER_TEMPLATE
from ..errors import CodeGenerationError
from ..options import GenerationOptions
from ..proto_models import EnumDescriptor
from .code_builder import CodeBuilder
from .context import EnumContext
from .enum_generator import generate_enum_declaration
from .json_generator import generate_enum_from_json, generate_enum_to_json, generate_enum_to_number
from .unrecognized import UnrecognizedEnum


def generate_enum(
    enum_desc: EnumDescriptor, options: GenerationOptions, builder: CodeBuilder
) -> UnrecognizedEnum:
    """
    Generates the declaration and conversion functions of one enum.

    Args:
        enum_desc (EnumDescriptor): The enum to generate
        options (GenerationOptions): Generation options
        builder (CodeBuilder): Output buffer the fragments are appended to, in order

    Returns:
        UnrecognizedEnum: The sentinel decision shared by all emitted functions

    Raises:
        CodeGenerationError: If the descriptor has no usable name
    """
    if not enum_desc.full_name:
        raise CodeGenerationError("Enum descriptor has an empty name", enum_name=enum_desc.name or None)

    ctx = EnumContext.build(enum_desc, options)
    logging.debug(f"Generating enum {ctx.full_name} ({type(ctx.strategy).__name__})")

    # The declaration decides the sentinel policy; everything below reuses it
    unrecognized = generate_enum_declaration(ctx, builder)

    if options.emit_from_json:
        generate_enum_from_json(ctx, unrecognized, builder)
    if options.emit_to_json:
        generate_enum_to_json(ctx, unrecognized, builder)
    if options.emit_to_number:
        generate_enum_to_number(ctx, unrecognized, builder)

    return unrecognized


def generate_typescript_code(
    enums: List[EnumDescriptor],
    options: Optional[GenerationOptions] = None,
    source_file: str = "",
) -> str:
    """
    Generates a complete TypeScript module for the given enums.

    Args:
        enums (List[EnumDescriptor]): Enums to generate, in output order
        options (GenerationOptions, optional): Generation options. Defaults to the defaults.
        source_file (str, optional): Name of the descriptor source for the header comment

    Returns:
        str: The TypeScript module as a string, with a trailing newline

    Notes:
        - The output follows a consistent structure: header → helpers → enums
        - Helpers are only emitted when a generated function refers to them
    """
    options = options or GenerationOptions()
    builder = CodeBuilder()

    for enum_desc in enums:
        logging.info(f"Generating enum: {enum_desc.full_name}")
        generate_enum(enum_desc, options, builder)

    source_name = os.path.basename(source_file) if source_file else "descriptors"
    final_parts = [FILE_HEADER_TEMPLATE.format(source_name=source_name)]
    final_parts.extend(builder.helper_code())
    code_body = builder.render()
    if code_body:
        final_parts.append(code_body)

    return "\n\n".join(part for part in final_parts if part) + "\n"
