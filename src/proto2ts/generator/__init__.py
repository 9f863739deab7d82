from .code_builder import CodeBuilder
from .core import generate_enum, generate_typescript_code
from .unrecognized import UnrecognizedEnum

__all__ = ["CodeBuilder", "UnrecognizedEnum", "generate_enum", "generate_typescript_code"]
