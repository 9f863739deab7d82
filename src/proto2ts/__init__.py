"""proto2ts - Generate TypeScript enums and their JSON converters from protobuf enum descriptors"""

__version__ = "0.1.0"

from . import constants
from . import generator
from . import proto_models

from .descriptor_loader import load_descriptor_file, load_descriptors
from .generator import generate_typescript_code
from .options import GenerationOptions, JsonMethods, parse_options
from .proto_models import EnumDescriptor, EnumValueDescriptor


__all__ = [
    "EnumDescriptor",
    "EnumValueDescriptor",
    "GenerationOptions",
    "JsonMethods",
    "generate_typescript_code",
    "load_descriptor_file",
    "load_descriptors",
    "parse_options",
]
