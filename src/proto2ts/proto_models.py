# ===== SECTION: IMPORTS =====
from dataclasses import dataclass, field
from typing import List, Optional


# ===== SECTION: DATA STRUCTURES =====
# Core data structures describing protobuf enums handed to the generator

@dataclass(frozen=True)
class EnumValueDescriptor:
    """
    Represents a single value of a protobuf enum.

    Attributes:
        name (str): Wire name of the value (e.g., 'STATUS_OK'), unique within its enum
        number (int): Numeric wire code; several values may share one (aliases)
        deprecated (bool): Whether the value is marked `deprecated = true`
        comment (Optional[str]): Pre-resolved leading comment of the value
    """
    name: str
    number: int
    deprecated: bool = False
    comment: Optional[str] = None


@dataclass(frozen=True)
class EnumDescriptor:
    """
    Represents a protobuf enum after schema parsing and name resolution.

    The generator only reads these objects; they are owned by the caller.

    Attributes:
        name (str): The enum's own name as written in the schema (e.g., 'Inner')
        full_name (str): Flattened qualified name used for the TypeScript symbol
            (e.g., 'Outer_Inner'). Defaults to `name`.
        values (List[EnumValueDescriptor]): Declared values, in schema order
        deprecated (bool): Whether the enum is marked `deprecated = true`
        comment (Optional[str]): Pre-resolved leading comment of the enum
    """
    name: str
    values: List[EnumValueDescriptor] = field(default_factory=list)
    full_name: Optional[str] = None
    deprecated: bool = False
    comment: Optional[str] = None

    def __post_init__(self):
        if self.full_name is None:
            # Frozen dataclass: bypass __setattr__ to fill in the default
            object.__setattr__(self, "full_name", self.name)
        object.__setattr__(self, "values", list(self.values))
