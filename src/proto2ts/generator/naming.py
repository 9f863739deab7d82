# ===== SECTION: IMPORTS =====
from dataclasses import dataclass
from typing import Optional

import inflection

from ..constants import SCOPE_SEPARATOR
from ..options import GenerationOptions
from ..proto_models import EnumDescriptor, EnumValueDescriptor


# ===== SECTION: CASE HELPERS =====

def camel_to_snake(name: str) -> str:
    """
    Converts a CamelCase schema name to the UPPER_SNAKE_CASE convention of enum values.

    Examples:
        >>> camel_to_snake("StatusCode")
        'STATUS_CODE'
    """
    return inflection.underscore(name).upper()


def uncapitalize(name: str) -> str:
    """Lower-cases the first character only ('Outer_Inner' -> 'outer_Inner')."""
    if not name:
        return name
    return name[0].lower() + name[1:]


# ===== SECTION: NAMING RESOLVER =====

@dataclass(frozen=True)
class EnumValueNames:
    """Names of one enum value: the TS member name and its wire/JSON name."""
    member_name: str
    external_name: str


def enum_prefix(enum_desc: EnumDescriptor) -> str:
    """The redundant prefix values of this enum commonly carry ('Status' -> 'STATUS_')."""
    return f"{camel_to_snake(enum_desc.name)}_"


def resolve_value_names(
    enum_desc: EnumDescriptor, value_desc: EnumValueDescriptor, options: GenerationOptions
) -> EnumValueNames:
    """
    Resolves the member and external names of an enum value.

    The external name is always the declared wire name. With `remove_enum_prefix`
    the enum's own name, converted to UPPER_SNAKE_CASE plus '_', is stripped once
    from the front of the member name. Stripped names are not checked for
    collisions.

    Args:
        enum_desc (EnumDescriptor): The enclosing enum
        value_desc (EnumValueDescriptor): The value to name
        options (GenerationOptions): Generation options

    Returns:
        EnumValueNames: The member and external names
    """
    external_name = value_desc.name
    member_name = external_name
    if options.remove_enum_prefix:
        prefix = enum_prefix(enum_desc)
        if member_name.startswith(prefix):
            member_name = member_name[len(prefix):]
    return EnumValueNames(member_name=member_name, external_name=external_name)


# ===== SECTION: SCOPE RESOLVER =====

@dataclass(frozen=True)
class ScopeSplit:
    """A flattened nested-enum name split into its enclosing scope and local name."""
    enclosing_scope: str
    local_name: str

    @property
    def reference(self) -> str:
        return f"{self.enclosing_scope}.{self.local_name}"


def split_scope(full_name: str, nested_as_scopes: bool) -> Optional[ScopeSplit]:
    """
    Splits `Outer_Inner` into ('Outer', 'Inner') at the last separator.

    Returns None when splitting is disabled or the name has no separator; the
    qualified name is then used unchanged everywhere.
    """
    if not nested_as_scopes or SCOPE_SEPARATOR not in full_name:
        return None
    enclosing, _, local = full_name.rpartition(SCOPE_SEPARATOR)
    return ScopeSplit(enclosing_scope=enclosing, local_name=local)


def enum_reference(full_name: str, scope: Optional[ScopeSplit]) -> str:
    """The expression generated code uses to refer to the enum."""
    return scope.reference if scope else full_name
