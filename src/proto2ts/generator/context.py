# ===== SECTION: IMPORTS =====
from dataclasses import dataclass
from typing import Optional, Tuple

from ..options import GenerationOptions
from ..proto_models import EnumDescriptor, EnumValueDescriptor
from .naming import EnumValueNames, ScopeSplit, enum_reference, resolve_value_names, split_scope, uncapitalize
from .strategies import RepresentationStrategy, select_strategy


# ===== SECTION: PER-ENUM CONTEXT =====

@dataclass(frozen=True)
class EnumContext:
    """
    Everything the emitters need to know about one enum, resolved once.

    Value names are resolved here and only here so that the declaration and the
    conversion functions always agree on them.
    """
    enum_desc: EnumDescriptor
    options: GenerationOptions
    strategy: RepresentationStrategy
    scope: Optional[ScopeSplit]
    named_values: Tuple[Tuple[EnumValueDescriptor, EnumValueNames], ...]

    @classmethod
    def build(cls, enum_desc: EnumDescriptor, options: GenerationOptions) -> "EnumContext":
        named_values = tuple(
            (value_desc, resolve_value_names(enum_desc, value_desc, options))
            for value_desc in enum_desc.values
        )
        return cls(
            enum_desc=enum_desc,
            options=options,
            strategy=select_strategy(options),
            scope=split_scope(enum_desc.full_name, options.nested_enums_as_namespaces),
            named_values=named_values,
        )

    @property
    def full_name(self) -> str:
        return self.enum_desc.full_name

    @property
    def declared_name(self) -> str:
        """Name used in the declaration itself (the local name inside a scope)."""
        return self.scope.local_name if self.scope else self.full_name

    @property
    def reference(self) -> str:
        """Name used by generated code to refer to the enum ('Outer.Inner' inside a scope)."""
        return enum_reference(self.full_name, self.scope)

    def function_name(self, suffix: str) -> str:
        return uncapitalize(self.full_name) + suffix
