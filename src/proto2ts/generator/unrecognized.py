# ===== SECTION: IMPORTS =====
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..options import GenerationOptions
from ..proto_models import EnumValueDescriptor
from .naming import EnumValueNames


# ===== SECTION: UNRECOGNIZED-VALUE POLICY =====

@dataclass(frozen=True)
class UnrecognizedEnum:
    """
    Whether a declared value already occupies the sentinel code.

    When `present`, `member_name` and `external_name` name that value and every
    emitter reuses it instead of synthesizing a second sentinel member.
    """
    present: bool = False
    member_name: Optional[str] = None
    external_name: Optional[str] = None

    @classmethod
    def absent(cls) -> "UnrecognizedEnum":
        return cls()

    @classmethod
    def from_names(cls, names: EnumValueNames) -> "UnrecognizedEnum":
        return cls(present=True, member_name=names.member_name, external_name=names.external_name)

    def needs_synthesis(self, options: GenerationOptions) -> bool:
        """True when the sentinel member must be added by the generator."""
        return options.unrecognized_enum and not self.present


def resolve_unrecognized_enum(
    named_values: Iterable[Tuple[EnumValueDescriptor, EnumValueNames]], options: GenerationOptions
) -> UnrecognizedEnum:
    """
    Decides whether the sentinel code is taken by a declared value.

    The first value with the sentinel code wins; later aliases of that code are
    ignored.
    """
    for value_desc, names in named_values:
        if value_desc.number == options.unrecognized_enum_value:
            logging.debug(
                f"Value {names.external_name} occupies sentinel code {options.unrecognized_enum_value}"
            )
            return UnrecognizedEnum.from_names(names)
    return UnrecognizedEnum.absent()
