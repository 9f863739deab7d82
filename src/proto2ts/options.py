# ===== SECTION: IMPORTS =====
import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Dict, Optional

import inflection

from .constants import DEFAULT_UNRECOGNIZED_ENUM_NAME, DEFAULT_UNRECOGNIZED_ENUM_VALUE
from .errors import OptionsError


# ===== SECTION: DATA STRUCTURES =====

class JsonMethods(Enum):
    """Which JSON conversion functions are emitted for each enum."""
    ALWAYS = "true"
    NEVER = "false"
    FROM_ONLY = "from-only"
    TO_ONLY = "to-only"


@dataclass(frozen=True)
class GenerationOptions:
    """
    Options controlling how enums are rendered. Read-only for the duration of a run.

    Attributes:
        nested_enums_as_namespaces (bool): Emit `Outer_Inner` as `Outer.Inner` inside a namespace
        enums_as_literals (bool): Emit a frozen `{...} as const` object instead of a TS `enum`
        const_enums (bool): Emit `const enum` (erased at compile time); native enums only
        string_enums (bool): Members hold their wire names instead of numeric codes
        remove_enum_prefix (bool): Strip the `ENUM_NAME_` prefix from member names
        output_json_methods (JsonMethods): Which of FromJSON / ToJSON are emitted
        use_numeric_enum_for_json (bool): ToJSON returns numeric codes instead of names
        output_encode_methods (bool): Emit ToNumber for string enums (binary encoding support)
        unrecognized_enum (bool): Keep decoding total with a sentinel member
        unrecognized_enum_name (str): Name of the sentinel member
        unrecognized_enum_value (int): Numeric code of the sentinel member
        comments (bool): Render documentation comments above declarations
    """
    nested_enums_as_namespaces: bool = False
    enums_as_literals: bool = False
    const_enums: bool = False
    string_enums: bool = False
    remove_enum_prefix: bool = False
    output_json_methods: JsonMethods = JsonMethods.ALWAYS
    use_numeric_enum_for_json: bool = False
    output_encode_methods: bool = True
    unrecognized_enum: bool = True
    unrecognized_enum_name: str = DEFAULT_UNRECOGNIZED_ENUM_NAME
    unrecognized_enum_value: int = DEFAULT_UNRECOGNIZED_ENUM_VALUE
    comments: bool = True

    @property
    def emit_from_json(self) -> bool:
        if self.output_json_methods in (JsonMethods.ALWAYS, JsonMethods.FROM_ONLY):
            return True
        # String enums with binary support decode through FromJSON as well
        return self.string_enums and self.output_encode_methods

    @property
    def emit_to_json(self) -> bool:
        return self.output_json_methods in (JsonMethods.ALWAYS, JsonMethods.TO_ONLY)

    @property
    def emit_to_number(self) -> bool:
        return self.string_enums and self.output_encode_methods


# ===== SECTION: PARSING =====

_TRUE_VALUES = {"true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}


def _parse_bool(option: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise OptionsError("Expected a boolean", option=option, value=raw)


def _parse_json_methods(option: str, raw: str) -> JsonMethods:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return JsonMethods.ALWAYS
    if lowered in _FALSE_VALUES:
        return JsonMethods.NEVER
    try:
        return JsonMethods(lowered)
    except ValueError:
        raise OptionsError(
            "Expected one of true, false, from-only, to-only", option=option, value=raw
        ) from None


def _parse_int(option: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise OptionsError("Expected an integer", option=option, value=raw) from None


def _parse_name(option: str, raw: str) -> str:
    name = raw.strip()
    if not name.isidentifier():
        raise OptionsError("Expected an identifier", option=option, value=raw)
    return name


_PARSERS = {
    "output_json_methods": _parse_json_methods,
    "unrecognized_enum_value": _parse_int,
    "unrecognized_enum_name": _parse_name,
}


def parse_options(parameter: Optional[str], base: GenerationOptions = None) -> GenerationOptions:
    """
    Parses a protoc-plugin style parameter string into GenerationOptions.

    Args:
        parameter (Optional[str]): Comma separated `key=value` pairs, e.g.
            "stringEnums=true,outputJsonMethods=from-only". Keys may be camelCase or
            snake_case; a bare key means `true`.
        base (GenerationOptions, optional): Options to start from. Defaults to the defaults.

    Returns:
        GenerationOptions: The resulting options

    Raises:
        OptionsError: On unknown keys or malformed values
    """
    options = base or GenerationOptions()
    if not parameter or not parameter.strip():
        return options

    known = {f.name for f in fields(GenerationOptions)}
    changes: Dict[str, object] = {}

    for entry in parameter.split(","):
        entry = entry.strip()
        if not entry:
            continue
        key, sep, raw = entry.partition("=")
        key = key.strip()
        field_name = inflection.underscore(key)
        if field_name not in known:
            raise OptionsError("Unknown option", option=key)
        if not sep:
            raw = "true"

        parser = _PARSERS.get(field_name, _parse_bool)
        changes[field_name] = parser(key, raw)
        logging.debug(f"Option {field_name} = {changes[field_name]!r}")

    options = replace(options, **changes)

    if options.const_enums and options.enums_as_literals:
        logging.warning("constEnums has no effect together with enumsAsLiterals; ignoring it.")
    if options.output_encode_methods and not options.string_enums and "output_encode_methods" in changes:
        logging.debug("outputEncodeMethods only adds ToNumber for string enums.")

    return options
