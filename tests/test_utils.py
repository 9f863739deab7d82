"""Test utilities for proto2ts tests.

This module provides descriptor builders and a tiny evaluator for the generated
`switch` functions, so conversion behaviour can be checked without a TypeScript
toolchain.
"""

import json
import re
from typing import Dict, List, Optional, Tuple, Union

from proto2ts import generate_typescript_code
from proto2ts.options import GenerationOptions
from proto2ts.proto_models import EnumDescriptor
from proto2ts.proto_models import EnumValueDescriptor


def make_enum(
    name: str, values: Union[Dict[str, int], List[Tuple[str, int]]], full_name: Optional[str] = None, **kwargs
) -> EnumDescriptor:
    """Create an EnumDescriptor for testing.

    Args:
        name: The enum's own name
        values: Value names mapped to numbers, or (name, number) pairs to allow aliases
        full_name: Flattened qualified name, defaults to name
        **kwargs: Extra EnumDescriptor fields (deprecated, comment)

    Returns:
        The EnumDescriptor
    """
    pairs = values.items() if isinstance(values, dict) else values
    return EnumDescriptor(
        name=name,
        full_name=full_name,
        values=[EnumValueDescriptor(name=n, number=num) for n, num in pairs],
        **kwargs,
    )


COLOR = {"RED": 0, "GREEN": 1, "BLUE": 2}


def generate(enum: EnumDescriptor, **option_overrides) -> str:
    """Generate a TypeScript module for a single enum with the given option overrides."""
    return generate_typescript_code([enum], GenerationOptions(**option_overrides))


def descriptor_json(*enums: dict) -> str:
    """Serialize raw enum dicts to the descriptor JSON document format."""
    return json.dumps({"enums": list(enums)})


def extract_function(code: str, function_name: str) -> str:
    """Return the source of a generated top-level function.

    Raises:
        ValueError: If the function is not present
    """
    lines = code.split("\n")
    for start, line in enumerate(lines):
        if line.startswith(f"export function {function_name}("):
            for end in range(start + 1, len(lines)):
                if lines[end] == "}":
                    return "\n".join(lines[start : end + 1])
    raise ValueError(f"Function {function_name} not found in generated code")


class UnrecognizedValueThrown(Exception):
    """Raised by GeneratedSwitch when the generated function would throw."""


MEMBER_REGEX = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*(?:=|:)\s*(-?\d+|\"[^\"]*\"),\s*$")


def parse_members(code: str, declared_name: str) -> Dict[str, Union[int, str]]:
    """Parse `NAME = value,` / `NAME: value,` members of a declaration into a dict."""
    lines = code.split("\n")
    opener = re.compile(rf"^\s*export (?:const enum|enum|const) {re.escape(declared_name)} (?:= )?\{{$")
    members: Dict[str, Union[int, str]] = {}
    inside = False
    for line in lines:
        if not inside:
            inside = bool(opener.match(line))
            continue
        if line.strip().startswith("}"):
            break
        match = MEMBER_REGEX.match(line)
        if match:
            members[match.group(1)] = _literal(match.group(2))
    return members


def _literal(text: str) -> Union[int, str]:
    text = text.strip()
    if text.startswith('"'):
        return text[1:-1]
    return int(text)


class GeneratedSwitch:
    """Evaluates a generated `switch (object)` function the way JavaScript would.

    Arms are tried in order with strict equality; `default` applies when nothing
    matches. Member references in labels (e.g. `Color.RED`) are resolved through
    the `members` mapping.
    """

    def __init__(self, code: str, function_name: str, members: Optional[Dict[str, Union[int, str]]] = None):
        self.source = extract_function(code, function_name)
        self.members = members or {}
        self.arms: List[Tuple[List[str], str]] = []
        self.default: Optional[str] = None

        pending: List[str] = []
        has_default = False
        for line in self.source.split("\n")[2:]:
            stripped = line.strip()
            if stripped.startswith("case "):
                pending.append(stripped[len("case ") : -1])
            elif stripped == "default:":
                has_default = True
            elif stripped.startswith(("return ", "throw ")):
                self.arms.append((pending, stripped))
                if has_default:
                    self.default = stripped
                pending = []
                has_default = False

    def _resolve(self, expression: str) -> Union[int, str]:
        if expression.startswith('"') or re.match(r"^-?\d+$", expression):
            return _literal(expression)
        member = expression.rsplit(".", 1)[-1]
        return self.members[member]

    @staticmethod
    def _outcome(statement: str) -> str:
        if statement.startswith("throw "):
            raise UnrecognizedValueThrown(statement)
        return statement[len("return ") : -1]

    def __call__(self, argument: Union[int, str]) -> str:
        """Call with a Python int/str (or a member reference like 'Color.RED')."""
        if isinstance(argument, str) and "." in argument:
            argument = self._resolve(argument)
        for labels, statement in self.arms:
            for label in labels:
                if self._resolve(label) == argument and type(self._resolve(label)) is type(argument):
                    return self._outcome(statement)
        if self.default is None:
            raise AssertionError("switch has no matching arm and no default")
        return self._outcome(self.default)
