# ===== SECTION: IMPORTS =====
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .errors import DescriptorError
from .proto_models import EnumDescriptor, EnumValueDescriptor


# ===== SECTION: FUNCTIONS =====


def _first_key(data: Dict[str, Any], *keys: str, default=None):
    """Returns the first present key, accepting both camelCase and snake_case spellings."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _load_comment(raw: Dict[str, Any], enum_name: str, value_name: str = None):
    comment = raw.get("comment")
    if comment is not None and not isinstance(comment, str):
        raise DescriptorError("Comment must be a string", enum_name=enum_name, value_name=value_name)
    return comment


def _load_value(raw: Any, enum_name: str) -> EnumValueDescriptor:
    if not isinstance(raw, dict):
        raise DescriptorError("Enum value must be an object", enum_name=enum_name)

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise DescriptorError("Enum value is missing a name", enum_name=enum_name)

    number = raw.get("number")
    # bool is an int subclass; reject it explicitly
    if not isinstance(number, int) or isinstance(number, bool):
        raise DescriptorError("Enum value needs an integer 'number'", enum_name=enum_name, value_name=name)

    return EnumValueDescriptor(
        name=name,
        number=number,
        deprecated=bool(raw.get("deprecated", False)),
        comment=_load_comment(raw, enum_name, name),
    )


def _load_enum(raw: Any) -> EnumDescriptor:
    if not isinstance(raw, dict):
        raise DescriptorError("Enum descriptor must be an object")

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise DescriptorError("Enum descriptor is missing a name")
    full_name = _first_key(raw, "fullName", "full_name", default=name)
    if not isinstance(full_name, str) or not full_name:
        raise DescriptorError("Enum descriptor needs a non-empty string 'fullName'", enum_name=name)

    raw_values = raw.get("values", raw.get("value"))
    if not isinstance(raw_values, list):
        raise DescriptorError("Enum descriptor needs a 'values' list", enum_name=full_name)

    values: List[EnumValueDescriptor] = []
    seen_names = set()
    for raw_value in raw_values:
        value = _load_value(raw_value, full_name)
        if value.name in seen_names:
            raise DescriptorError("Duplicate enum value name", enum_name=full_name, value_name=value.name)
        seen_names.add(value.name)
        values.append(value)

    logging.debug(f"Loaded enum '{full_name}' with values: {[v.name for v in values]}")
    return EnumDescriptor(
        name=name,
        full_name=full_name,
        values=values,
        deprecated=bool(raw.get("deprecated", False)),
        comment=_load_comment(raw, full_name),
    )


def load_descriptors(content: Union[str, Dict[str, Any]]) -> List[EnumDescriptor]:
    """
    Loads pre-resolved enum descriptors from their JSON form.

    Args:
        content (Union[str, Dict[str, Any]]): JSON text, or the already decoded document,
            of the form {"enums": [{"name": ..., "fullName": ..., "values": [...]}]}

    Returns:
        List[EnumDescriptor]: The enums, in document order

    Raises:
        DescriptorError: If the document is not valid JSON or a descriptor is malformed
    """
    if isinstance(content, str):
        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise DescriptorError(f"Invalid descriptor JSON: {e}") from e
    else:
        document = content

    if not isinstance(document, dict) or not isinstance(document.get("enums"), list):
        raise DescriptorError("Descriptor document needs a top-level 'enums' list")

    return [_load_enum(raw) for raw in document["enums"]]


def load_descriptor_file(path: Union[str, Path]) -> List[EnumDescriptor]:
    """Reads and loads a descriptor JSON file."""
    path = Path(path)
    logging.debug(f"Loading descriptors from {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DescriptorError("Descriptor file is not valid UTF-8") from e
    return load_descriptors(content)
