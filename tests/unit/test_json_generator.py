"""Unit tests for the generated FromJSON / ToJSON / ToNumber functions."""

import textwrap

import pytest

from proto2ts.constants import GLOBAL_THIS_NAME
from proto2ts.generator.code_builder import CodeBuilder
from proto2ts.generator.context import EnumContext
from proto2ts.generator.enum_generator import generate_enum_declaration
from proto2ts.generator.json_generator import (
    generate_enum_from_json,
    generate_enum_to_json,
    generate_enum_to_number,
)
from proto2ts.options import GenerationOptions
from tests.test_utils import COLOR, GeneratedSwitch, UnrecognizedValueThrown, make_enum, parse_members


def _generate(enum, emitter, **overrides):
    builder = CodeBuilder()
    ctx = EnumContext.build(enum, GenerationOptions(**overrides))
    decision = generate_enum_declaration(ctx, builder)
    name = emitter(ctx, decision, builder)
    return builder.render(), name, builder


def test_from_json_with_synthesized_sentinel():
    code, name, builder = _generate(make_enum("Color", {"RED": 0, "GREEN": 1}), generate_enum_from_json)
    assert name == "colorFromJSON"
    assert code.endswith(textwrap.dedent("""\
        export function colorFromJSON(object: any): Color {
          switch (object) {
            case 0:
            case "RED":
              return Color.RED;
            case 1:
            case "GREEN":
              return Color.GREEN;
            case -1:
            case "UNRECOGNIZED":
            default:
              return Color.UNRECOGNIZED;
          }
        }"""))
    assert not builder.helpers


def test_from_json_with_existing_sentinel():
    code, name, _ = _generate(make_enum("Color", COLOR), generate_enum_from_json, unrecognized_enum_value=0)
    decode = GeneratedSwitch(code, name)
    assert decode(0) == "Color.RED"
    assert decode("RED") == "Color.RED"
    assert decode(42) == "Color.RED"
    assert decode("PURPLE") == "Color.RED"
    assert "UNRECOGNIZED" not in code


def test_from_json_throws_when_feature_disabled():
    code, name, builder = _generate(make_enum("Color", COLOR), generate_enum_from_json, unrecognized_enum=False)
    assert (
        'throw new tsProtoGlobalThis.Error("Unrecognized enum value " + object + " for enum Color");' in code
    )
    assert builder.helpers == {GLOBAL_THIS_NAME}
    decode = GeneratedSwitch(code, name)
    assert decode(2) == "Color.BLUE"
    with pytest.raises(UnrecognizedValueThrown):
        decode(7)


def test_from_json_accepts_both_forms_in_string_mode():
    code, name, _ = _generate(make_enum("Color", COLOR), generate_enum_from_json, string_enums=True)
    decode = GeneratedSwitch(code, name)
    assert decode(1) == "Color.GREEN"
    assert decode("GREEN") == "Color.GREEN"


def test_from_json_uses_wire_names_with_stripped_members():
    enum = make_enum("Status", {"STATUS_OK": 0})
    code, name, _ = _generate(enum, generate_enum_from_json, remove_enum_prefix=True)
    decode = GeneratedSwitch(code, name)
    assert decode("STATUS_OK") == "Status.OK"
    assert decode("OK") == "Status.UNRECOGNIZED"


def test_from_json_aliases_keep_their_own_members():
    enum = make_enum("Mode", [("A", 1), ("ALIAS", 1)])
    code, name, _ = _generate(enum, generate_enum_from_json)
    decode = GeneratedSwitch(code, name)
    assert decode("A") == "Mode.A"
    assert decode("ALIAS") == "Mode.ALIAS"


def test_to_json_string_mode():
    code, name, _ = _generate(make_enum("Color", {"RED": 0}), generate_enum_to_json)
    assert name == "colorToJSON"
    assert code.endswith(textwrap.dedent("""\
        export function colorToJSON(object: Color): string {
          switch (object) {
            case Color.RED:
              return "RED";
            case Color.UNRECOGNIZED:
            default:
              return "UNRECOGNIZED";
          }
        }"""))


def test_to_json_numeric_mode():
    code, name, _ = _generate(make_enum("Color", COLOR), generate_enum_to_json, use_numeric_enum_for_json=True)
    assert "export function colorToJSON(object: Color): number {" in code
    encode = GeneratedSwitch(code, name, parse_members(code, "Color"))
    assert encode("Color.GREEN") == "1"
    assert encode("Color.UNRECOGNIZED") == "-1"


def test_to_json_existing_sentinel_string_mode():
    enum = make_enum("Status", {"STATUS_UNKNOWN": 0, "STATUS_OK": 1})
    code, name, _ = _generate(
        enum, generate_enum_to_json, unrecognized_enum_value=0, remove_enum_prefix=True
    )
    assert code.rstrip().endswith('default:\n      return "STATUS_UNKNOWN";\n  }\n}')
    encode = GeneratedSwitch(code, name, parse_members(code, "Status"))
    assert encode(99) == '"STATUS_UNKNOWN"'


def test_to_json_existing_sentinel_numeric_mode():
    code, name, _ = _generate(
        make_enum("Color", COLOR), generate_enum_to_json, unrecognized_enum_value=0, use_numeric_enum_for_json=True
    )
    encode = GeneratedSwitch(code, name, parse_members(code, "Color"))
    assert encode(99) == "0"


def test_to_json_throws_when_feature_disabled():
    code, name, builder = _generate(make_enum("Color", COLOR), generate_enum_to_json, unrecognized_enum=False)
    assert builder.helpers == {GLOBAL_THIS_NAME}
    encode = GeneratedSwitch(code, name, parse_members(code, "Color"))
    assert encode("Color.BLUE") == '"BLUE"'
    with pytest.raises(UnrecognizedValueThrown):
        encode(17)


def test_to_json_aliases_do_not_crash():
    enum = make_enum("Mode", [("A", 1), ("ALIAS", 1)])
    code, name, _ = _generate(enum, generate_enum_to_json)
    encode = GeneratedSwitch(code, name, parse_members(code, "Mode"))
    # Both members share code 1, so the first arm answers for either
    assert encode("Mode.A") == '"A"'
    assert encode("Mode.ALIAS") == '"A"'


def test_to_number_for_string_enum():
    code, name, _ = _generate(make_enum("Color", {"RED": 0, "GREEN": 1}), generate_enum_to_number, string_enums=True)
    assert name == "colorToNumber"
    assert code.endswith(textwrap.dedent("""\
        export function colorToNumber(object: Color): number {
          switch (object) {
            case Color.RED:
              return 0;
            case Color.GREEN:
              return 1;
            case Color.UNRECOGNIZED:
            default:
              return -1;
          }
        }"""))


def test_to_number_existing_sentinel():
    code, name, _ = _generate(
        make_enum("Color", COLOR), generate_enum_to_number, string_enums=True, unrecognized_enum_value=2
    )
    encode = GeneratedSwitch(code, name, parse_members(code, "Color"))
    assert encode("Color.GREEN") == "1"
    assert encode("PURPLE") == "2"
    assert "Color.UNRECOGNIZED" not in code


def test_to_number_has_no_failure_path():
    code, name, builder = _generate(
        make_enum("Color", COLOR), generate_enum_to_number, string_enums=True, unrecognized_enum=False
    )
    assert "throw" not in code
    assert not builder.helpers
    encode = GeneratedSwitch(code, name, parse_members(code, "Color"))
    assert encode("PURPLE") == "-1"


def test_scoped_references():
    enum = make_enum("Inner", {"A": 0}, full_name="Outer_Inner")
    code, name, _ = _generate(enum, generate_enum_to_json, nested_enums_as_namespaces=True)
    assert name == "outer_InnerToJSON"
    assert "export function outer_InnerToJSON(object: Outer.Inner): string {" in code
    assert "case Outer.Inner.A:" in code
    assert "case Outer.Inner.UNRECOGNIZED:" in code
