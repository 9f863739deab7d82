# ===== SECTION: CONSTANTS =====
# Constants used throughout the proto2ts codebase

# Separator used when nested enums are flattened (Outer.Inner -> Outer_Inner)
SCOPE_SEPARATOR = "_"

# Defaults for the unrecognized-value sentinel
DEFAULT_UNRECOGNIZED_ENUM_NAME = "UNRECOGNIZED"
DEFAULT_UNRECOGNIZED_ENUM_VALUE = -1

# Suffixes of the generated conversion functions
FROM_JSON_SUFFIX = "FromJSON"
TO_JSON_SUFFIX = "ToJSON"
TO_NUMBER_SUFFIX = "ToNumber"

# Indentation unit of the generated TypeScript
INDENT = "  "

# Name of the helper used to reach the global Error constructor. Going through the
# global object avoids clashes with protobuf types that are themselves named `Error`.
GLOBAL_THIS_NAME = "tsProtoGlobalThis"

# Helper code emitted once per file when a generated function needs it
HELPER_CODE = {
    GLOBAL_THIS_NAME: """\
declare const self: any | undefined;
declare const window: any | undefined;
declare const global: any | undefined;
const tsProtoGlobalThis: any = (() => {
  if (typeof globalThis !== "undefined") {
    return globalThis;
  }
  if (typeof self !== "undefined") {
    return self;
  }
  if (typeof window !== "undefined") {
    return window;
  }
  if (typeof global !== "undefined") {
    return global;
  }
  throw "Unable to locate global object";
})();""",
}

# Runtime failure raised by generated conversion functions
UNRECOGNIZED_ENUM_ERROR_TEMPLATE = (
    'throw new {global_this}.Error("Unrecognized enum value " + object + " for enum {enum_name}");'
)

# Header of every generated file
FILE_HEADER_TEMPLATE = """\
/* eslint-disable */
// Auto-generated by proto2ts from {source_name}
//
// Do not edit by hand: changes will be lost when the file is regenerated."""
