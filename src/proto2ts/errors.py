# ===== SECTION: ERROR CLASSES =====
# Custom exception classes for proto2ts

class Proto2TSError(Exception):
    """Base class for all proto2ts errors."""
    pass


class DescriptorError(Proto2TSError):
    """Error in an enum descriptor handed to the generator."""
    def __init__(self, message: str, enum_name: str = None, value_name: str = None):
        self.enum_name = enum_name
        self.value_name = value_name

        details = ""
        if enum_name:
            details += f" in enum '{enum_name}'"
        if value_name:
            details += f" for value '{value_name}'"

        super().__init__(f"{message}{details}")


class OptionsError(Proto2TSError):
    """Error parsing or validating generation options."""
    def __init__(self, message: str, option: str = None, value: str = None):
        self.option = option
        self.value = value

        details = ""
        if option:
            details += f" for option '{option}'"
        if value is not None:
            # Truncate very long values
            if len(value) > 60:
                value = value[:57] + "..."
            details += f": {value!r}"

        super().__init__(f"{message}{details}")


class CodeGenerationError(Proto2TSError):
    """Error during TypeScript code generation."""
    def __init__(self, message: str, enum_name: str = None):
        self.enum_name = enum_name

        details = ""
        if enum_name:
            details += f" for enum '{enum_name}'"

        super().__init__(f"{message}{details}")
