"""Errors raised while generating an enum.

Every error aborts generation of the whole definition.
"""


class GenerationError(RuntimeError):
    """Base class for all enum generation failures."""


class EnumSyntaxError(GenerationError):
    """Raised when the definition text is malformed."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        elif line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class MultipleDefaultsError(EnumSyntaxError):
    """Raised when more than one variant is marked as default."""

    def __init__(self, variants: list[str]):
        self.variants = variants
        super().__init__(f"Multiple variants marked as default: {', '.join(variants)}")


class DuplicateNameError(GenerationError):
    """Raised when two variants share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variant {name} is declared more than once")


class DuplicateValueError(GenerationError):
    """Raised when two variants resolve to the same value."""

    def __init__(self, first: str, second: str, value: int):
        self.first = first
        self.second = second
        self.value = value
        super().__init__(f"Variants {first} and {second} both resolve to {value}")


class OutOfRangeError(GenerationError):
    """Raised when a resolved value does not fit the backing type."""

    def __init__(self, variant: str, value: int, minimum: int, maximum: int):
        self.variant = variant
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Variant {variant} resolves to {value}, outside of range [{minimum}, {maximum}]"
        )


class ReservedNameError(GenerationError):
    """Raised when a variant name cannot be used in the target language."""

    def __init__(self, variant: str, target: str):
        self.variant = variant
        self.target = target
        super().__init__(f"Variant name {variant} is reserved in {target}")


class UnknownTargetError(GenerationError):
    """Raised when no generator exists for the requested language."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unknown language: {language}")
