"""C code generator for primitive enums."""

from jinja2 import Environment, PackageLoader

from .errors import ReservedNameError
from .types import BackingType, ResolvedEnum

env = Environment(
    loader=PackageLoader("primenum.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("c.h.j2")

PRIMITIVE_TYPE_MAP = {
    "u8": "uint8_t",
    "u16": "uint16_t",
    "u32": "uint32_t",
    "u64": "uint64_t",
    "i8": "int8_t",
    "i16": "int16_t",
    "i32": "int32_t",
    "i64": "int64_t",
}

# stdint.h constant macros, which give literals the right width and signedness
LITERAL_MACRO_MAP = {
    "u8": "UINT8_C",
    "u16": "UINT16_C",
    "u32": "UINT32_C",
    "u64": "UINT64_C",
    "i8": "INT8_C",
    "i16": "INT16_C",
    "i32": "INT32_C",
    "i64": "INT64_C",
}


C_KEYWORDS = frozenset(
    [
        "auto",
        "bool",
        "break",
        "case",
        "char",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extern",
        "float",
        "for",
        "goto",
        "if",
        "inline",
        "int",
        "long",
        "register",
        "restrict",
        "return",
        "short",
        "signed",
        "sizeof",
        "static",
        "struct",
        "switch",
        "typedef",
        "union",
        "unsigned",
        "void",
        "volatile",
        "while",
    ]
)


# Suffixes of the generated functions; a variant macro with the same name
# would expand inside their declarations
FUNCTION_SUFFIXES = frozenset(["from", "from_name", "name", "list", "default"])


def _check_names(enum: ResolvedEnum, include_guard: str) -> None:
    if enum.name in C_KEYWORDS:
        raise ReservedNameError(enum.name, "c")
    for variant in enum.variants:
        if variant.name in FUNCTION_SUFFIXES or f"{enum.name}_{variant.name}" == include_guard:
            raise ReservedNameError(variant.name, "c")


def _literal(value: int, backing_type: BackingType) -> str:
    """Format a value as a C integer constant of the backing type."""
    macro = LITERAL_MACRO_MAP[backing_type.name]
    # No C literal spells the signed minimum
    if backing_type.signed and value == backing_type.min_value:
        return f"({macro}({value + 1}) - 1)"
    return f"{macro}({value})"


def _comment(text: str) -> str:
    lines = text.replace("*/", "* /").splitlines()
    if len(lines) == 1:
        return f"/** {lines[0]} */"
    body = "\n".join(f" * {line}".rstrip() for line in lines)
    return f"/**\n{body}\n */"


def render(enum: ResolvedEnum, *, include_guard: str | None = None) -> str:
    """Render a resolved enum to a C header.

    Args:
        enum: The resolved enum definition
        include_guard: Header guard macro, defaults to NAME_H
    """
    include_guard = include_guard or f"{enum.name.upper()}_H"
    _check_names(enum, include_guard)

    return template.render(
        enum=enum,
        default=enum.default,
        c_type=PRIMITIVE_TYPE_MAP[enum.backing_type.name],
        include_guard=include_guard,
        literal=lambda value: _literal(value, enum.backing_type),
        comment=_comment,
    )
