"""Python code generator for primitive enums."""

import keyword

from jinja2 import Environment, PackageLoader

from .errors import ReservedNameError
from .types import ResolvedEnum

env = Environment(
    loader=PackageLoader("primenum.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("python.py.j2")

# Methods emitted on the generated class, plus Enum and int attributes a
# member would shadow
RESERVED_NAMES = frozenset(
    {"from_value", "from_name", "list", "default", "name", "value"} | set(dir(int))
)


def _check_names(enum: ResolvedEnum) -> None:
    if keyword.iskeyword(enum.name):
        raise ReservedNameError(enum.name, "python")
    for variant in enum.variants:
        name = variant.name
        if keyword.iskeyword(name) or name.startswith("_") or name in RESERVED_NAMES:
            raise ReservedNameError(name, "python")


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _docstring(text: str, indent: str = "") -> str:
    """Format text as a docstring at the given indentation."""
    lines = _escape(text).splitlines() or [""]
    if len(lines) == 1:
        return f'{indent}"""{lines[0]}"""'
    rest = "\n".join(f"{indent}{line}".rstrip() for line in lines[1:])
    return f'{indent}"""{lines[0]}\n{rest}\n{indent}"""'


def _comment(text: str, prefix: str) -> str:
    """Format text as one comment line per line of text."""
    return "\n".join(f"{prefix} {line}".rstrip() for line in text.splitlines())


def render(enum: ResolvedEnum, *, header: str = "Generated enum definitions.") -> str:
    """Render a resolved enum to a Python module.

    Args:
        enum: The resolved enum definition
        header: Text of the generated module docstring
    """
    _check_names(enum)
    return template.render(
        enum=enum,
        default=enum.default,
        header=_escape(header),
        docstring=_docstring,
        comment=_comment,
    )
