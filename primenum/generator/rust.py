"""Rust code generator for primitive enums."""

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

template = env.get_template("rust.rs.j2")

RUST_KEYWORDS = frozenset(
    [
        "abstract",
        "as",
        "async",
        "await",
        "become",
        "box",
        "break",
        "const",
        "continue",
        "crate",
        "do",
        "dyn",
        "else",
        "enum",
        "extern",
        "false",
        "final",
        "fn",
        "for",
        "gen",
        "if",
        "impl",
        "in",
        "let",
        "loop",
        "macro",
        "match",
        "mod",
        "move",
        "mut",
        "override",
        "priv",
        "pub",
        "ref",
        "return",
        "self",
        "Self",
        "static",
        "struct",
        "super",
        "trait",
        "true",
        "try",
        "type",
        "typeof",
        "unsafe",
        "unsized",
        "use",
        "virtual",
        "where",
        "while",
        "yield",
    ]
)


def _comment(text: str, prefix: str) -> str:
    return "\n".join(f"{prefix} {line}".rstrip() for line in text.splitlines())


def render(enum: ResolvedEnum, *, visibility: str = "pub") -> str:
    """Render a resolved enum to Rust source code.

    Emits a `#[repr]` enum with derived value semantics and an `impl`
    block with `from`, `from_name`, `list` and, when a variant is marked
    default, `default` plus an `impl Default`.

    Args:
        enum: The resolved enum definition
        visibility: Visibility of the generated type and functions,
                    empty for private
    """
    for name in [enum.name] + [variant.name for variant in enum.variants]:
        if name in RUST_KEYWORDS or name == "_":
            raise ReservedNameError(name, "rust")

    return template.render(
        enum=enum,
        default=enum.default,
        vis=f"{visibility} " if visibility else "",
        comment=_comment,
    )
