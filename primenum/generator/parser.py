"""Enum definition parser using Lark."""

import logging
import os
import re
from dataclasses import dataclass
from typing import Any, TypeVar

from lark import Lark, Token
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
    VisitError,
)
from lark.visitors import Transformer

from .errors import EnumSyntaxError, GenerationError, MultipleDefaultsError
from .types import BackingType, EnumSpec, VariantSpec, backing_types, lookup_backing_type

logger = logging.getLogger(__name__)

_g_parser: Lark | None = None

DEFAULT_MARKER = "default"


@dataclass
class _Doc:
    value: str


@dataclass
class _Name:
    value: str
    line: int
    column: int


@dataclass
class _Value:
    value: int


@dataclass
class _Attribute:
    name: str
    line: int
    column: int


TFilter = TypeVar("TFilter", bound=object)


def _filter(args: list[Any], class_type: type[TFilter]) -> list[TFilter]:
    return [v for v in args if isinstance(v, class_type)]


def _find_one(args: list[Any], class_type: type[TFilter]) -> TFilter | None:
    filtered = _filter(args, class_type)
    if len(filtered) == 0:
        return None
    if len(filtered) > 1:
        raise RuntimeError(f"Found more than one {class_type}")
    return filtered[0]


def _join_docs(docs: list[_Doc]) -> str | None:
    if not docs:
        return None
    return "\n".join(doc.value for doc in docs)


INTEGER_SUFFIX = re.compile(r"_?([iu](?:8|16|32|64|128|size))$")


def split_suffix(text: str) -> tuple[str, str | None]:
    """Split a Rust-style type suffix (`5u16`, `0xFF_u8`) off a literal."""
    match = INTEGER_SUFFIX.search(text)
    if match is None or match.start() == 0:
        return text, None
    return text[: match.start()], match.group(1)


def parse_integer(text: str) -> int:
    """Parse an integer literal (decimal, 0x, 0o or 0b, with _ separators).

    Decimal literals may have leading zeros, so `007` is 7.
    """
    digits = text.lstrip("+-")
    try:
        if digits[:1].isdigit() and digits.replace("_", "").isdigit():
            return int(text, 10)
        return int(text, 0)
    except ValueError:
        raise EnumSyntaxError(f"Invalid integer literal: {text}") from None


class TreeTransformer(Transformer):
    """Transform parse tree into an enum specification.

    Children are transformed left to right, so the backing type is known
    before any variant value.
    """

    _backing: BackingType | None = None

    def doc(self, args: list[Any]) -> _Doc:
        text = str(args[0])[3:]
        if text.startswith(" "):
            text = text[1:]
        return _Doc(value=text.rstrip())

    def attribute(self, args: list[Token]) -> _Attribute:
        return _Attribute(name=str(args[0]), line=args[0].line, column=args[0].column)

    def enum_name(self, args: list[Token]) -> _Name:
        return _Name(value=str(args[0]), line=args[0].line, column=args[0].column)

    def variant_name(self, args: list[Token]) -> _Name:
        return _Name(value=str(args[0]), line=args[0].line, column=args[0].column)

    def backing(self, args: list[Token]) -> BackingType:
        token = args[0]
        backing_type = lookup_backing_type(str(token))
        if backing_type is None:
            raise EnumSyntaxError(
                f"Unknown backing type {token}, expected one of: {', '.join(backing_types())}",
                token.line,
                token.column,
            )
        self._backing = backing_type
        return backing_type

    def explicit_value(self, args: list[Token]) -> _Value:
        token = args[0]
        literal, suffix = split_suffix(str(token))
        if suffix is not None and self._backing is not None and suffix != self._backing.name:
            raise EnumSyntaxError(
                f"Literal {token} has suffix {suffix}, but the backing type is {self._backing.name}",
                token.line,
                token.column,
            )
        try:
            return _Value(value=parse_integer(literal))
        except EnumSyntaxError as err:
            raise EnumSyntaxError(str(err), token.line, token.column) from None

    def variant(self, args: list[Any]) -> VariantSpec:
        name = _find_one(args, _Name)
        assert name is not None
        defaults = 0
        for attribute in _filter(args, _Attribute):
            if attribute.name != DEFAULT_MARKER:
                raise EnumSyntaxError(
                    f"Unsupported attribute #[{attribute.name}] on variant {name.value}",
                    attribute.line,
                    attribute.column,
                )
            defaults += 1
        if defaults > 1:
            raise EnumSyntaxError(
                f"Variant {name.value} is marked as default more than once", name.line, name.column
            )

        value = _find_one(args, _Value)
        return VariantSpec(
            name=name.value,
            explicit_value=value.value if value else None,
            doc=_join_docs(_filter(args, _Doc)),
            is_default=defaults == 1,
        )

    def start(self, args: list[Any]) -> EnumSpec:
        name = _find_one(args, _Name)
        assert name is not None
        for attribute in _filter(args, _Attribute):
            if attribute.name == DEFAULT_MARKER:
                message = f"Default marker must be attached to a variant, not to enum {name.value}"
            else:
                message = f"Unsupported attribute #[{attribute.name}] on enum {name.value}"
            raise EnumSyntaxError(message, attribute.line, attribute.column)

        variants = _filter(args, VariantSpec)
        if not variants:
            raise EnumSyntaxError(f"Enum {name.value} declares no variants", name.line, name.column)

        backing_type = _find_one(args, BackingType)
        assert backing_type is not None
        return EnumSpec(
            name=name.value,
            backing_type=backing_type,
            doc=_join_docs(_filter(args, _Doc)),
            variants=variants,
        )


def _describe(err: UnexpectedInput) -> str:
    if isinstance(err, UnexpectedCharacters):
        return f"Unexpected character {err.char!r}"
    if isinstance(err, UnexpectedEOF):
        return "Unexpected end of input"
    if isinstance(err, UnexpectedToken):
        if err.token.type == "$END":
            return "Unexpected end of input"
        return f"Unexpected token {str(err.token)!r}"
    return "Malformed enum definition"


def _position(err: UnexpectedInput) -> tuple[int | None, int | None]:
    # Lark uses -1 or "?" when the position is unknown
    line = getattr(err, "line", None)
    column = getattr(err, "column", None)
    if not isinstance(line, int) or line < 1:
        return None, None
    return line, column if isinstance(column, int) and column > 0 else None


def validate(spec: EnumSpec) -> None:
    """Validate constraints that need the whole definition."""
    defaults = [variant.name for variant in spec.variants if variant.is_default]
    if len(defaults) > 1:
        raise MultipleDefaultsError(defaults)

    if not spec.backing_type.signed:
        for variant in spec.variants:
            if variant.explicit_value is not None and variant.explicit_value < 0:
                raise EnumSyntaxError(
                    f"Variant {variant.name} has negative value {variant.explicit_value}, "
                    f"but {spec.backing_type.name} is unsigned"
                )


def _get_parser() -> Lark:
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/enumdef.lark", encoding="utf-8") as f:
            grammar = f.read()
        _g_parser = Lark(grammar, parser="lalr")
    return _g_parser


def parse(text: str) -> EnumSpec:
    """Parse a single enum definition."""
    try:
        tree = _get_parser().parse(text)
        spec = TreeTransformer().transform(tree)
    except UnexpectedInput as err:
        raise EnumSyntaxError(_describe(err), *_position(err)) from err
    except VisitError as err:
        if isinstance(err.orig_exc, GenerationError):
            raise err.orig_exc from None
        raise

    validate(spec)
    logger.debug(
        "Parsed enum %s (%s) with %d variants",
        spec.name,
        spec.backing_type.name,
        len(spec.variants),
    )
    return spec
