"""Type definitions for enum parsing and code generation."""

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin


@dataclass(frozen=True)
class BackingType(DataClassJsonMixin):
    """Represents the integer representation behind an enum."""

    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Check if a value fits in this representation."""
        return self.min_value <= value <= self.max_value


@dataclass
class VariantSpec(DataClassJsonMixin):
    """Represents a single variant as written in the definition."""

    name: str
    explicit_value: int | None
    doc: str | None
    is_default: bool


@dataclass
class EnumSpec(DataClassJsonMixin):
    """Represents a parsed enum definition.

    Variant order is significant: it drives implicit numbering and the
    order of the generated listing.
    """

    name: str
    backing_type: BackingType
    doc: str | None
    variants: list[VariantSpec]


@dataclass(frozen=True)
class ResolvedVariant(DataClassJsonMixin):
    """Represents a variant bound to its final numeric value."""

    name: str
    value: int
    doc: str | None
    is_default: bool


@dataclass
class ResolvedEnum(DataClassJsonMixin):
    """Represents a fully resolved enum, ready for code generation."""

    name: str
    backing_type: BackingType
    doc: str | None
    variants: list[ResolvedVariant]

    @property
    def default(self) -> ResolvedVariant | None:
        for variant in self.variants:
            if variant.is_default:
                return variant
        return None


BACKING_TYPES: dict[str, BackingType] = {
    name: BackingType(name=name, bits=bits, signed=signed)
    for name, bits, signed in [
        ("u8", 8, False),
        ("u16", 16, False),
        ("u32", 32, False),
        ("u64", 64, False),
        ("i8", 8, True),
        ("i16", 16, True),
        ("i32", 32, True),
        ("i64", 64, True),
    ]
}

# Long-form spellings accepted in definitions
BACKING_TYPE_ALIASES = {
    "uint8": "u8",
    "uint16": "u16",
    "uint32": "u32",
    "uint64": "u64",
    "int8": "i8",
    "int16": "i16",
    "int32": "i32",
    "int64": "i64",
}


def backing_types() -> list[str]:
    """Return a list of canonical backing type names."""
    return list(BACKING_TYPES)


def lookup_backing_type(name: str) -> BackingType | None:
    """Find a backing type by canonical name or alias."""
    return BACKING_TYPES.get(BACKING_TYPE_ALIASES.get(name, name))
