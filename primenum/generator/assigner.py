"""Value assignment for parsed enum definitions."""

import logging

from .errors import DuplicateNameError, DuplicateValueError, MultipleDefaultsError, OutOfRangeError
from .types import EnumSpec, ResolvedEnum, ResolvedVariant

logger = logging.getLogger(__name__)


def assign_values(spec: EnumSpec) -> list[ResolvedVariant]:
    """Resolve a numeric value for every variant, in declaration order.

    Implicit variants take the running counter, which starts at zero and
    continues from the last explicit value + 1. Explicit values never affect
    variants declared before them.

    Raises:
        DuplicateNameError: two variants share a name.
        OutOfRangeError: a value does not fit the backing type.
        DuplicateValueError: two variants resolve to the same value.
        MultipleDefaultsError: more than one variant is marked default.
    """
    backing = spec.backing_type
    names: set[str] = set()
    owners: dict[int, str] = {}
    defaults: list[str] = []
    resolved: list[ResolvedVariant] = []

    next_value = 0
    for variant in spec.variants:
        if variant.name in names:
            raise DuplicateNameError(variant.name)
        names.add(variant.name)

        value = variant.explicit_value if variant.explicit_value is not None else next_value
        next_value = value + 1

        if not backing.contains(value):
            raise OutOfRangeError(variant.name, value, backing.min_value, backing.max_value)
        if value in owners:
            raise DuplicateValueError(owners[value], variant.name, value)
        owners[value] = variant.name

        if variant.is_default:
            defaults.append(variant.name)

        resolved.append(
            ResolvedVariant(
                name=variant.name,
                value=value,
                doc=variant.doc,
                is_default=variant.is_default,
            )
        )

    if len(defaults) > 1:
        raise MultipleDefaultsError(defaults)

    return resolved


def resolve(spec: EnumSpec) -> ResolvedEnum:
    """Resolve a parsed definition into the form consumed by the generators."""
    variants = assign_values(spec)
    logger.debug(
        "Resolved %s: %s",
        spec.name,
        ", ".join(f"{variant.name}={variant.value}" for variant in variants),
    )
    return ResolvedEnum(
        name=spec.name,
        backing_type=spec.backing_type,
        doc=spec.doc,
        variants=variants,
    )
