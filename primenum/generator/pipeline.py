"""One-shot generation pipeline: parse, resolve values, render."""

import logging
from collections.abc import Callable
from typing import Any

from . import c, python, rust
from .assigner import resolve
from .errors import UnknownTargetError
from .parser import parse
from .types import ResolvedEnum

logger = logging.getLogger(__name__)

TARGETS: dict[str, Callable[..., str]] = {
    "python": python.render,
    "rust": rust.render,
    "c": c.render,
}


def targets() -> list[str]:
    """Return the names of the supported target languages."""
    return list(TARGETS)


def compile_enum(text: str, language: str = "python", **options: Any) -> str:
    """Generate source code for one enum definition.

    Any error aborts the whole definition; nothing is returned in that case.

    Args:
        text: The enum definition
        language: Target language, one of `targets()`
        **options: Keyword options of the target's render function
    """
    renderer = TARGETS.get(language)
    if renderer is None:
        raise UnknownTargetError(language)

    resolved: ResolvedEnum = resolve(parse(text))
    logger.debug("Rendering %s for %s", resolved.name, language)
    return renderer(resolved, **options)
