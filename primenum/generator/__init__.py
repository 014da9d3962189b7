"""Primitive enum code generator."""

from .assigner import assign_values as assign_values
from .assigner import resolve as resolve
from .errors import DuplicateNameError as DuplicateNameError
from .errors import DuplicateValueError as DuplicateValueError
from .errors import EnumSyntaxError as EnumSyntaxError
from .errors import GenerationError as GenerationError
from .errors import MultipleDefaultsError as MultipleDefaultsError
from .errors import OutOfRangeError as OutOfRangeError
from .errors import ReservedNameError as ReservedNameError
from .errors import UnknownTargetError as UnknownTargetError
from .parser import parse as parse
from .pipeline import TARGETS as TARGETS
from .pipeline import compile_enum as compile_enum
from .pipeline import targets as targets
from .types import *
