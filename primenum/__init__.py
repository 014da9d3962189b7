"""primenum - C-style integer enum generator."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("primenum")
except PackageNotFoundError:
    __version__ = "(local)"
