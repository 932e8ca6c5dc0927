"""entitygen - Entity code generator for plugin data holders."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("entitygen")
except PackageNotFoundError:
    __version__ = "(local)"
