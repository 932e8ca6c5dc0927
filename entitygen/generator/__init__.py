"""entitygen code generator."""

from .builder import EntityBuilder as EntityBuilder
from .builder import EnumBuilder as EnumBuilder
from .builder import PropertyBuilder as PropertyBuilder
from .entities import render_entity as render_entity
from .entities import render_enum as render_enum
from .entities import render_module as render_module
from .properties import Resolution as Resolution
from .properties import Strategy as Strategy
from .properties import resolve as resolve
from .types import *
from .validation import GenerationError as GenerationError
from .validation import validate_entity as validate_entity
from .validation import validate_enum as validate_enum
