"""
Solver flags: typed, validated settings shared by the CLI and the web API.

Key features:
- Inline value definitions for better readability
- Support for boolean, enum and integer flags
- Type and range validation on every assignment
"""

from .categories import FlagCategory
from .definitions import BooleanFlag, EnumFlag, IntegerFlag, FlagDefinition, FlagOption
from .registry import FlagRegistry
from .flags import Flags

__all__ = [
    'FlagCategory',
    'BooleanFlag',
    'EnumFlag',
    'IntegerFlag',
    'FlagDefinition',
    'FlagOption',
    'FlagRegistry',
    'Flags',
]
