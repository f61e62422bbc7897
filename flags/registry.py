"""Central registry of all flag definitions."""

from typing import Dict, List

from .categories import FlagCategory
from .definitions import BooleanFlag, EnumFlag, IntegerFlag, FlagDefinition, FlagOption


class FlagRegistry:
    """Central registry of all flag definitions."""

    # Search Flags
    SOLVER = EnumFlag(
        'solver',
        'Solver',
        'Search engine used to color the graph.',
        FlagCategory.SEARCH,
        options=[
            FlagOption('mac_backtracking', 'MAC Backtracking',
                       'Backtracking with arc consistency, MRV and LCV ordering.'),
            FlagOption('cp_sat', 'OR-Tools CP-SAT',
                       'Reference solver built on the OR-Tools CP-SAT engine.'),
        ],
        default='mac_backtracking'
    )

    TIME_LIMIT_SECONDS = IntegerFlag(
        'time_limit_seconds',
        'Time limit (seconds)',
        'Stop the search after this many seconds. 0 means no limit.',
        FlagCategory.SEARCH,
        default=0,
        min_value=0,
        max_value=3600
    )

    # Output Flags
    VALIDATE_SOLUTION = BooleanFlag(
        'validate_solution',
        'Validate solution',
        'Check every edge of a returned coloring before reporting it.',
        FlagCategory.OUTPUT,
        default=True
    )

    # Diagnostics Flags
    LOG_SEARCH = BooleanFlag(
        'log_search',
        'Log search steps',
        'Log every assignment and backtrack at DEBUG level.',
        FlagCategory.DIAGNOSTICS
    )

    @classmethod
    def get_all_flags(cls) -> Dict[str, FlagDefinition]:
        """Get all flag definitions as a dictionary."""
        flags = {}
        for attr_name in dir(cls):
            attr = getattr(cls, attr_name)
            if isinstance(attr, FlagDefinition):
                flags[attr.key] = attr
        return flags

    @classmethod
    def get_flags_by_category(cls) -> Dict[FlagCategory, List[FlagDefinition]]:
        """Get flags organized by category."""
        by_category = {}
        for flag in cls.get_all_flags().values():
            if flag.category not in by_category:
                by_category[flag.category] = []
            by_category[flag.category].append(flag)
        return by_category
