"""Flag categories for grouping solver settings."""

from enum import IntEnum


class FlagCategory(IntEnum):
    """Categories for grouping flags in help output."""
    SEARCH = 1
    OUTPUT = 2
    DIAGNOSTICS = 3

    @property
    def display_name(self) -> str:
        """Get user-friendly display name for the category."""
        names = {
            FlagCategory.SEARCH: "Search",
            FlagCategory.OUTPUT: "Output",
            FlagCategory.DIAGNOSTICS: "Diagnostics",
        }
        return names.get(self, "Unknown")
