"""Flags class for managing solver settings with validation."""

from typing import Any, Dict, Optional
import logging

from .registry import FlagRegistry


class Flags:
    """Container for flag values with validation."""

    def __init__(self):
        # Initialize all flags with their default values
        self._definitions = FlagRegistry.get_all_flags()
        self._values: Dict[str, Any] = {
            key: defn.get_default()
            for key, defn in self._definitions.items()
        }

    def __getattr__(self, key: str) -> Any:
        """Access flags as attributes: flags.log_search"""
        if key.startswith('_'):
            # Allow normal attribute access for private attributes
            return object.__getattribute__(self, key)

        if key in self._values:
            return self._values[key]

        raise AttributeError(f"Flag '{key}' not found")

    def __setattr__(self, key: str, value: Any):
        """Set flags as attributes: flags.log_search = True"""
        if key.startswith('_'):
            # Allow normal attribute setting for private attributes
            object.__setattr__(self, key, value)
            return

        self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Get flag value with optional default."""
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set flag value with validation."""
        if key not in self._definitions:
            raise KeyError(f"Flag '{key}' not found.")

        definition = self._definitions[key]
        validated_value = definition.validate(value)
        self._values[key] = validated_value

    def to_dict(self) -> Dict[str, Any]:
        """Export flags to dictionary."""
        return dict(self._values)

    def from_dict(self, data: Dict[str, Any], strict: bool = False) -> None:
        """Import flags from dictionary.

        Args:
            data: Mapping of flag key -> value
            strict: Raise on the first bad entry instead of skipping it
        """
        for key, value in data.items():
            try:
                self.set(key, value)
            except (KeyError, TypeError, ValueError) as e:
                if strict:
                    raise
                logging.warning(f"Failed to set flag '{key}': {e}")

    @property
    def time_limit(self) -> Optional[float]:
        """Time limit in seconds, or None when unlimited."""
        seconds = self._values['time_limit_seconds']
        return float(seconds) if seconds else None
