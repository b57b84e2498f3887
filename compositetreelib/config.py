"""Configuration system for CompositeTreeLib.

This module defines how callers specify traversal order, how trees are
rendered to text, how an editing session treats user input, and how the
library logs.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .errors import ConfigError


class TraversalStrategy(Enum):
    """How to walk the tree.

    All strategies visit children in insertion order.
    """
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    BREADTH_FIRST = "bfs"           # Level by level


class _Validated:
    """Mixin for config dataclasses that report problems via validate()."""

    def validate(self) -> List[str]:
        return []

    def validate_or_raise(self) -> None:
        """Raise ConfigError listing every problem found by validate()."""
        errors = self.validate()
        if errors:
            raise ConfigError("; ".join(errors))


@dataclass
class RenderConfig(_Validated):
    """Configuration for textual tree rendering."""

    indent_unit: str = "  "      # Repeated once per indent level
    unit: str = "KB"             # Size unit label (caller convention only)
    show_icons: bool = False     # Prefix names with file/folder icons
    file_icon: str = "📄"
    folder_icon: str = "📁"

    @classmethod
    def with_icons(cls) -> 'RenderConfig':
        """Create config that renders the file/folder icons.

        Returns:
            RenderConfig with icons enabled
        """
        return cls(show_icons=True)

    def validate(self) -> List[str]:
        errors = []
        if not self.indent_unit:
            errors.append("indent_unit cannot be empty")
        if self.show_icons and not (self.file_icon and self.folder_icon):
            errors.append("icons cannot be empty when show_icons is set")
        return errors


@dataclass
class SessionConfig(_Validated):
    """Configuration for an editing session.

    The session is where raw user input is sanitized before it reaches
    the tree model.
    """

    default_size: int = 10       # Used when size text is missing, invalid or zero
    render: RenderConfig = field(default_factory=RenderConfig)

    def validate(self) -> List[str]:
        errors = []
        if self.default_size <= 0:
            errors.append("default_size must be positive")
        errors.extend(self.render.validate())
        return errors


_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig(_Validated):
    """Configuration for the library's log output."""

    level: str = "WARNING"
    fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

    @classmethod
    def from_env(cls, var: str = "COMPOSITETREE_LOG_LEVEL") -> 'LoggingConfig':
        """Create config with the level taken from an environment variable.

        Args:
            var: Environment variable to read

        Returns:
            LoggingConfig, using the default level when the variable is unset
        """
        level = os.environ.get(var)
        if not level:
            return cls()
        return cls(level=level.strip().upper())

    def validate(self) -> List[str]:
        errors = []
        if self.level.upper() not in _LEVEL_NAMES:
            errors.append(
                f"unknown log level {self.level!r}, choose from: {', '.join(_LEVEL_NAMES)}"
            )
        return errors
