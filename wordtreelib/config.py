"""Configuration system for WordTreeLib.

This module defines how callers describe a tracking run: where the index
repository lives, how input files are read, which report to produce and
how logging is set up.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


DEFAULT_REPOSITORY = "repository.ser"


class TraversalOrder(Enum):
    """Order in which a tree iterator visits nodes."""
    IN_ORDER = "inorder"        # Left, node, right (sorted)
    PRE_ORDER = "preorder"      # Node before children
    POST_ORDER = "postorder"    # Children before node

    @classmethod
    def parse(cls, order: Union["TraversalOrder", str]) -> "TraversalOrder":
        """Accept an enum member or its name in a few common spellings.

        Raises:
            ValueError: If the order is not recognized
        """
        if isinstance(order, cls):
            return order

        normalized = str(order).strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(
            f"Unknown traversal order: {order!r}. "
            f"Valid orders: {', '.join(m.value for m in cls)}"
        )


class ReportFormat(Enum):
    """Shape of the report rendered from the index.

    Values are the command-line flags that select them.
    """
    FILES = "pf"                # word -> files
    FILES_WITH_LINES = "pl"     # word -> files with line numbers
    FULL_DETAILS = "po"         # word -> files, lines, frequencies

    @property
    def flag(self) -> str:
        return f"-{self.value}"


# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def parse_level(level: Optional[str]) -> int:
    """Convert a level name to its numeric constant (INFO if unknown)."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


@dataclass(frozen=True)
class LoggingConfig:
    """Settings for the package logger.

    Attributes:
        level: Minimum severity to emit
        console: Write records to stderr
        log_file: Optional path for a rotating log file
        max_bytes: Size of a log file before rotation
        backup_count: Rotated files to keep
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if self.level and str(self.level).strip().upper() not in _LEVEL_MAP:
            errors.append(f"unknown log level: {self.level}")
        if self.max_bytes < 0:
            errors.append("max_bytes cannot be negative")
        if self.backup_count < 0:
            errors.append("backup_count cannot be negative")
        return errors


@dataclass
class TrackerConfig:
    """Complete configuration for a word tracking run.

    This is the primary way callers configure a WordTracker.
    """

    # Persistence
    repository_path: str = DEFAULT_REPOSITORY
    persist: bool = True                    # Save after each processed file

    # Input
    encoding: str = "utf-8"
    encoding_errors: str = "replace"        # Passed to open(errors=...)

    # Tokenizer cache (distinct raw lines remembered)
    tokenizer_cache_size: int = 4096

    # Output
    report_format: ReportFormat = ReportFormat.FILES_WITH_LINES

    log_config: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def in_memory(cls) -> "TrackerConfig":
        """Create config that never touches the repository file.

        Returns:
            TrackerConfig with persistence disabled
        """
        return cls(persist=False)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "TrackerConfig":
        """Create config from WORDTRACKER_* environment variables.

        Recognized variables:
            WORDTRACKER_REPOSITORY: repository file path
            WORDTRACKER_ENCODING: input file encoding
            WORDTRACKER_LOG_LEVEL: package log level

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            TrackerConfig with defaults for anything not set
        """
        env = os.environ if environ is None else environ
        return cls(
            repository_path=env.get("WORDTRACKER_REPOSITORY", DEFAULT_REPOSITORY),
            encoding=env.get("WORDTRACKER_ENCODING", "utf-8"),
            log_config=LoggingConfig(level=env.get("WORDTRACKER_LOG_LEVEL", "WARNING")),
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.persist and not self.repository_path:
            errors.append("repository_path is required when persist is enabled")

        if not self.encoding:
            errors.append("encoding cannot be empty")

        if self.tokenizer_cache_size <= 0:
            errors.append("tokenizer_cache_size must be positive")

        errors.extend(self.log_config.validate())
        return errors
