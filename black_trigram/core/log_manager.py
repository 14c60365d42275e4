"""
Log management for combat and training sessions.

This module provides categorized, filterable log storage. A LogManager is
created per match or training session and handed to the resolver and scorer;
there is no process-wide logger. Messages are stamped with the action
timestamp supplied by the caller rather than a wall clock.
"""
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Session setup, content loading
    BATTLE = auto()     # Resolved combat actions
    TRAINING = auto()   # Training attempts and feedback
    CONTENT = auto()    # Catalog / registry validation
    DEBUG = auto()      # Resolver phase transitions
    WARNING = auto()    # Rejected actions
    ERROR = auto()      # Errors


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: float = 0.0

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp:>10.0f}]")

        if include_category:
            category_tags = {
                LogCategory.SYSTEM: "SYS",
                LogCategory.BATTLE: "BTL",
                LogCategory.TRAINING: "TRN",
                LogCategory.CONTENT: "CNT",
                LogCategory.DEBUG: "DBG",
                LogCategory.WARNING: "WRN",
                LogCategory.ERROR: "ERR",
            }
            tag = category_tags.get(self.category, "???")
            parts.append(f"[{tag}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class LogManager:
    """Stores session log messages with categorization and filtering."""

    def __init__(self, max_messages: int = 1000, default_level: LogLevel = LogLevel.INFO):
        """Initialize the log manager.

        Args:
            max_messages: Maximum number of messages to store in the buffer
            default_level: Default log level for filtering
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)

        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.CONTENT: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
            # SYSTEM, BATTLE, TRAINING default to INFO
        }

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM, timestamp: float = 0.0) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
            timestamp: Caller-supplied action timestamp
        """
        # Always store; filtering happens on read
        self.messages.append(LogMessage(text=text, category=category, timestamp=timestamp))

    def system(self, text: str, timestamp: float = 0.0) -> None:
        """Log a system message."""
        self.log(text, LogCategory.SYSTEM, timestamp)

    def battle(self, text: str, timestamp: float = 0.0) -> None:
        """Log a battle message."""
        self.log(text, LogCategory.BATTLE, timestamp)

    def training(self, text: str, timestamp: float = 0.0) -> None:
        """Log a training message."""
        self.log(text, LogCategory.TRAINING, timestamp)

    def content(self, text: str, timestamp: float = 0.0) -> None:
        """Log a content-validation message."""
        self.log(text, LogCategory.CONTENT, timestamp)

    def debug(self, text: str, timestamp: float = 0.0) -> None:
        """Log a debug message."""
        self.log(text, LogCategory.DEBUG, timestamp)

    def warning(self, text: str, timestamp: float = 0.0) -> None:
        """Log a warning message."""
        self.log(text, LogCategory.WARNING, timestamp)

    def error(self, text: str, timestamp: float = 0.0) -> None:
        """Log an error message."""
        self.log(text, LogCategory.ERROR, timestamp)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = []
            for msg in self.messages:
                if msg.category not in self.enabled_categories:
                    continue

                message_level = self.category_levels.get(msg.category, LogLevel.INFO)
                if message_level.value < self.log_level.value:
                    continue

                filtered.append(msg)

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def formatted(self, count: Optional[int] = None) -> list[str]:
        """Get recent visible messages formatted for display."""
        return [msg.format() for msg in self.get_messages(count)]

    def clear(self) -> None:
        """Clear all messages from the log."""
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        """Enable a log category."""
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        """Disable a log category."""
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently visible."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)
