"""
Chat Sentiment Exceptions - Custom error hierarchy.

The engine never fails on a string message. These exceptions cover
contract violations at the boundary and bad lexicon/config input only.
"""

from datetime import datetime
from typing import Any, Optional


class ChatSentimentError(Exception):
    """Base exception for all chat sentiment errors."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.utcnow()
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class InvalidInputError(ChatSentimentError, TypeError):
    """Non-string input passed to the engine."""

    def __init__(
        self,
        message: str,
        received_type: Optional[str] = None,
        index: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.received_type = received_type
        self.index = index  # position inside a batch, if any

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "received_type": self.received_type,
            "index": self.index,
        })
        return data


class LexiconError(ChatSentimentError):
    """Lexicon file could not be read or has the wrong shape."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        return data


class ConfigurationError(ChatSentimentError, ValueError):
    """Scorer policy values are inconsistent."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.field_name = field_name
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "field_name": self.field_name,
            "value": str(self.value)[:100] if self.value is not None else None,
        })
        return data
