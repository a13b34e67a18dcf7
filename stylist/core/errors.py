from __future__ import annotations

from typing import Optional


class StylistError(Exception):
    """Base error carrying a stable code and a user-facing message."""

    code = "stylist_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(StylistError):
    code = "invalid_input"


class ConfigurationError(StylistError):
    code = "configuration_error"


class TransportError(StylistError):
    """The model endpoint could not be reached or rejected the call."""

    code = "transport_error"


class ContextParseError(StylistError):
    code = "context_parse_error"

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw


class SuggestionParseError(StylistError):
    """Never leaves the suggestion generator; normalized to an empty list."""

    code = "suggestion_parse_error"

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw
