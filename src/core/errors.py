from __future__ import annotations


class LetterFrequencyError(Exception):
    """Base error for the letter frequency scanner."""


class ConfigurationError(LetterFrequencyError):
    """Raised when repository settings are missing or malformed."""


class ValidationError(LetterFrequencyError):
    """Raised when user input is invalid."""


class TransportError(LetterFrequencyError):
    """Raised when a request to the repository API fails."""


class DecodeError(LetterFrequencyError):
    """Raised when a listing response cannot be decoded into entries."""
