"""Exceptions raised by Verity."""


class VerityError(Exception):
    """Base class for all Verity errors."""


class ConfigurationError(VerityError):
    """Required configuration is missing or invalid. Fatal at startup."""


class AnalysisFailure(VerityError):
    """The AI service could not produce an analysis."""


class ChatFailure(VerityError):
    """A follow-up chat turn failed in transport."""
