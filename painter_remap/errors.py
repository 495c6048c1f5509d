"""Exceptions raised while remapping a painter template."""


class PainterRemapError(Exception):
    """Base exception for template remapping errors."""


class DateParseError(PainterRemapError, ValueError):
    """A date token matched a template line but is not a valid calendar day."""


class ConfigError(PainterRemapError, ValueError):
    """Invalid remapping configuration (alignment, week count, reference day)."""


class EmptyDrawingError(PainterRemapError, ValueError):
    """A grid mapping was requested without any anchor dates."""
