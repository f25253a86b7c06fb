class LiturgicalCalendarError(Exception):
    """Base error."""


class InvalidAnchorError(LiturgicalCalendarError, ValueError):
    """Raised when a date anchor cannot produce a valid date for a year."""

    def __init__(self, message, anchor=None, year=None):
        super().__init__(message)
        self.anchor = anchor
        self.year = year


class UnknownKeyError(LiturgicalCalendarError, KeyError):
    """Raised when an observance key is absent from the merged registry."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"Unknown observance '{self.key}'"


class ConfigurationConflictError(LiturgicalCalendarError, ValueError):
    """Raised while building a registry from malformed or contradictory layers."""

    def __init__(self, message, layer=None):
        super().__init__(message)
        self.layer = layer
