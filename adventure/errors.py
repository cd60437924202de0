class AdventureError(Exception):
    """Base class for errors that abort the game session."""


class ConfigurationError(AdventureError):
    """A command, handler, or data file is missing or inconsistent."""


class PatternError(AdventureError):
    """A phrasing failed to compile as a regular expression."""

    def __init__(self, phrasing, reason):
        super().__init__(f"Bad phrasing {phrasing!r}: {reason}")
        self.phrasing = phrasing
        self.reason = reason


class CaptureError(AdventureError):
    """A phrasing matched but one of its capture groups did not."""

    def __init__(self, phrasing, group):
        super().__init__(f"Group {group} of {phrasing!r} did not capture anything")
        self.phrasing = phrasing
        self.group = group
