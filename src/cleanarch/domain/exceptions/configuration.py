"""Configuration exceptions."""

from cleanarch.domain.exceptions.base import CleanArchError


class ConfigurationError(CleanArchError):
    """Invalid architecture configuration.

    Raised at construction time when a layer, directive or package root
    cannot be evaluated at all (empty name, no patterns, unknown key).

    Attributes:
        subject: Configuration element at fault (must not be empty)
        reason: Why it is invalid (must not be empty)
    """

    def __init__(self, subject: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not subject:
            raise ValueError("subject must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.subject = subject
        self.reason = reason
        super().__init__(f"Invalid configuration '{subject}': {reason}")


class PatternError(ConfigurationError):
    """Package pattern with invalid syntax.

    Attributes:
        pattern: Offending pattern string
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        super().__init__(f"pattern {pattern!r}", reason)
