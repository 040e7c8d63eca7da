"""Root of the gled exception hierarchy.

Every error gled raises on purpose derives from GledError, so the CLI can
tell its own failures (with a message written for the user) apart from
unexpected ones.
"""

from typing import Optional


class GledError(Exception):
    """
    Error with a user-facing message and an optional fix.

    Attributes:
        user_message: Shown on the terminal
        technical_message: Written to the log (defaults to user_message)
        recoverable: True when the user can fix the cause and rerun gled;
            False for internal errors worth reporting
        recovery_hint: What to do about it, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
