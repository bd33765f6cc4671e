"""Input form collection and session state."""

from forestviz.form.session import (
    MESSAGES,
    GraphForm,
    GraphSession,
    Notification,
    SubmitResult,
)

__all__ = ["MESSAGES", "GraphForm", "GraphSession", "Notification", "SubmitResult"]
