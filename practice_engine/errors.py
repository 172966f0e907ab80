from __future__ import annotations


class PracticeEngineError(Exception):
    """Base class for errors raised by the practice engine."""


class RoundStateError(PracticeEngineError):
    """A round transition was requested from a phase that does not allow it."""


class EmptyAnswerError(PracticeEngineError, ValueError):
    """The submitted answer was empty or whitespace only."""
