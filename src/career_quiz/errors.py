"""
Error taxonomy for the quiz engine.

UnknownQuestion and InvalidAnswerShape are raised straight to the host.
CorruptSession is raised only by a strict resume; the default resume drops
the offending saved entries instead. ConfigurationError is raised while a
catalog is being loaded, never during a live session.
"""

from __future__ import annotations

from typing import Optional


class QuizError(ValueError):
    """Base class for every error raised by career_quiz."""


class UnknownQuestion(QuizError):
    """Question id is not part of the catalog in use."""

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"Unknown question id: '{question_id}'")


class InvalidAnswerShape(QuizError):
    """Answer does not fit the question's declared kind."""

    def __init__(self, question_id: str, kind: str, reason: str):
        self.question_id = question_id
        self.kind = kind
        self.reason = reason
        super().__init__(f"Invalid answer for '{question_id}' ({kind}): {reason}")


class CorruptSession(QuizError):
    """A saved answer could not be decoded into its question's kind."""

    def __init__(self, question_id: str, reason: str, raw: Optional[object] = None):
        self.question_id = question_id
        self.reason = reason
        self.raw = raw
        super().__init__(f"Saved answer for '{question_id}' is corrupt: {reason}")


class ConfigurationError(QuizError):
    """Question or course catalog data is malformed."""


class SessionComplete(QuizError):
    """A new question was answered after the session hit its question cap."""

    def __init__(self, question_id: str, max_questions: int):
        self.question_id = question_id
        self.max_questions = max_questions
        super().__init__(
            f"Session already holds {max_questions} answers; "
            f"cannot add '{question_id}'"
        )
