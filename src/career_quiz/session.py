"""
session.py — Adaptive Session State Machine
============================================
AdaptiveQuizEngine drives one quiz-taking interaction over an immutable
SessionState. Every transition returns a new state; the engine itself holds
only the catalog and the quiz settings, so one engine can serve any number
of concurrent sessions.

States
------
  fresh        no answers yet
  in_progress  at least one answer, more to ask
  complete     select_next() yields nothing, or the question cap is reached

Selection precedence (re-evaluated on every call)
-------------------------------------------------
  1. unanswered baseline questions, in declaration order
  2. the first unanswered member of the first active deep-dive group
  3. one question at a time from academic → values → skills →
     learning_style, always from the group with the fewest answers so far
  4. nothing

The running score is never stored: it is recomputed from the log on read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from career_quiz.answers import coerce_answer, decode_saved_answer, encode_answer
from career_quiz.catalog import QuestionCatalog
from career_quiz.config import QuizConfig, get_settings
from career_quiz.errors import ConfigurationError, CorruptSession, SessionComplete
from career_quiz.models import (
    ROUND_ROBIN_GROUPS,
    Question,
    ScoreVector,
    SessionStatus,
    _AnswerBase,
)
from career_quiz.scoring import aggregate, entry_contribution

logger = logging.getLogger(__name__)


# ─── Session values ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LogEntry:
    """One answered question, with its dimension deltas at the time of answering."""
    question_id:  str
    answer:       _AnswerBase
    deltas:       ScoreVector


@dataclass(frozen=True)
class SessionState:
    """Append-only answer log. `count` is always `len(log)`."""
    log: tuple[LogEntry, ...] = ()

    @property
    def count(self) -> int:
        return len(self.log)

    @property
    def answers(self) -> dict[str, _AnswerBase]:
        return {e.question_id: e.answer for e in self.log}

    @property
    def answered_ids(self) -> frozenset[str]:
        return frozenset(e.question_id for e in self.log)

    @property
    def last(self) -> Optional[LogEntry]:
        return self.log[-1] if self.log else None

    def answer_for(self, question_id: str) -> Optional[_AnswerBase]:
        for entry in self.log:
            if entry.question_id == question_id:
                return entry.answer
        return None


@dataclass
class ResumeReport:
    """What a resume kept and what it had to drop."""
    state:      SessionState
    skipped:    list[CorruptSession] = field(default_factory=list)
    unknown:    list[str] = field(default_factory=list)     # ids not in the catalog
    truncated:  list[str] = field(default_factory=list)     # valid, but past the cap

    @property
    def clean(self) -> bool:
        return not (self.skipped or self.unknown or self.truncated)


# ─── Engine ──────────────────────────────────────────────────────────────────

class AdaptiveQuizEngine:
    """
    Adaptive question selection with undo and resume.

    Usage::

        engine = AdaptiveQuizEngine(get_question_catalog("12"))
        state  = engine.initialize()
        while (q := engine.select_next(state)) is not None:
            state = engine.advance(state, q.id, host_collects_answer(q))
        scores = engine.scores(state)
    """

    def __init__(self, catalog: QuestionCatalog, config: Optional[QuizConfig] = None):
        self.catalog = catalog
        self.config = config or get_settings().quiz
        if not self.config.is_valid:
            raise ConfigurationError(
                f"Quiz settings invalid: max_questions={self.config.max_questions}, "
                f"progress_target={self.config.progress_target}"
            )

    @property
    def max_questions(self) -> int:
        return self.config.max_questions

    # ── Lifecycle ────────────────────────────────────────────────────────────

    def initialize(self) -> SessionState:
        return SessionState()

    def resume(self, saved_answers: Mapping[str, Any], strict: bool = False) -> SessionState:
        """Rebuild a session from a host-persisted {question_id: raw answer} map."""
        return self.resume_with_report(saved_answers, strict=strict).state

    def resume_with_report(self, saved_answers: Mapping[str, Any], strict: bool = False) -> ResumeReport:
        """
        Replay *saved_answers* in catalog order and report anything dropped.

        Entries are replayed baseline first, then deep-dive groups, then the
        optional groups, regardless of the map's own key order. Ids absent
        from the catalog are ignored. A saved value that no longer decodes
        into its question's kind is dropped with a warning, or raises
        CorruptSession when *strict* is set.
        """
        state = self.initialize()
        report = ResumeReport(state=state)

        report.unknown = sorted(qid for qid in saved_answers if qid not in self.catalog)
        for qid in report.unknown:
            logger.warning("resume: ignoring saved answer for unknown question '%s'", qid)

        for question in self.catalog.canonical_order():
            if question.id not in saved_answers:
                continue
            if state.count >= self.max_questions:
                report.truncated.append(question.id)
                continue
            try:
                answer = decode_saved_answer(question, saved_answers[question.id])
            except CorruptSession as exc:
                if strict:
                    raise
                logger.warning("resume: %s", exc)
                report.skipped.append(exc)
                continue
            state = self._append(state, question, answer)

        if report.truncated:
            logger.warning(
                "resume: cap of %d reached, dropped %d saved answers: %s",
                self.max_questions, len(report.truncated), ", ".join(report.truncated),
            )
        logger.debug("resume: rebuilt session with %d answers", state.count)
        report.state = state
        return report

    # ── Selection ────────────────────────────────────────────────────────────

    def select_next(self, state: SessionState) -> Optional[Question]:
        if state.count >= self.max_questions:
            return None

        answers = state.answers

        for q in self.catalog.baseline:
            if q.id not in answers:
                return q

        for grp in self.catalog.deep_dive:
            if not grp.is_active(answers):
                continue
            for q in grp.questions:
                if q.id not in answers:
                    logger.debug("select_next: deep dive '%s' → %s", grp.id, q.id)
                    return q

        return self._round_robin(answers)

    def _round_robin(self, answers: Mapping[str, Any]) -> Optional[Question]:
        best: Optional[Question] = None
        best_done = 0
        for grp in ROUND_ROBIN_GROUPS:
            questions = self.catalog.group(grp)
            pending = [q for q in questions if q.id not in answers]
            if not pending:
                continue
            done = len(questions) - len(pending)
            # strict < keeps the earlier group on ties
            if best is None or done < best_done:
                best, best_done = pending[0], done
        return best

    # ── Transitions ──────────────────────────────────────────────────────────

    def advance(
        self,
        state: SessionState,
        question_id: str,
        answer: Union[_AnswerBase, Any],
    ) -> SessionState:
        """
        Record *answer* for *question_id* and return the new state.

        *answer* may be a typed Answer or a raw host value (option id, list
        of ids, int, skill → rating dict). Re-answering a question moves it
        to the end of the log. Raises UnknownQuestion, InvalidAnswerShape,
        or SessionComplete when a new question would exceed the cap.
        """
        question = self.catalog.get(question_id)
        checked = coerce_answer(question, answer)

        if question_id not in state.answered_ids and state.count >= self.max_questions:
            raise SessionComplete(question_id, self.max_questions)

        new_state = self._append(state, question, checked)
        logger.debug("advance: %s (%s) → %d answered", question_id, checked.kind, new_state.count)
        return new_state

    def _append(self, state: SessionState, question: Question, answer: _AnswerBase) -> SessionState:
        kept = tuple(e for e in state.log if e.question_id != question.id)
        entry = LogEntry(question.id, answer, entry_contribution(question, answer))
        return SessionState(log=kept + (entry,))

    def revert(self, state: SessionState) -> tuple[SessionState, Optional[LogEntry]]:
        """Undo the last log entry. An empty session is returned unchanged with None."""
        if not state.log:
            return state, None
        removed = state.log[-1]
        logger.debug("revert: removed %s", removed.question_id)
        return SessionState(log=state.log[:-1]), removed

    # ── Queries ──────────────────────────────────────────────────────────────

    def is_complete(self, state: SessionState) -> bool:
        return state.count >= self.max_questions or self.select_next(state) is None

    def status(self, state: SessionState) -> SessionStatus:
        if self.is_complete(state):
            return SessionStatus.COMPLETE
        if state.count == 0:
            return SessionStatus.FRESH
        return SessionStatus.IN_PROGRESS

    def progress(self, state: SessionState) -> float:
        """Percent complete against the progress target, capped at 100."""
        return min(state.count / self.config.progress_target * 100, 100.0)

    def scores(self, state: SessionState) -> ScoreVector:
        return aggregate(state.log, self.catalog)

    def flatten(self, state: SessionState) -> dict[str, str]:
        """Flat {question_id: encoded answer} map for host persistence."""
        return {e.question_id: encode_answer(e.answer) for e in state.log}
