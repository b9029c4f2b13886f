"""
scoring.py — Score Aggregator
==============================
Pure functions that turn answered questions into a six-dimensional RIASEC
ScoreVector, plus a read-only interpretation layer on top of it.

Per-entry contribution
----------------------
  single_choice / scenario   weights of the chosen option
  multi_select               sum of the weights of every chosen option
  slider                     value / 10 × question weight, per tagged dimension
  skill_grid                 each skill's 0–10 rating, added to its dimension
  ranking                    option weight × (n − i) / n for position i of n

Totals are summed with math.fsum, which is exactly rounded, so the same set
of entries always yields a bit-identical vector whatever order they arrive in.
Entries whose question is no longer in the catalog, or whose answer no longer
fits the question, are skipped.

Interpretation
--------------
interpret_scores() normalises a vector to 0–100 (divide by the max), picks
the three strongest types, and maps the leading pair onto a suggested stream,
a confidence label and a short list of career titles.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Union

from career_quiz.answers import check_answer, decode_saved_answer
from career_quiz.catalog import QuestionCatalog
from career_quiz.errors import CorruptSession, InvalidAnswerShape
from career_quiz.models import (
    DIMENSIONS,
    Dimension,
    MultiSelectAnswer,
    Question,
    RankingAnswer,
    ScenarioAnswer,
    ScoreVector,
    SingleChoiceAnswer,
    SkillGridAnswer,
    SliderAnswer,
    Stream,
    _AnswerBase,
)

logger = logging.getLogger(__name__)


# ─── Per-entry contribution ──────────────────────────────────────────────────

def _add(acc: dict[Dimension, float], weights: Mapping[Dimension, float], factor: float = 1.0) -> None:
    for dim, w in weights.items():
        acc[dim] = acc.get(dim, 0.0) + w * factor


def entry_contribution(question: Question, answer: _AnswerBase) -> ScoreVector:
    """
    Dimension deltas for one answered question.

    The answer is assumed to have been checked against the question already;
    options or skills the question does not declare contribute nothing.
    """
    acc: dict[Dimension, float] = {}

    if isinstance(answer, SingleChoiceAnswer):
        opt = question.option(answer.option_id)
        if opt:
            _add(acc, opt.weights)

    elif isinstance(answer, ScenarioAnswer):
        opt = question.option(answer.scenario_id)
        if opt:
            _add(acc, opt.weights)

    elif isinstance(answer, MultiSelectAnswer):
        for option_id in answer.option_ids:
            opt = question.option(option_id)
            if opt:
                _add(acc, opt.weights)

    elif isinstance(answer, SliderAnswer):
        _add(acc, question.weights, answer.value / 10)

    elif isinstance(answer, SkillGridAnswer):
        dims = {s.name: s.dimension for s in question.skills}
        for name, rating in answer.ratings.items():
            if name in dims:
                _add(acc, {dims[name]: float(rating)})

    elif isinstance(answer, RankingAnswer):
        n = len(answer.order)
        for i, option_id in enumerate(answer.order):
            opt = question.option(option_id)
            if opt:
                _add(acc, opt.weights, (n - i) / n)

    return ScoreVector.from_mapping(acc)


# ─── Aggregation ─────────────────────────────────────────────────────────────

Entries = Union[Mapping[str, Any], Iterable]


def _pairs(entries: Entries) -> Iterable[tuple[str, _AnswerBase]]:
    """Accept a {qid: answer} mapping, (qid, answer) pairs, log entries or a session."""
    log = getattr(entries, "log", None)
    if log is not None:
        entries = log
    if isinstance(entries, Mapping):
        yield from entries.items()
        return
    for item in entries:
        if hasattr(item, "question_id"):
            yield item.question_id, item.answer
        else:
            qid, answer = item
            yield qid, answer


def aggregate(entries: Entries, catalog: QuestionCatalog) -> ScoreVector:
    """
    Sum every entry's contribution into one ScoreVector.

    *entries* may be a session state, its log, a list of (question_id,
    answer) pairs, or a {question_id: answer} mapping. Values that are not
    typed answers (the flattened map a host saves, or plain raw values) are
    decoded against their question first. Never raises for legacy data:
    unknown question ids, undecodable values and answers that no longer fit
    their question are logged at DEBUG and skipped.
    """
    columns: dict[Dimension, list[float]] = {dim: [] for dim in DIMENSIONS}

    for qid, answer in _pairs(entries):
        question = catalog.find(qid)
        if question is None:
            logger.debug("aggregate: skipping answer for unknown question '%s'", qid)
            continue
        try:
            if isinstance(answer, _AnswerBase):
                check_answer(question, answer)
            else:
                answer = decode_saved_answer(question, answer)
        except (InvalidAnswerShape, CorruptSession) as exc:
            logger.debug("aggregate: skipping stale answer: %s", exc)
            continue
        for dim, value in entry_contribution(question, answer).items():
            if value:
                columns[dim].append(value)

    return ScoreVector.from_mapping({dim: math.fsum(vals) for dim, vals in columns.items()})


# ─── Interpretation ──────────────────────────────────────────────────────────

_STREAM_BY_PRIMARY: dict[str, Stream] = {
    "R": Stream.SCIENCE,  "I": Stream.SCIENCE,
    "E": Stream.COMMERCE, "C": Stream.COMMERCE,
    "A": Stream.ARTS,     "S": Stream.ARTS,
}

CAREER_MATCHES: dict[str, list[str]] = {
    "R-I": ["Engineer", "Software Developer", "Architect", "Lab Technician"],
    "R-C": ["Electrician", "Mechanic", "Surveyor", "Quality Control Inspector"],
    "R-E": ["Construction Manager", "Production Manager", "Operations Manager"],
    "I-R": ["Medical Researcher", "Biotechnologist", "Environmental Scientist"],
    "I-A": ["Scientist", "Researcher", "Psychologist", "Data Analyst"],
    "I-C": ["Pharmacist", "Chemist", "Medical Lab Technician"],
    "A-S": ["Teacher", "Counselor", "Designer", "Artist"],
    "A-E": ["Marketing Manager", "Creative Director", "Entrepreneur"],
    "A-I": ["UX Designer", "Content Strategist", "Technical Writer"],
    "S-A": ["Social Worker", "Therapist", "HR Manager", "Event Planner"],
    "S-E": ["Sales Manager", "Public Relations", "Customer Success Manager"],
    "S-C": ["Healthcare Administrator", "Office Manager", "Coordinator"],
    "E-C": ["Business Analyst", "Chartered Accountant", "Financial Manager"],
    "E-S": ["Business Development Manager", "Entrepreneur", "Consultant"],
    "E-I": ["Management Consultant", "Strategic Planner", "Business Owner"],
    "C-E": ["Accountant", "Auditor", "Financial Analyst", "Tax Consultant"],
    "C-I": ["Database Administrator", "Systems Analyst", "Statistician"],
    "C-S": ["Administrator", "HR Specialist", "Legal Assistant"],
}
_FALLBACK_CAREERS = ["Career Counselor Recommended"]


@dataclass
class InterestProfile:
    """Normalised, human-facing reading of a ScoreVector."""
    scores:            dict[str, int]                 # code → 0–100
    top_types:         list[str]                      # up to three codes, strongest first
    suggested_stream:  Stream
    confidence:        str                            # High | Medium | Low
    career_matches:    list[str] = field(default_factory=list)

    @property
    def holland_code(self) -> str:
        return "".join(self.top_types)


def normalise(vector: ScoreVector) -> dict[str, int]:
    """Scale to 0–100 against the strongest dimension; the zero vector stays zero."""
    peak = max(v for _, v in vector.items())
    if peak <= 0:
        return {dim.code: 0 for dim in DIMENSIONS}
    return {dim.code: int(round(v / peak * 100)) for dim, v in vector.items()}


def career_matches(primary: str, secondary: str) -> list[str]:
    return list(
        CAREER_MATCHES.get(f"{primary}-{secondary}")
        or CAREER_MATCHES.get(f"{secondary}-{primary}")
        or _FALLBACK_CAREERS
    )


def interpret_scores(vector: ScoreVector) -> InterestProfile:
    scores = normalise(vector)
    # Highest first; equal scores fall back to alphabetical code order
    ordered = sorted(scores, key=lambda code: (-scores[code], code))
    top = ordered[:3]
    gap = scores[top[0]] - scores[top[1]]

    if gap > 20:
        confidence = "High"
    elif gap > 10:
        confidence = "Medium"
    else:
        confidence = "Low"

    stream = _STREAM_BY_PRIMARY[top[0]]
    if scores["R"] > 80 and scores["I"] < 50:
        stream = Stream.VOCATIONAL

    return InterestProfile(
        scores=scores,
        top_types=top,
        suggested_stream=stream,
        confidence=confidence,
        career_matches=career_matches(top[0], top[1]),
    )
