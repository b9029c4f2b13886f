"""
matcher.py — Recommendation Matcher
====================================
Ranks a course catalog against a student's RIASEC score vector and profile.

Scoring
-------
  interest   cosine(student vector, course dimension profile) × interest_weight
  stream     + stream_bonus when the declared stream equals the course stream
  marks      + marks_bonus when marks ≥ the course's nominal cutoff
  total      clamped to 0–100, rounded to 2 decimals

Class level is a hard filter: courses for the other class level are never
returned. Every factor that fires adds one justification line; a course
where nothing fires still appears, with a neutral line.

Ordering is descending by score. Equal scores keep catalog declaration
order (Python's sort is stable).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from career_quiz.config import MatcherConfig, get_settings
from career_quiz.courses import CourseCatalog
from career_quiz.models import (
    DIMENSIONS,
    Course,
    Demand,
    Recommendation,
    ScoreVector,
    StudentProfile,
)

logger = logging.getLogger(__name__)

HIGH_CONFIDENCE   = 80.0
MEDIUM_CONFIDENCE = 60.0
MAX_ALTERNATIVES  = 3


@dataclass
class _Scored:
    course:          Course
    score:           float
    justifications:  list[str] = field(default_factory=list)


def cosine_similarity(scores: ScoreVector, course: Course) -> float:
    """0.0 when either side is all zeros."""
    profile = [course.dimension_profile.get(d, 0.0) for d in DIMENSIONS]
    student = [scores.get(d) for d in DIMENSIONS]
    norm_p = math.sqrt(math.fsum(v * v for v in profile))
    norm_s = math.sqrt(math.fsum(v * v for v in student))
    if norm_p == 0 or norm_s == 0:
        return 0.0
    dot = math.fsum(s * p for s, p in zip(student, profile))
    return max(0.0, min(1.0, dot / (norm_s * norm_p)))


def confidence_label(score: float) -> str:
    if score >= HIGH_CONFIDENCE:
        return "high"
    if score >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


def _shared_interests(scores: ScoreVector, course: Course) -> list[str]:
    """Up to two dimensions carrying the largest student × course product."""
    products = [
        (scores.get(d) * course.dimension_profile.get(d, 0.0), d)
        for d in DIMENSIONS
    ]
    ranked = sorted((p for p in products if p[0] > 0), key=lambda p: -p[0])
    return [d.value for _, d in ranked[:2]]


class CourseMatcher:
    """
    Deterministic course ranking.

    Usage::

        matcher = CourseMatcher()
        recs    = matcher.match(scores, StudentProfile(class_level="12"), default_course_catalog())
        recs[0].course_id, recs[0].match_score, recs[0].justifications
    """

    def __init__(self, config: Optional[MatcherConfig] = None):
        self.config = config or get_settings().matcher

    def _score(self, scores: ScoreVector, profile: StudentProfile, course: Course) -> _Scored:
        cfg = self.config
        item = _Scored(course=course, score=0.0)
        parts: list[float] = []

        similarity = cosine_similarity(scores, course)
        if similarity > 0:
            parts.append(similarity * cfg.interest_weight)
            shared = _shared_interests(scores, course)
            item.justifications.append(f"Matches your {' and '.join(shared)} interests")

        if profile.stream is not None and profile.stream == course.stream:
            parts.append(cfg.stream_bonus)
            item.justifications.append(f"Aligns with your declared {course.stream.label} stream")

        if profile.marks is not None and profile.marks >= course.min_marks:
            parts.append(cfg.marks_bonus)
            item.justifications.append(
                f"Your marks ({profile.marks:g}%) meet the usual {course.min_marks:g}% cutoff"
            )

        if not item.justifications:
            item.justifications.append(
                f"Open to students after class {course.class_level.value}; worth a look if it interests you"
            )

        if course.demand == Demand.VERY_HIGH:
            item.justifications.append("Very high demand for graduates in the job market")

        item.score = round(max(0.0, min(100.0, math.fsum(parts))), 2)
        return item

    def match(
        self,
        scores: ScoreVector,
        profile: StudentProfile,
        catalog: CourseCatalog,
    ) -> list[Recommendation]:
        """Every course eligible for the profile's class level, best match first."""
        eligible = [c for c in catalog if c.class_level == profile.class_level]
        scored = sorted(
            (self._score(scores, profile, c) for c in eligible),
            key=lambda s: -s.score,
        )

        recommendations: list[Recommendation] = []
        for rank, item in enumerate(scored, start=1):
            alternatives = [
                other.course.id
                for other in scored[rank:]
                if other.course.stream == item.course.stream
            ][:MAX_ALTERNATIVES]
            recommendations.append(Recommendation(
                course_id=item.course.id,
                course_name=item.course.name,
                stream=item.course.stream,
                match_score=item.score,
                justifications=item.justifications,
                confidence=confidence_label(item.score),
                rank=rank,
                alternatives=alternatives,
            ))

        logger.debug(
            "match: class %s, %d of %d courses eligible, top=%s",
            profile.class_level.value, len(eligible), len(catalog),
            recommendations[0].course_id if recommendations else "-",
        )
        return recommendations
