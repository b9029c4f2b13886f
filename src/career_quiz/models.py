"""
Data models for the career quiz engine.

Question and course catalog entries, the closed Answer union, and the
matcher's profile / recommendation contracts are Pydantic models so that
shape is enforced where data enters the engine. Runtime values that are
only ever built by the engine itself (ScoreVector) are frozen dataclasses.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Annotated, Iterator, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt


# ─── Enumerations ────────────────────────────────────────────────────────────

class Dimension(str, Enum):
    """The six RIASEC interest dimensions, in canonical order."""
    REALISTIC     = "realistic"      # doers: hands-on, technical
    INVESTIGATIVE = "investigative"  # thinkers: research, problem-solving
    ARTISTIC      = "artistic"       # creators: expression, design
    SOCIAL        = "social"         # helpers: people-oriented
    ENTERPRISING  = "enterprising"   # persuaders: leadership, business
    CONVENTIONAL  = "conventional"   # organisers: data, systems

    @property
    def code(self) -> str:
        return self.value[0].upper()

    @classmethod
    def from_code(cls, code: str) -> "Dimension":
        for dim in cls:
            if dim.code == code.upper():
                return dim
        raise ValueError(f"Unknown RIASEC code: {code!r}")


DIMENSIONS: tuple[Dimension, ...] = tuple(Dimension)


class QuestionKind(str, Enum):
    """Answer shape a question expects."""
    SINGLE_CHOICE = "single_choice"
    MULTI_SELECT  = "multi_select"
    SCENARIO      = "scenario"
    SLIDER        = "slider"       # integer 1–10
    SKILL_GRID    = "skill_grid"   # skill name → integer 0–10
    RANKING       = "ranking"      # permutation of every option id


CHOICE_KINDS = frozenset({
    QuestionKind.SINGLE_CHOICE,
    QuestionKind.MULTI_SELECT,
    QuestionKind.SCENARIO,
    QuestionKind.RANKING,
})


class QuestionGroup(str, Enum):
    """Catalog partition a question belongs to."""
    BASELINE       = "baseline"
    DEEP_DIVE      = "deep_dive"
    ACADEMIC       = "academic"
    VALUES         = "values"
    SKILLS         = "skills"
    LEARNING_STYLE = "learning_style"


# Offered one at a time, in this order, after baseline and deep dives.
ROUND_ROBIN_GROUPS: tuple[QuestionGroup, ...] = (
    QuestionGroup.ACADEMIC,
    QuestionGroup.VALUES,
    QuestionGroup.SKILLS,
    QuestionGroup.LEARNING_STYLE,
)


class ClassLevel(str, Enum):
    """The class the student is finishing."""
    CLASS_10 = "10"
    CLASS_12 = "12"


class Stream(str, Enum):
    SCIENCE    = "science"
    COMMERCE   = "commerce"
    ARTS       = "arts"
    VOCATIONAL = "vocational"

    @property
    def label(self) -> str:
        return self.value.title()


class Demand(str, Enum):
    VERY_HIGH = "Very High"
    HIGH      = "High"
    MEDIUM    = "Medium"
    GOOD      = "Good"


class SessionStatus(str, Enum):
    FRESH       = "fresh"
    IN_PROGRESS = "in_progress"
    COMPLETE    = "complete"


Weights = dict[Dimension, float]


# ─── Question catalog entries ────────────────────────────────────────────────

class Option(BaseModel):
    """One selectable option (or scenario card) of a choice question."""
    model_config = ConfigDict(frozen=True)

    id:           str
    text:         str
    description:  str = ""
    weights:      Weights = Field(default_factory=dict)


class SkillSpec(BaseModel):
    """One row of a skill-grid question; its rating feeds a single dimension."""
    model_config = ConfigDict(frozen=True)

    name:       str
    dimension:  Dimension


class Question(BaseModel):
    """Immutable catalog entry."""
    model_config = ConfigDict(frozen=True)

    id:              str
    text:            str
    kind:            QuestionKind
    group:           QuestionGroup
    options:         tuple[Option, ...] = ()
    skills:          tuple[SkillSpec, ...] = ()
    weights:         Weights = Field(
        default_factory=dict,
        description="Slider only: points per dimension at a rating of 10",
    )
    min_label:       str = ""
    max_label:       str = ""
    max_selections:  Optional[int] = None

    @property
    def option_ids(self) -> tuple[str, ...]:
        return tuple(o.id for o in self.options)

    @property
    def skill_names(self) -> tuple[str, ...]:
        return tuple(s.name for s in self.skills)

    def option(self, option_id: str) -> Optional[Option]:
        return next((o for o in self.options if o.id == option_id), None)


# ─── Answers (closed union, discriminated on `kind`) ─────────────────────────

class _AnswerBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SingleChoiceAnswer(_AnswerBase):
    kind:       Literal["single_choice"] = "single_choice"
    option_id:  str

    def payload(self) -> str:
        return self.option_id


class MultiSelectAnswer(_AnswerBase):
    kind:        Literal["multi_select"] = "multi_select"
    option_ids:  tuple[str, ...]

    def payload(self) -> list[str]:
        return list(self.option_ids)


class ScenarioAnswer(_AnswerBase):
    kind:         Literal["scenario"] = "scenario"
    scenario_id:  str

    def payload(self) -> str:
        return self.scenario_id


class SliderAnswer(_AnswerBase):
    kind:   Literal["slider"] = "slider"
    value:  StrictInt = Field(ge=1, le=10)

    def payload(self) -> int:
        return self.value


class SkillGridAnswer(_AnswerBase):
    kind:     Literal["skill_grid"] = "skill_grid"
    ratings:  dict[str, Annotated[StrictInt, Field(ge=0, le=10)]]

    def payload(self) -> dict[str, int]:
        return dict(self.ratings)


class RankingAnswer(_AnswerBase):
    kind:   Literal["ranking"] = "ranking"
    order:  tuple[str, ...]

    def payload(self) -> list[str]:
        return list(self.order)


Answer = Annotated[
    Union[
        SingleChoiceAnswer,
        MultiSelectAnswer,
        ScenarioAnswer,
        SliderAnswer,
        SkillGridAnswer,
        RankingAnswer,
    ],
    Field(discriminator="kind"),
]


# ─── Deep-dive activation ────────────────────────────────────────────────────

class ActivationRule(BaseModel):
    """
    "Ask this group if baseline question X was answered with one of Y."

    Choice questions match on `any_of` (multi-select: any overlap; ranking:
    the first-ranked option). Slider questions match on `min_value`.
    """
    model_config = ConfigDict(frozen=True)

    question_id:  str
    any_of:       tuple[str, ...] = ()
    min_value:    Optional[int] = None

    def matches(self, answer) -> bool:
        if isinstance(answer, SingleChoiceAnswer):
            return answer.option_id in self.any_of
        if isinstance(answer, ScenarioAnswer):
            return answer.scenario_id in self.any_of
        if isinstance(answer, MultiSelectAnswer):
            return any(o in self.any_of for o in answer.option_ids)
        if isinstance(answer, RankingAnswer):
            return bool(answer.order) and answer.order[0] in self.any_of
        if isinstance(answer, SliderAnswer):
            return self.min_value is not None and answer.value >= self.min_value
        return False


class DeepDiveGroup(BaseModel):
    """Conditional follow-up questions, asked when any activation rule holds."""
    model_config = ConfigDict(frozen=True)

    id:          str
    title:       str
    activation:  tuple[ActivationRule, ...]
    questions:   tuple[Question, ...]

    def is_active(self, answers: Mapping[str, object]) -> bool:
        return any(
            rule.question_id in answers and rule.matches(answers[rule.question_id])
            for rule in self.activation
        )


# ─── Score vector ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ScoreVector:
    """Six non-negative RIASEC totals. Always rebuilt from a full answer log."""
    realistic:      float = 0.0
    investigative:  float = 0.0
    artistic:       float = 0.0
    social:         float = 0.0
    enterprising:   float = 0.0
    conventional:   float = 0.0

    @classmethod
    def zero(cls) -> "ScoreVector":
        return cls()

    @classmethod
    def from_mapping(cls, values: Mapping) -> "ScoreVector":
        """Build from a mapping keyed by Dimension or dimension name."""
        kwargs = {}
        for key, value in values.items():
            dim = key if isinstance(key, Dimension) else Dimension(key)
            kwargs[dim.value] = float(value)
        return cls(**kwargs)

    def get(self, dim: Dimension) -> float:
        return getattr(self, dim.value)

    def items(self) -> Iterator[tuple[Dimension, float]]:
        for dim in DIMENSIONS:
            yield dim, self.get(dim)

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def magnitude(self) -> float:
        return math.sqrt(math.fsum(v * v for _, v in self.items()))

    def total(self) -> float:
        return math.fsum(v for _, v in self.items())

    def ranked(self) -> list[Dimension]:
        """Dimensions by descending score; ties keep canonical R-I-A-S-E-C order."""
        return sorted(DIMENSIONS, key=lambda d: -self.get(d))


# ─── Course catalog entries ──────────────────────────────────────────────────

class Course(BaseModel):
    """Immutable course / stream reference data."""
    model_config = ConfigDict(frozen=True)

    id:                 str
    name:               str
    full_name:          str
    stream:             Stream
    branch:             Optional[str] = None
    class_level:        ClassLevel
    duration:           str
    eligibility:        str
    entrance_exams:     tuple[str, ...] = ()
    avg_salary:         str = ""
    top_salary:         str = ""
    demand:             Demand = Demand.MEDIUM
    difficulty:         int = Field(default=3, ge=1, le=5)
    skills:             tuple[str, ...] = ()
    careers:            tuple[str, ...] = ()
    top_colleges:       tuple[str, ...] = ()
    description:        str = ""
    min_marks:          float = Field(default=0.0, ge=0.0, le=100.0,
                                      description="Nominal eligibility cutoff, %")
    dimension_profile:  Weights = Field(default_factory=dict)


# ─── Matcher contracts ───────────────────────────────────────────────────────

class StudentProfile(BaseModel):
    """Static student attributes supplied by the host."""
    student_name:  str = ""
    class_level:   ClassLevel
    stream:        Optional[Stream] = None
    marks:         Optional[float] = Field(default=None, ge=0.0, le=100.0,
                                           description="Latest aggregate, %")


class Recommendation(BaseModel):
    """One ranked, explained course match."""
    course_id:       str
    course_name:     str
    stream:          Stream
    match_score:     float = Field(ge=0.0, le=100.0)
    justifications:  list[str] = Field(min_length=1)
    confidence:      Literal["high", "medium", "low"] = "low"
    rank:            int = 0
    alternatives:    list[str] = Field(default_factory=list)
