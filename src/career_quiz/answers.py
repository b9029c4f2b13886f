"""
Answer shape enforcement and persisted-string encoding.

Three entry points:
  coerce_answer(question, value)   raw host value or typed Answer → checked Answer
  encode_answer(answer)            Answer → self-describing string for the host
  decode_saved_answer(question, s) persisted string/value → checked Answer

Only InvalidAnswerShape escapes coerce_answer; decode_saved_answer turns
every failure into CorruptSession.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from career_quiz.errors import CorruptSession, InvalidAnswerShape
from career_quiz.models import (
    MultiSelectAnswer,
    Question,
    QuestionKind,
    RankingAnswer,
    ScenarioAnswer,
    SingleChoiceAnswer,
    SkillGridAnswer,
    SliderAnswer,
    _AnswerBase,
)


def check_answer(question: Question, answer: _AnswerBase) -> _AnswerBase:
    """Verify a typed answer against the question it answers; return it unchanged."""
    kind = question.kind.value

    def bad(reason: str) -> InvalidAnswerShape:
        return InvalidAnswerShape(question.id, kind, reason)

    if answer.kind != kind:
        raise bad(f"got a '{answer.kind}' answer")

    known = set(question.option_ids)

    if isinstance(answer, SingleChoiceAnswer):
        if answer.option_id not in known:
            raise bad(f"unknown option '{answer.option_id}'")

    elif isinstance(answer, ScenarioAnswer):
        if answer.scenario_id not in known:
            raise bad(f"unknown scenario '{answer.scenario_id}'")

    elif isinstance(answer, MultiSelectAnswer):
        if not answer.option_ids:
            raise bad("select at least one option")
        if len(set(answer.option_ids)) != len(answer.option_ids):
            raise bad("duplicate selections")
        unknown = [o for o in answer.option_ids if o not in known]
        if unknown:
            raise bad(f"unknown options {unknown}")
        if question.max_selections is not None and len(answer.option_ids) > question.max_selections:
            raise bad(f"at most {question.max_selections} selections allowed")

    elif isinstance(answer, SkillGridAnswer):
        if not answer.ratings:
            raise bad("rate at least one skill")
        declared = set(question.skill_names)
        unknown = [name for name in answer.ratings if name not in declared]
        if unknown:
            raise bad(f"unknown skills {unknown}")
        # unrated skills contribute nothing

    elif isinstance(answer, RankingAnswer):
        if sorted(answer.order) != sorted(question.option_ids):
            raise bad("ranking must order every option exactly once")

    # SliderAnswer: range is enforced by the model itself
    return answer


def coerce_answer(question: Question, value: Any) -> _AnswerBase:
    """
    Turn a raw host value into the question's Answer type and check it.

    Accepted raw forms per kind:
      single_choice / scenario   option id (str)
      multi_select               list / tuple of option ids (sets are sorted)
      slider                     int 1–10
      skill_grid                 dict skill name → int 0–10
      ranking                    list / tuple of every option id, best first
    Typed Answer instances are checked as-is.
    """
    if isinstance(value, _AnswerBase):
        return check_answer(question, value)

    kind = question.kind
    try:
        if kind == QuestionKind.SINGLE_CHOICE:
            answer = SingleChoiceAnswer(option_id=value)
        elif kind == QuestionKind.SCENARIO:
            answer = ScenarioAnswer(scenario_id=value)
        elif kind == QuestionKind.MULTI_SELECT:
            if isinstance(value, (set, frozenset)):
                value = sorted(value)
            if isinstance(value, str) or not isinstance(value, (list, tuple)):
                raise InvalidAnswerShape(question.id, kind.value, "expected a list of option ids")
            answer = MultiSelectAnswer(option_ids=tuple(value))
        elif kind == QuestionKind.SLIDER:
            answer = SliderAnswer(value=value)
        elif kind == QuestionKind.SKILL_GRID:
            answer = SkillGridAnswer(ratings=value)
        elif kind == QuestionKind.RANKING:
            if isinstance(value, str) or not isinstance(value, (list, tuple)):
                raise InvalidAnswerShape(question.id, kind.value, "expected an ordered list of option ids")
            answer = RankingAnswer(order=tuple(value))
        else:  # pragma: no cover - QuestionKind is closed
            raise InvalidAnswerShape(question.id, kind.value, "unsupported question kind")
    except ValidationError as exc:
        first = exc.errors()[0]
        raise InvalidAnswerShape(question.id, kind.value, first.get("msg", str(exc))) from exc

    return check_answer(question, answer)


def encode_answer(answer: _AnswerBase) -> str:
    """
    Self-describing string form for host persistence.

    Every answer is stored as JSON text of its payload: '"opt-id"', '7',
    '["a", "b"]', '{"Maths": 8}'. Skill-grid keys are sorted so the same
    answer always encodes to the same string.
    """
    return json.dumps(answer.payload(), sort_keys=True, ensure_ascii=False)


def decode_saved_answer(question: Question, raw: Any) -> _AnswerBase:
    """
    Decode one persisted value back into a checked Answer.

    Strings are parsed as JSON first. Choice answers saved as bare option ids
    (not JSON-quoted) are accepted as they are.
    """
    value = raw
    if isinstance(raw, str):
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            value = raw
        if question.kind in (QuestionKind.SINGLE_CHOICE, QuestionKind.SCENARIO) and not isinstance(value, str):
            value = raw

    try:
        return coerce_answer(question, value)
    except InvalidAnswerShape as exc:
        raise CorruptSession(question.id, exc.reason, raw=raw) from exc
