"""
catalog.py — Question catalog
==============================
A QuestionCatalog is the static, versioned bank a session is run against.
It is partitioned into:

  baseline         asked to every student, in declaration order
  deep_dive        groups of follow-ups, each gated by activation rules over
                   baseline answers
  academic, values, skills, learning_style
                   optional groups offered round-robin at the end

Every structural problem is raised as ConfigurationError from the
constructor, so a catalog that exists is a catalog that is safe to run.

Checks performed
----------------
  C-01  Question ids unique across the whole catalog
  C-02  Question `group` tag matches the partition it was placed in
  C-03  Choice kinds declare ≥ 2 options with unique ids
  C-04  Skill grids declare ≥ 1 skill with unique names
  C-05  No negative weights (options, slider dimensions)
  C-06  max_selections within [1, option count]
  C-07  Deep-dive groups: non-empty, unique ids, ≥ 1 activation rule
  C-08  Activation rules reference a baseline question (never the group
        itself or another deep dive) with a satisfiable condition
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping, Optional

from pydantic import ValidationError

from career_quiz.errors import ConfigurationError, UnknownQuestion
from career_quiz.models import (
    CHOICE_KINDS,
    ROUND_ROBIN_GROUPS,
    ActivationRule,
    DeepDiveGroup,
    Question,
    QuestionGroup,
    QuestionKind,
)

logger = logging.getLogger(__name__)


class QuestionCatalog:
    """
    Immutable, validated question bank.

    Usage::

        catalog = QuestionCatalog(
            version="2025.1",
            baseline=[...],
            deep_dive=[DeepDiveGroup(...), ...],
            academic=[...], values=[...], skills=[...], learning_style=[...],
        )
        q = catalog.get("base-1")
    """

    def __init__(
        self,
        *,
        version: str,
        baseline: Iterable[Question],
        deep_dive: Iterable[DeepDiveGroup] = (),
        academic: Iterable[Question] = (),
        values: Iterable[Question] = (),
        skills: Iterable[Question] = (),
        learning_style: Iterable[Question] = (),
        class_level: Optional[str] = None,
    ):
        self.version = version
        self.class_level = class_level
        self.baseline: tuple[Question, ...] = tuple(baseline)
        self.deep_dive: tuple[DeepDiveGroup, ...] = tuple(deep_dive)
        self._optional: dict[QuestionGroup, tuple[Question, ...]] = {
            QuestionGroup.ACADEMIC:       tuple(academic),
            QuestionGroup.VALUES:         tuple(values),
            QuestionGroup.SKILLS:         tuple(skills),
            QuestionGroup.LEARNING_STYLE: tuple(learning_style),
        }

        self._by_id: dict[str, Question] = {}
        self._deep_dive_of: dict[str, DeepDiveGroup] = {}
        self._validate()

        logger.info(
            "Loaded question catalog %s (class %s): %d baseline, %d deep-dive groups, %d questions total",
            self.version, self.class_level or "-", len(self.baseline),
            len(self.deep_dive), len(self._by_id),
        )

    # ── Lookup ───────────────────────────────────────────────────────────────

    def get(self, question_id: str) -> Question:
        try:
            return self._by_id[question_id]
        except KeyError:
            raise UnknownQuestion(question_id) from None

    def find(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.canonical_order())

    def group(self, group: QuestionGroup) -> tuple[Question, ...]:
        """Questions of one partition, in declaration order."""
        if group == QuestionGroup.BASELINE:
            return self.baseline
        if group == QuestionGroup.DEEP_DIVE:
            return tuple(q for g in self.deep_dive for q in g.questions)
        return self._optional[group]

    def deep_dive_group_of(self, question_id: str) -> Optional[DeepDiveGroup]:
        return self._deep_dive_of.get(question_id)

    def canonical_order(self) -> list[Question]:
        """
        Fixed replay order: baseline, deep-dive groups in declaration order,
        then academic, values, skills, learning_style.
        """
        ordered = list(self.baseline)
        for grp in self.deep_dive:
            ordered.extend(grp.questions)
        for grp in ROUND_ROBIN_GROUPS:
            ordered.extend(self._optional[grp])
        return ordered

    # ── Validation ───────────────────────────────────────────────────────────

    def _validate(self) -> None:
        if not self.baseline:
            raise ConfigurationError(f"Catalog {self.version}: baseline set is empty.")

        placed: list[tuple[QuestionGroup, Question]] = [(QuestionGroup.BASELINE, q) for q in self.baseline]
        for grp in self.deep_dive:
            placed.extend((QuestionGroup.DEEP_DIVE, q) for q in grp.questions)
        for partition, questions in self._optional.items():
            placed.extend((partition, q) for q in questions)

        for partition, q in placed:
            # C-01
            if q.id in self._by_id:
                raise ConfigurationError(f"Duplicate question id: '{q.id}'")
            # C-02
            if q.group != partition:
                raise ConfigurationError(
                    f"Question '{q.id}' is tagged '{q.group.value}' but placed in '{partition.value}'"
                )
            _validate_question(q)
            self._by_id[q.id] = q

        baseline_ids = {q.id for q in self.baseline}
        group_ids: set[str] = set()
        for grp in self.deep_dive:
            # C-07
            if grp.id in group_ids:
                raise ConfigurationError(f"Duplicate deep-dive group id: '{grp.id}'")
            group_ids.add(grp.id)
            if not grp.questions:
                raise ConfigurationError(f"Deep-dive group '{grp.id}' has no questions")
            if not grp.activation:
                raise ConfigurationError(f"Deep-dive group '{grp.id}' can never activate: no activation rules")
            for q in grp.questions:
                self._deep_dive_of[q.id] = grp
            member_ids = {q.id for q in grp.questions}
            for rule in grp.activation:
                self._validate_rule(grp, rule, baseline_ids, member_ids)

    def _validate_rule(
        self,
        grp: DeepDiveGroup,
        rule: ActivationRule,
        baseline_ids: set[str],
        member_ids: set[str],
    ) -> None:
        """C-08: the rule must be satisfiable by some baseline answer."""
        where = f"Deep-dive group '{grp.id}' activation on '{rule.question_id}'"
        if rule.question_id in member_ids:
            raise ConfigurationError(f"{where}: rule refers to its own group")
        if rule.question_id not in self._by_id:
            raise ConfigurationError(f"{where}: unknown question")
        if rule.question_id not in baseline_ids:
            raise ConfigurationError(f"{where}: rules may only reference baseline questions")

        target = self._by_id[rule.question_id]
        if target.kind in CHOICE_KINDS:
            if not rule.any_of:
                raise ConfigurationError(f"{where}: choice rule needs at least one option in any_of")
            unknown = [o for o in rule.any_of if o not in target.option_ids]
            if unknown:
                raise ConfigurationError(f"{where}: options {unknown} do not exist, rule is unsatisfiable")
        elif target.kind == QuestionKind.SLIDER:
            if rule.min_value is None or not 1 <= rule.min_value <= 10:
                raise ConfigurationError(f"{where}: slider rule needs min_value in 1–10")
        else:
            raise ConfigurationError(f"{where}: '{target.kind.value}' questions cannot gate a deep dive")


def _validate_question(q: Question) -> None:
    # C-03
    if q.kind in CHOICE_KINDS:
        if len(q.options) < 2:
            raise ConfigurationError(f"Question '{q.id}' ({q.kind.value}) needs at least 2 options")
        if len(set(q.option_ids)) != len(q.option_ids):
            raise ConfigurationError(f"Question '{q.id}' has duplicate option ids")
    elif q.options:
        raise ConfigurationError(f"Question '{q.id}' ({q.kind.value}) must not declare options")

    # C-04
    if q.kind == QuestionKind.SKILL_GRID:
        if not q.skills:
            raise ConfigurationError(f"Skill grid '{q.id}' declares no skills")
        if len(set(q.skill_names)) != len(q.skill_names):
            raise ConfigurationError(f"Skill grid '{q.id}' has duplicate skill names")

    # C-05
    for opt in q.options:
        for dim, weight in opt.weights.items():
            if weight < 0:
                raise ConfigurationError(
                    f"Question '{q.id}' option '{opt.id}' has negative {dim.value} weight"
                )
    for dim, weight in q.weights.items():
        if weight < 0:
            raise ConfigurationError(f"Question '{q.id}' has negative {dim.value} weight")

    # C-06
    if q.max_selections is not None:
        if q.kind != QuestionKind.MULTI_SELECT:
            raise ConfigurationError(f"Question '{q.id}': max_selections only applies to multi_select")
        if not 1 <= q.max_selections <= len(q.options):
            raise ConfigurationError(f"Question '{q.id}': max_selections out of range")


# ─── Loading from plain data ─────────────────────────────────────────────────

def load_question_catalog(raw: Mapping[str, Any]) -> QuestionCatalog:
    """
    Build a catalog from plain dicts (e.g. parsed JSON supplied by the host).

    Expected keys: version, baseline, deep_dive, academic, values, skills,
    learning_style, optional class_level. Each question dict may omit
    `group`; it is filled in from the partition it is listed under.
    """
    def questions(key: str, group: QuestionGroup) -> list[Question]:
        return [Question(**{"group": group, **item}) for item in raw.get(key, [])]

    try:
        deep_dive = [
            DeepDiveGroup(
                id=item["id"],
                title=item.get("title", item["id"]),
                activation=tuple(ActivationRule(**r) for r in item.get("activation", [])),
                questions=tuple(
                    Question(**{"group": QuestionGroup.DEEP_DIVE, **q}) for q in item.get("questions", [])
                ),
            )
            for item in raw.get("deep_dive", [])
        ]
        return QuestionCatalog(
            version=str(raw.get("version", "custom")),
            class_level=raw.get("class_level"),
            baseline=questions("baseline", QuestionGroup.BASELINE),
            deep_dive=deep_dive,
            academic=questions("academic", QuestionGroup.ACADEMIC),
            values=questions("values", QuestionGroup.VALUES),
            skills=questions("skills", QuestionGroup.SKILLS),
            learning_style=questions("learning_style", QuestionGroup.LEARNING_STYLE),
        )
    except (ValidationError, KeyError, TypeError) as exc:
        raise ConfigurationError(f"Malformed question catalog data: {exc}") from exc
