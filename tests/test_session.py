"""
Tests for AdaptiveQuizEngine (session.py): selection order, transitions,
undo, resume and completion.
"""
import json
import random

import pytest
from factories import INVESTIGATIVE_BASELINE, advance_all, leaning_answer, run_to_completion

from career_quiz.config import QuizConfig
from career_quiz.errors import CorruptSession, InvalidAnswerShape, SessionComplete, UnknownQuestion
from career_quiz.models import Dimension, QuestionGroup, ScenarioAnswer, ScoreVector, SessionStatus
from career_quiz.session import AdaptiveQuizEngine, SessionState


class TestInitialize:
    def test_fresh_state(self, engine):
        state = engine.initialize()
        assert state.count == 0
        assert state.log == ()
        assert engine.scores(state) == ScoreVector.zero()
        assert engine.status(state) == SessionStatus.FRESH

    def test_first_question_is_first_baseline(self, engine):
        assert engine.select_next(engine.initialize()).id == "base-1"


class TestSelectNext:
    def test_baseline_in_declaration_order(self, engine):
        state = engine.initialize()
        seen = []
        for qid, value in INVESTIGATIVE_BASELINE.items():
            q = engine.select_next(state)
            seen.append(q.id)
            state = engine.advance(state, q.id, value)
        assert seen == [f"base-{i}" for i in range(1, 9)]

    def test_baseline_gap_filled_first(self, engine):
        state = engine.advance(engine.initialize(), "base-2", "b2-olympiad")
        state = engine.advance(state, "base-3", ["b3-puzzles"])
        assert engine.select_next(state).id == "base-1"

    def test_investigative_answers_open_investigative_deep_dive(self, engine, investigative_state):
        q = engine.select_next(investigative_state)
        assert q.id == "dd-i-1"
        assert engine.catalog.deep_dive_group_of(q.id).id == "investigative"

    def test_only_the_activated_group_is_offered(self, engine, investigative_state):
        state = investigative_state
        groups = set()
        while True:
            q = engine.select_next(state)
            if q.group != QuestionGroup.DEEP_DIVE:
                break
            groups.add(engine.catalog.deep_dive_group_of(q.id).id)
            state = engine.advance(state, q.id, leaning_answer(q))
        assert groups == {"investigative"}

    def test_activation_re_evaluated_after_baseline_change(self, engine, investigative_state):
        # realistic is declared before investigative, so it takes precedence once active
        state = engine.advance(investigative_state, "base-1", "b1-build")
        assert engine.select_next(state).id == "dd-r-1"

    def test_deactivated_group_is_no_longer_offered(self, engine):
        answers = dict(INVESTIGATIVE_BASELINE)
        state = advance_all(engine, engine.initialize(), answers)
        # remove every investigative trigger
        state = engine.advance(state, "base-1", "b1-build")
        state = engine.advance(state, "base-2", "b2-workshop")
        state = engine.advance(state, "base-4", 2)
        state = engine.advance(state, "base-8", "b8-tech")
        while True:
            q = engine.select_next(state)
            if q.group != QuestionGroup.DEEP_DIVE:
                break
            assert engine.catalog.deep_dive_group_of(q.id).id == "realistic"
            state = engine.advance(state, q.id, leaning_answer(q, Dimension.REALISTIC))

    def test_round_robin_across_optional_groups(self, engine, investigative_state):
        state = investigative_state
        for qid in ("dd-i-1", "dd-i-2", "dd-i-3"):
            state = engine.advance(state, qid, leaning_answer(engine.catalog.get(qid)))
        order = []
        while (q := engine.select_next(state)) is not None:
            order.append(q.id)
            state = engine.advance(state, q.id, leaning_answer(q))
        assert order == [
            "12-acad-1", "val-1", "12-skill-1", "ls-1",
            "12-acad-2", "val-2", "12-skill-2", "ls-2",
        ]

    def test_round_robin_prefers_least_answered_group(self, engine, investigative_state):
        state = investigative_state
        for qid in ("dd-i-1", "dd-i-2", "dd-i-3"):
            state = engine.advance(state, qid, leaning_answer(engine.catalog.get(qid)))
        # answer both values questions out of turn
        state = engine.advance(state, "val-2", "v2-mastery")
        state = engine.advance(state, "val-1", leaning_answer(engine.catalog.get("val-1")))
        assert engine.select_next(state).id == "12-acad-1"
        state = engine.advance(state, "12-acad-1", {"Mathematics": 9})
        assert engine.select_next(state).id == "12-skill-1"

    def test_selection_is_not_cached(self, engine, investigative_state):
        assert engine.select_next(investigative_state).id == engine.select_next(investigative_state).id


class TestAdvance:
    def test_appends_entry_with_deltas(self, engine):
        state = engine.advance(engine.initialize(), "base-1", "b1-experiment")
        assert state.count == 1
        entry = state.log[0]
        assert entry.question_id == "base-1"
        assert entry.answer == ScenarioAnswer(scenario_id="b1-experiment")
        assert entry.deltas == ScoreVector(investigative=10.0)

    def test_returns_new_state(self, engine):
        before = engine.initialize()
        after = engine.advance(before, "base-1", "b1-experiment")
        assert before.count == 0
        assert after is not before

    def test_accepts_typed_answer(self, engine):
        state = engine.advance(engine.initialize(), "base-1", ScenarioAnswer(scenario_id="b1-create"))
        assert state.answer_for("base-1").scenario_id == "b1-create"

    def test_replaces_existing_answer_and_moves_it_last(self, engine):
        state = engine.advance(engine.initialize(), "base-1", "b1-experiment")
        state = engine.advance(state, "base-2", "b2-olympiad")
        state = engine.advance(state, "base-1", "b1-create")
        assert state.count == 2
        assert [e.question_id for e in state.log] == ["base-2", "base-1"]
        assert state.answer_for("base-1").scenario_id == "b1-create"
        assert engine.scores(state).artistic == 10.0

    def test_no_consecutive_duplicate_ids(self, engine):
        state = engine.initialize()
        for value in ("b1-build", "b1-create", "b1-create", "b1-stall"):
            state = engine.advance(state, "base-1", value)
        ids = [e.question_id for e in state.log]
        assert ids == ["base-1"]

    def test_unknown_question(self, engine):
        with pytest.raises(UnknownQuestion):
            engine.advance(engine.initialize(), "base-99", "x")

    def test_wrong_shape(self, engine):
        state = engine.initialize()
        with pytest.raises(InvalidAnswerShape):
            engine.advance(state, "base-4", "very")
        with pytest.raises(InvalidAnswerShape):
            engine.advance(state, "base-1", ["b1-build"])

    def test_invalid_answer_leaves_state_usable(self, engine):
        state = engine.advance(engine.initialize(), "base-1", "b1-build")
        with pytest.raises(InvalidAnswerShape):
            engine.advance(state, "base-2", "nope")
        assert state.count == 1
        assert engine.select_next(state).id == "base-2"


class TestRevert:
    def test_empty_log_is_unchanged(self, engine):
        state = engine.initialize()
        new_state, removed = engine.revert(state)
        assert new_state is state
        assert removed is None

    def test_removes_last_entry(self, engine, investigative_state):
        new_state, removed = engine.revert(investigative_state)
        assert removed.question_id == "base-8"
        assert new_state.count == investigative_state.count - 1
        assert engine.select_next(new_state).id == "base-8"

    def test_undo_is_inverse_of_advance(self, engine, investigative_state):
        state = investigative_state
        while (q := engine.select_next(state)) is not None:
            before = engine.scores(state)
            after, _ = engine.revert(engine.advance(state, q.id, leaning_answer(q, Dimension.SOCIAL)))
            assert engine.scores(after) == before
            state = engine.advance(state, q.id, leaning_answer(q))

    def test_undo_after_replace_drops_the_question(self, engine):
        state = engine.advance(engine.initialize(), "base-1", "b1-build")
        state = engine.advance(state, "base-2", "b2-drama")
        state = engine.advance(state, "base-1", "b1-create")
        state, removed = engine.revert(state)
        assert removed.question_id == "base-1"
        assert state.answered_ids == frozenset({"base-2"})


class TestCompletion:
    def test_flow_ends_by_exhaustion(self, engine, investigative_state):
        state = run_to_completion(engine, investigative_state)
        assert state.count == 19
        assert engine.select_next(state) is None
        assert engine.is_complete(state)
        assert engine.status(state) == SessionStatus.COMPLETE

    def test_cap_stops_selection_with_questions_left(self, engine):
        answers = dict(INVESTIGATIVE_BASELINE)
        answers["base-5"] = 9       # realistic deep dive too
        state = advance_all(engine, engine.initialize(), answers)
        state = run_to_completion(engine, state)
        assert state.count == 20
        assert engine.select_next(state) is None
        assert any(q.id not in state.answered_ids for q in engine.catalog)

    def test_count_never_exceeds_cap(self, catalog12):
        engine = AdaptiveQuizEngine(catalog12, QuizConfig(max_questions=10))
        state = run_to_completion(engine, engine.initialize())
        assert state.count == 10
        pending = next(q for q in catalog12 if q.id not in state.answered_ids)
        with pytest.raises(SessionComplete):
            engine.advance(state, pending.id, leaning_answer(pending))

    def test_replacing_an_answer_at_the_cap_is_allowed(self, catalog12):
        engine = AdaptiveQuizEngine(catalog12, QuizConfig(max_questions=8))
        state = advance_all(engine, engine.initialize(), INVESTIGATIVE_BASELINE)
        assert engine.is_complete(state)
        state = engine.advance(state, "base-1", "b1-create")
        assert state.count == 8

    def test_in_progress_status(self, engine, investigative_state):
        assert engine.status(investigative_state) == SessionStatus.IN_PROGRESS

    @pytest.mark.parametrize("count,expected", [(0, 0.0), (5, 50.0), (10, 100.0), (15, 100.0)])
    def test_progress(self, engine, count, expected):
        state = engine.initialize()
        for q in list(engine.catalog)[:count]:
            state = engine.advance(state, q.id, leaning_answer(q))
        assert engine.progress(state) == expected


class TestResume:
    def test_flatten_is_json_strings(self, engine, investigative_state):
        flat = engine.flatten(investigative_state)
        assert set(flat) == set(INVESTIGATIVE_BASELINE)
        assert flat["base-4"] == "9"
        assert json.loads(flat["base-7"])[0] == "b7-discover"

    def test_resume_equivalence(self, engine, investigative_state):
        state = run_to_completion(engine, investigative_state)
        resumed = engine.resume(engine.flatten(state))
        assert engine.scores(resumed) == engine.scores(state)
        assert resumed.answers == state.answers

    def test_resume_independent_of_key_order(self, engine, investigative_state):
        state = run_to_completion(engine, investigative_state)
        items = list(engine.flatten(state).items())
        expected = engine.resume(dict(items))
        rng = random.Random(42)
        for _ in range(5):
            rng.shuffle(items)
            resumed = engine.resume(dict(items))
            assert resumed.log == expected.log
            assert engine.scores(resumed) == engine.scores(state)

    def test_resume_replays_in_catalog_order(self, engine):
        saved = {"val-1": '["v1-challenge", "v1-salary", "v1-security", "v1-society", "v1-freedom", "v1-handson"]',
                 "base-2": '"b2-drama"', "base-1": '"b1-create"'}
        state = engine.resume(saved)
        assert [e.question_id for e in state.log] == ["base-1", "base-2", "val-1"]

    def test_resume_then_continue(self, engine, investigative_state):
        resumed = engine.resume(engine.flatten(investigative_state))
        assert engine.select_next(resumed).id == "dd-i-1"

    def test_resume_accepts_raw_values(self, engine):
        state = engine.resume({"base-1": "b1-experiment", "base-4": 8, "base-3": ["b3-coding"]})
        assert state.count == 3

    def test_corrupt_entries_are_dropped(self, engine):
        saved = engine.flatten(advance_all(engine, engine.initialize(), INVESTIGATIVE_BASELINE))
        saved["base-4"] = '"loads"'
        saved["base-2"] = '"b2-deleted"'
        report = engine.resume_with_report(saved)
        assert report.state.count == 6
        assert sorted(e.question_id for e in report.skipped) == ["base-2", "base-4"]
        assert not report.clean
        assert engine.select_next(report.state).id == "base-2"

    def test_strict_resume_raises(self, engine):
        with pytest.raises(CorruptSession) as exc:
            engine.resume({"base-1": '"b1-build"', "base-4": "[1, 2]"}, strict=True)
        assert exc.value.question_id == "base-4"

    def test_unknown_ids_ignored(self, engine):
        report = engine.resume_with_report({"base-1": '"b1-build"', "legacy-q": '"x"'})
        assert report.unknown == ["legacy-q"]
        assert report.state.count == 1
        assert report.skipped == []

    def test_resume_stops_at_cap(self, catalog12):
        full = AdaptiveQuizEngine(catalog12, QuizConfig())
        saved = full.flatten(run_to_completion(full, full.initialize()))
        capped = AdaptiveQuizEngine(catalog12, QuizConfig(max_questions=5))
        report = capped.resume_with_report(saved)
        assert report.state.count == 5
        assert [e.question_id for e in report.state.log] == [f"base-{i}" for i in range(1, 6)]
        assert len(report.truncated) == len(saved) - 5

    def test_empty_map_is_fresh(self, engine):
        assert engine.resume({}) == SessionState()
