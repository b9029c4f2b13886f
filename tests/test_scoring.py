"""
Tests for the score aggregator and score interpretation (scoring.py).
"""
import random

import pytest
from factories import INVESTIGATIVE_BASELINE, leaning_answer, run_to_completion

from career_quiz.answers import coerce_answer
from career_quiz.models import (
    Dimension,
    RankingAnswer,
    ScoreVector,
    SkillGridAnswer,
    SliderAnswer,
    Stream,
)
from career_quiz.scoring import aggregate, entry_contribution, interpret_scores, normalise


def _typed(catalog, answers: dict) -> list:
    return [(qid, coerce_answer(catalog.get(qid), v)) for qid, v in answers.items()]


class TestEntryContribution:
    def test_scenario_uses_option_weights(self, catalog12):
        q = catalog12.get("base-1")
        v = entry_contribution(q, coerce_answer(q, "b1-experiment"))
        assert v == ScoreVector(investigative=10.0)

    def test_multi_select_sums_options(self, catalog12):
        q = catalog12.get("base-3")
        v = entry_contribution(q, coerce_answer(q, ["b3-puzzles", "b3-coding"]))
        assert v.investigative == 9.0
        assert v.realistic == 2.0

    def test_slider_scales_weight(self, catalog12):
        q = catalog12.get("base-4")
        assert entry_contribution(q, SliderAnswer(value=10)).investigative == 15.0
        assert entry_contribution(q, SliderAnswer(value=7)).investigative == pytest.approx(10.5)
        assert entry_contribution(q, SliderAnswer(value=1)).investigative == pytest.approx(1.5)

    def test_skill_grid_adds_rating_to_skill_dimension(self, catalog12):
        q = catalog12.get("12-acad-1")
        v = entry_contribution(q, SkillGridAnswer(ratings={"Mathematics": 8, "Physics": 5}))
        assert v.investigative == 8.0
        assert v.realistic == 5.0
        assert v.artistic == 0.0

    def test_ranking_descending_scale(self, catalog12):
        q = catalog12.get("base-7")
        v = entry_contribution(q, RankingAnswer(order=("b7-help", "b7-create", "b7-discover", "b7-order")))
        assert v.social == 8.0
        assert v.artistic == 6.0
        assert v.investigative == 4.0
        assert v.conventional == 2.0

    def test_unweighted_option_contributes_nothing(self, catalog12):
        q = catalog12.get("12-acad-2")
        assert entry_contribution(q, coerce_answer(q, "ac12-90")) == ScoreVector.zero()


class TestAggregate:
    def test_empty_log_is_zero(self, catalog12):
        assert aggregate([], catalog12) == ScoreVector.zero()

    def test_sums_entries(self, catalog12):
        pairs = _typed(catalog12, {"base-1": "b1-experiment", "base-2": "b2-olympiad"})
        v = aggregate(pairs, catalog12)
        assert v.investigative == 20.0
        assert v.conventional == 3.0

    def test_accepts_mapping_and_state(self, engine, investigative_state):
        from_state = aggregate(investigative_state, engine.catalog)
        from_map = aggregate(investigative_state.answers, engine.catalog)
        from_log = aggregate(investigative_state.log, engine.catalog)
        assert from_state == from_map == from_log

    def test_flattened_map_matches_engine_scores(self, engine):
        state = run_to_completion(engine, engine.initialize())
        assert aggregate(engine.flatten(state), engine.catalog) == engine.scores(state)

    def test_raw_values_decoded(self, catalog12):
        raw = {"base-1": "b1-experiment", "base-2": '"b2-olympiad"'}
        expected = aggregate(_typed(catalog12, {"base-1": "b1-experiment", "base-2": "b2-olympiad"}), catalog12)
        assert aggregate(raw, catalog12) == expected
        assert aggregate(list(raw.items()), catalog12) == expected

    def test_corrupt_raw_value_skipped(self, catalog12):
        raw = {"base-1": "b1-experiment", "base-2": "b2-olympiad", "base-4": "bad", "base-3": "{not json"}
        v = aggregate(raw, catalog12)
        assert v.investigative == 20.0
        assert v.conventional == 3.0

    def test_deterministic(self, engine, investigative_state):
        first = aggregate(investigative_state, engine.catalog)
        second = aggregate(investigative_state, engine.catalog)
        assert first.as_dict() == second.as_dict()

    def test_independent_of_entry_order(self, engine):
        state = run_to_completion(engine, engine.initialize())
        pairs = list(state.answers.items())
        expected = aggregate(pairs, engine.catalog)
        rng = random.Random(7)
        for _ in range(5):
            rng.shuffle(pairs)
            assert aggregate(pairs, engine.catalog) == expected

    def test_unknown_question_skipped(self, catalog12):
        pairs = _typed(catalog12, {"base-1": "b1-create"})
        pairs.append(("retired-question", SliderAnswer(value=9)))
        assert aggregate(pairs, catalog12) == ScoreVector(artistic=10.0)

    def test_stale_answer_shape_skipped(self, catalog12):
        pairs = [("base-1", SliderAnswer(value=9))]
        assert aggregate(pairs, catalog12) == ScoreVector.zero()

    def test_all_dimensions_non_negative(self, engine):
        for lean in Dimension:
            state = run_to_completion(engine, engine.initialize(), lean)
            assert all(v >= 0 for _, v in engine.scores(state).items())

    def test_adding_an_answer_never_lowers_targeted_dimensions(self, engine):
        catalog = engine.catalog
        base = _typed(catalog, INVESTIGATIVE_BASELINE)
        without = aggregate(base, catalog)
        for q in catalog:
            if q.id in INVESTIGATIVE_BASELINE:
                continue
            answer = coerce_answer(q, leaning_answer(q, Dimension.ARTISTIC))
            with_it = aggregate(base + [(q.id, answer)], catalog)
            delta = entry_contribution(q, answer)
            for dim, value in delta.items():
                assert value >= 0
                assert with_it.get(dim) >= without.get(dim), f"{q.id} lowered {dim.value}"


class TestInterpretScores:
    def test_normalise_against_max(self):
        scores = normalise(ScoreVector(investigative=20, realistic=10, artistic=5))
        assert scores == {"R": 50, "I": 100, "A": 25, "S": 0, "E": 0, "C": 0}

    def test_normalise_zero_vector(self):
        assert set(normalise(ScoreVector.zero()).values()) == {0}

    def test_top_types_and_confidence(self):
        profile = interpret_scores(ScoreVector(investigative=20, realistic=10))
        assert profile.top_types == ["I", "R", "A"]
        assert profile.holland_code == "IRA"
        assert profile.confidence == "High"
        assert profile.suggested_stream == Stream.SCIENCE
        assert "Medical Researcher" in profile.career_matches

    @pytest.mark.parametrize("second,label", [(85, "Medium"), (95, "Low"), (50, "High")])
    def test_confidence_from_gap(self, second, label):
        profile = interpret_scores(ScoreVector(enterprising=100, conventional=second))
        assert profile.confidence == label
        assert profile.suggested_stream == Stream.COMMERCE

    def test_arts_stream(self):
        profile = interpret_scores(ScoreVector(social=30, artistic=20))
        assert profile.suggested_stream == Stream.ARTS
        assert profile.career_matches[0] == "Social Worker"

    def test_vocational_when_realistic_dominates(self):
        profile = interpret_scores(ScoreVector(realistic=100, investigative=40))
        assert profile.suggested_stream == Stream.VOCATIONAL

    def test_unknown_pair_falls_back(self):
        # neither R-S nor S-R is listed
        profile = interpret_scores(ScoreVector(realistic=10, social=9))
        assert profile.career_matches == ["Career Counselor Recommended"]

    def test_reversed_pair_used_when_direct_missing(self):
        # C-R is not listed, R-C is
        profile = interpret_scores(ScoreVector(conventional=10, realistic=9))
        assert profile.career_matches[0] == "Electrician"

    def test_ties_broken_alphabetically(self):
        profile = interpret_scores(ScoreVector(social=5, artistic=5))
        assert profile.top_types[:2] == ["A", "S"]
