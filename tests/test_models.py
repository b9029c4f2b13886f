"""
Tests for the shared models: the Answer union, activation rules and ScoreVector.
"""
import pytest
from pydantic import TypeAdapter, ValidationError

from career_quiz.models import (
    ActivationRule,
    Answer,
    Dimension,
    MultiSelectAnswer,
    RankingAnswer,
    Recommendation,
    ScenarioAnswer,
    ScoreVector,
    SingleChoiceAnswer,
    SkillGridAnswer,
    SliderAnswer,
    Stream,
    StudentProfile,
)


class TestDimension:
    def test_codes(self):
        assert [d.code for d in Dimension] == ["R", "I", "A", "S", "E", "C"]

    def test_from_code_round_trip(self):
        for d in Dimension:
            assert Dimension.from_code(d.code) is d

    def test_from_code_lower_case(self):
        assert Dimension.from_code("i") is Dimension.INVESTIGATIVE

    def test_unknown_code(self):
        with pytest.raises(ValueError):
            Dimension.from_code("Z")


class TestAnswerUnion:
    adapter = TypeAdapter(Answer)

    @pytest.mark.parametrize("data,cls", [
        ({"kind": "single_choice", "option_id": "a"}, SingleChoiceAnswer),
        ({"kind": "multi_select", "option_ids": ["a", "b"]}, MultiSelectAnswer),
        ({"kind": "scenario", "scenario_id": "s"}, ScenarioAnswer),
        ({"kind": "slider", "value": 4}, SliderAnswer),
        ({"kind": "skill_grid", "ratings": {"Maths": 7}}, SkillGridAnswer),
        ({"kind": "ranking", "order": ["a", "b"]}, RankingAnswer),
    ])
    def test_discriminates_on_kind(self, data, cls):
        assert isinstance(self.adapter.validate_python(data), cls)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            self.adapter.validate_python({"kind": "essay", "text": "hi"})

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            SliderAnswer(value=5, option_id="a")

    @pytest.mark.parametrize("value", [0, 11, "5", 5.5])
    def test_slider_bounds_and_type(self, value):
        with pytest.raises(ValidationError):
            SliderAnswer(value=value)

    def test_skill_rating_bounds(self):
        SkillGridAnswer(ratings={"Maths": 0})
        SkillGridAnswer(ratings={"Maths": 10})
        with pytest.raises(ValidationError):
            SkillGridAnswer(ratings={"Maths": 11})

    def test_answers_are_frozen(self):
        answer = SliderAnswer(value=3)
        with pytest.raises(ValidationError):
            answer.value = 4


class TestActivationRule:
    def test_choice_membership(self):
        rule = ActivationRule(question_id="q", any_of=("a", "b"))
        assert rule.matches(SingleChoiceAnswer(option_id="b"))
        assert not rule.matches(SingleChoiceAnswer(option_id="c"))
        assert rule.matches(ScenarioAnswer(scenario_id="a"))

    def test_multi_select_any_overlap(self):
        rule = ActivationRule(question_id="q", any_of=("a",))
        assert rule.matches(MultiSelectAnswer(option_ids=("c", "a")))
        assert not rule.matches(MultiSelectAnswer(option_ids=("c",)))

    def test_ranking_uses_first_place_only(self):
        rule = ActivationRule(question_id="q", any_of=("a",))
        assert rule.matches(RankingAnswer(order=("a", "b")))
        assert not rule.matches(RankingAnswer(order=("b", "a")))

    def test_slider_threshold(self):
        rule = ActivationRule(question_id="q", min_value=7)
        assert rule.matches(SliderAnswer(value=7))
        assert not rule.matches(SliderAnswer(value=6))

    def test_slider_without_threshold_never_matches(self):
        assert not ActivationRule(question_id="q").matches(SliderAnswer(value=10))


class TestScoreVector:
    def test_zero(self):
        v = ScoreVector.zero()
        assert v.total() == 0.0
        assert v.magnitude() == 0.0

    def test_from_mapping_accepts_names_and_enums(self):
        v = ScoreVector.from_mapping({"artistic": 2, Dimension.SOCIAL: 3})
        assert v.artistic == 2.0
        assert v.social == 3.0

    def test_ranked_ties_keep_canonical_order(self):
        v = ScoreVector(social=5, realistic=5, conventional=1)
        assert v.ranked()[:3] == [Dimension.REALISTIC, Dimension.SOCIAL, Dimension.CONVENTIONAL]

    def test_magnitude(self):
        assert ScoreVector(realistic=3, investigative=4).magnitude() == pytest.approx(5.0)


class TestStudentProfile:
    def test_stream_optional(self):
        p = StudentProfile(class_level="10")
        assert p.stream is None
        assert p.marks is None

    def test_stream_enum(self):
        assert StudentProfile(class_level="12", stream="arts").stream is Stream.ARTS

    def test_marks_range(self):
        with pytest.raises(ValidationError):
            StudentProfile(class_level="12", marks=101)

    def test_unknown_class_level(self):
        with pytest.raises(ValidationError):
            StudentProfile(class_level="11")


class TestRecommendation:
    def _rec(self, **overrides):
        fields = dict(course_id="eng", course_name="Engineering", stream=Stream.SCIENCE,
                      match_score=72.5, justifications=["Matches your investigative interests"])
        fields.update(overrides)
        return Recommendation(**fields)

    def test_confidence_defaults_to_low(self):
        assert self._rec().confidence == "low"

    @pytest.mark.parametrize("label", ["high", "medium", "low"])
    def test_confidence_labels(self, label):
        assert self._rec(confidence=label).confidence == label

    def test_unknown_confidence_rejected(self):
        with pytest.raises(ValidationError):
            self._rec(confidence="certain")
