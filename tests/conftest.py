"""
Shared pytest fixtures for the career_quiz test suite.
Factory helpers live in tests/factories.py so they can be imported
directly by test modules as well as being used here.
"""
import sys
import os

_tests_dir = os.path.dirname(__file__)
_src_dir   = os.path.join(_tests_dir, "..", "src")
for _p in (_tests_dir, _src_dir):
    if _p not in sys.path:
        sys.path.insert(0, _p)

import pytest

from factories import INVESTIGATIVE_BASELINE, advance_all

from career_quiz.config import MatcherConfig, QuizConfig
from career_quiz.courses import default_course_catalog
from career_quiz.matcher import CourseMatcher
from career_quiz.question_bank import get_question_catalog
from career_quiz.session import AdaptiveQuizEngine

# config.py has loaded .env by now; pin settings back to their defaults
for _var in (
    "QUIZ_MAX_QUESTIONS", "QUIZ_PROGRESS_TARGET",
    "MATCH_INTEREST_WEIGHT", "MATCH_STREAM_BONUS", "MATCH_MARKS_BONUS", "MATCH_TOP_N",
    "CAREER_QUIZ_LOG_LEVEL", "CAREER_QUIZ_DEFAULT_CLASS",
):
    os.environ.pop(_var, None)


# ─── pytest fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def catalog12():
    return get_question_catalog("12")


@pytest.fixture
def catalog10():
    return get_question_catalog("10")


@pytest.fixture
def engine(catalog12):
    return AdaptiveQuizEngine(catalog12, QuizConfig())


@pytest.fixture
def investigative_state(engine):
    return advance_all(engine, engine.initialize(), INVESTIGATIVE_BASELINE)


@pytest.fixture
def matcher():
    return CourseMatcher(MatcherConfig())


@pytest.fixture
def courses():
    return default_course_catalog()
