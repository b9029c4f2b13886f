"""
career_quiz — Adaptive Career Interest Quiz & Course Matcher
============================================================
Package containing the question catalog, the adaptive session engine, the
RIASEC score aggregator and the deterministic course matcher used by the
student-guidance product.

Module map
----------
  models.py          Enums, the closed Answer union, Question / Course /
                     StudentProfile / Recommendation models, ScoreVector.
  errors.py          QuizError taxonomy (UnknownQuestion, InvalidAnswerShape,
                     CorruptSession, ConfigurationError, SessionComplete).
  config.py          Settings loaded from .env (cap, progress target, bonuses).
  answers.py         Answer shape checks, raw-value coercion, persisted-string
                     encode / decode.
  catalog.py         QuestionCatalog: partitioned, validated-at-load bank.
  question_bank.py   Bundled class 10 / class 12 question data + registry.
  scoring.py         Score aggregator + InterestProfile interpretation.
  session.py         AdaptiveQuizEngine: select_next / advance / revert /
                     resume / is_complete over immutable SessionState.
  courses.py         Course catalog data + CourseCatalog loader.
  matcher.py         CourseMatcher: eligibility gate, cosine interest match,
                     stream / marks bonuses, explained ranking.
  __main__.py        Terminal demo host (rich prompts).

Flow
----
  AdaptiveQuizEngine.select_next → host collects answer → advance
  (repeat until is_complete) → aggregate(state) → CourseMatcher.match
"""
__version__ = "0.1.0"
