"""
config.py — Central settings for the career quiz engine
========================================================
All configuration is loaded from environment variables / .env file.
Copy .env.example → .env to override the defaults.

The engine itself never reads the environment: hosts call get_settings()
once and hand the resulting objects to AdaptiveQuizEngine / CourseMatcher.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env into os.environ (no-op if already set, safe to call multiple times)
load_dotenv(override=False)


# ─── Quiz session ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class QuizConfig:
    max_questions:    int = 20   # hard cap on answered questions per session
    progress_target:  int = 10   # answered count shown as 100 % progress

    @property
    def is_valid(self) -> bool:
        return self.max_questions > 0 and self.progress_target > 0


# ─── Recommendation matcher ──────────────────────────────────────────────────

@dataclass(frozen=True)
class MatcherConfig:
    interest_weight:  float = 80.0   # points awarded for a perfect cosine match
    stream_bonus:     float = 15.0   # declared stream == course stream
    marks_bonus:      float = 5.0    # marks ≥ course minimum marks
    top_n:            int   = 0      # 0 = show every eligible course

    @property
    def max_score(self) -> float:
        return self.interest_weight + self.stream_bonus + self.marks_bonus


# ─── App-level settings ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class AppConfig:
    log_level:        str = "WARNING"
    default_class:    str = "12"


# ─── Master settings object ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    quiz:     QuizConfig
    matcher:  MatcherConfig
    app:      AppConfig

    def status_summary(self) -> dict[str, str]:
        """Return a dict of setting → display value for the demo host."""
        return {
            "Question cap":      str(self.quiz.max_questions),
            "Progress target":   str(self.quiz.progress_target),
            "Interest weight":   f"{self.matcher.interest_weight:g}",
            "Stream bonus":      f"{self.matcher.stream_bonus:g}",
            "Marks bonus":       f"{self.matcher.marks_bonus:g}",
            "Default class":     self.app.default_class,
        }


def get_settings() -> Settings:
    """Load all configuration from environment variables."""
    _str   = lambda k, d="": os.getenv(k, d).strip()
    _int   = lambda k, d=0: int(os.getenv(k, str(d)) or d)
    _float = lambda k, d=0.0: float(os.getenv(k, str(d)) or d)

    return Settings(
        quiz=QuizConfig(
            max_questions   = _int("QUIZ_MAX_QUESTIONS", 20),
            progress_target = _int("QUIZ_PROGRESS_TARGET", 10),
        ),
        matcher=MatcherConfig(
            interest_weight = _float("MATCH_INTEREST_WEIGHT", 80.0),
            stream_bonus    = _float("MATCH_STREAM_BONUS", 15.0),
            marks_bonus     = _float("MATCH_MARKS_BONUS", 5.0),
            top_n           = _int("MATCH_TOP_N", 0),
        ),
        app=AppConfig(
            log_level     = _str("CAREER_QUIZ_LOG_LEVEL", "WARNING").upper(),
            default_class = _str("CAREER_QUIZ_DEFAULT_CLASS", "12"),
        ),
    )
