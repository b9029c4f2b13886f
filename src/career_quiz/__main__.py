"""
__main__.py — Terminal demo host
=================================
Runs one adaptive quiz in the terminal and prints the score profile and
ranked course matches.

Run:
    python -m career_quiz                     # class 12 by default
    python -m career_quiz --class 10
    python -m career_quiz --answers me.json   # resume from / save to a JSON answer map

Type "undo" at any question prompt to take back the previous answer.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from career_quiz.config import Settings, get_settings
from career_quiz.courses import default_course_catalog
from career_quiz.errors import InvalidAnswerShape, QuizError
from career_quiz.matcher import CourseMatcher
from career_quiz.models import Question, QuestionKind, StudentProfile
from career_quiz.question_bank import get_question_catalog
from career_quiz.scoring import interpret_scores
from career_quiz.session import AdaptiveQuizEngine, SessionState

console = Console()
logger = logging.getLogger("career_quiz")

UNDO = "undo"

CONFIDENCE_STYLE = {
    "high":   "bold green",
    "medium": "bold cyan",
    "low":    "bold yellow",
}


# ─── Prompting ───────────────────────────────────────────────────────────────

def _pick(question: Question, text: str) -> list[str]:
    """'2, 1,3' → option ids by 1-based position; unparseable tokens are passed through."""
    ids = []
    for token in (t.strip() for t in text.split(",")):
        if not token:
            continue
        if token.isdigit() and 1 <= int(token) <= len(question.options):
            ids.append(question.options[int(token) - 1].id)
        else:
            ids.append(token)
    return ids


def _show_options(question: Question) -> None:
    for i, opt in enumerate(question.options, start=1):
        line = f"  [cyan]{i}.[/cyan] {opt.text}"
        if opt.description:
            line += f" [dim]— {opt.description}[/dim]"
        console.print(line)


def ask(question: Question) -> Any:
    """Collect one raw answer for *question*, or UNDO."""
    kind = question.kind

    if kind in (QuestionKind.SINGLE_CHOICE, QuestionKind.SCENARIO):
        _show_options(question)
        text = Prompt.ask("   Your choice (number)")
        if text.strip().lower() == UNDO:
            return UNDO
        picked = _pick(question, text)
        return picked[0] if len(picked) == 1 else text

    if kind == QuestionKind.MULTI_SELECT:
        _show_options(question)
        limit = f", up to {question.max_selections}" if question.max_selections else ""
        text = Prompt.ask(f"   Your choices (numbers, comma separated{limit})")
        return UNDO if text.strip().lower() == UNDO else _pick(question, text)

    if kind == QuestionKind.RANKING:
        _show_options(question)
        text = Prompt.ask("   Rank every option, best first (e.g. 2,1,3)")
        return UNDO if text.strip().lower() == UNDO else _pick(question, text)

    if kind == QuestionKind.SLIDER:
        text = Prompt.ask(f"   1 = {question.min_label or 'low'} … 10 = {question.max_label or 'high'}")
        if text.strip().lower() == UNDO:
            return UNDO
        return int(text) if text.strip().isdigit() else text

    # skill grid: one rating per row
    ratings: dict[str, int] = {}
    for skill in question.skills:
        ratings[skill.name] = IntPrompt.ask(f"   {skill.name} (0–10)", default=5)
    return ratings


# ─── Quiz loop ───────────────────────────────────────────────────────────────

def run_quiz(engine: AdaptiveQuizEngine, state: SessionState, answers_path: Optional[Path]) -> SessionState:
    while not engine.is_complete(state):
        question = engine.select_next(state)
        console.print()
        console.print(
            f"[dim]{state.count + 1}/{engine.max_questions} · "
            f"{engine.progress(state):.0f}% · {question.group.value.replace('_', ' ')}[/dim]"
        )
        console.print(f"[bold]{question.text}[/bold]")

        raw = ask(question)
        if raw == UNDO:
            state, removed = engine.revert(state)
            if removed is None:
                console.print("[yellow]Nothing to undo.[/yellow]")
            else:
                console.print(f"[yellow]Took back your answer to '{removed.question_id}'.[/yellow]")
        else:
            try:
                state = engine.advance(state, question.id, raw)
            except InvalidAnswerShape as exc:
                console.print(f"[red]{exc.reason}[/red], please try again.")
                continue

        if answers_path is not None:
            answers_path.write_text(json.dumps(engine.flatten(state), indent=2), encoding="utf-8")

    console.print()
    console.print(f"[bold green]✓ Quiz complete.[/bold green] {state.count} questions answered.")
    return state


def load_saved(engine: AdaptiveQuizEngine, answers_path: Path) -> SessionState:
    if not answers_path.exists():
        return engine.initialize()
    saved = json.loads(answers_path.read_text(encoding="utf-8"))
    report = engine.resume_with_report(saved)
    console.print(f"[dim]Resumed {report.state.count} saved answers from {answers_path}.[/dim]")
    for exc in report.skipped:
        console.print(f"[yellow]Dropped saved answer:[/yellow] {exc}")
    return report.state


def ask_profile(class_level: str, name: str) -> StudentProfile:
    stream = Prompt.ask(
        "Stream you are in or leaning towards",
        choices=["science", "commerce", "arts", "vocational", "none"],
        default="none",
    )
    marks: Optional[float] = None
    while True:
        text = Prompt.ask("Latest aggregate marks % (blank to skip)", default="")
        if not text.strip():
            break
        try:
            marks = float(text)
        except ValueError:
            console.print("[red]Enter a number between 0 and 100.[/red]")
            continue
        if 0 <= marks <= 100:
            break
        console.print("[red]Enter a number between 0 and 100.[/red]")
    return StudentProfile(
        student_name=name,
        class_level=class_level,
        stream=None if stream == "none" else stream,
        marks=marks,
    )


# ─── Output ──────────────────────────────────────────────────────────────────

def show_results(engine: AdaptiveQuizEngine, state: SessionState, profile: StudentProfile, settings: Settings) -> None:
    scores = engine.scores(state)
    reading = interpret_scores(scores)

    console.rule("[bold magenta]Your interest profile[/bold magenta]")
    table = Table(box=box.ROUNDED)
    table.add_column("Dimension", style="bold cyan")
    table.add_column("Raw", justify="right")
    table.add_column("Scaled", justify="right")
    for dim, value in scores.items():
        table.add_row(dim.value.title(), f"{value:.1f}", str(reading.scores[dim.code]))
    console.print(table)
    console.print(
        f"Holland code [bold]{reading.holland_code}[/bold] · suggested stream "
        f"[bold]{reading.suggested_stream.label}[/bold] · confidence {reading.confidence}"
    )
    console.print(f"Careers to explore: {', '.join(reading.career_matches)}")

    recs = CourseMatcher(settings.matcher).match(scores, profile, default_course_catalog())
    if settings.matcher.top_n > 0:
        recs = recs[: settings.matcher.top_n]

    console.rule("[bold magenta]Recommended courses[/bold magenta]")
    table = Table(box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Course", style="bold")
    table.add_column("Stream")
    table.add_column("Match", justify="right")
    table.add_column("Why")
    for rec in recs:
        style = CONFIDENCE_STYLE.get(rec.confidence, "white")
        table.add_row(
            str(rec.rank),
            rec.course_name,
            rec.stream.label,
            f"[{style}]{rec.match_score:.0f}[/{style}]",
            "\n".join(rec.justifications),
        )
    console.print(table)


# ─── Entry point ─────────────────────────────────────────────────────────────

def main(argv: Optional[list[str]] = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(prog="career_quiz", description="Adaptive career interest quiz")
    parser.add_argument("--class", dest="class_level", choices=["10", "12"], default=settings.app.default_class)
    parser.add_argument("--answers", type=Path, help="JSON answer map to resume from and save to")
    parser.add_argument("--name", default="")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.app.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    console.print(Panel(
        "[bold magenta]Career Interest Quiz[/bold magenta]",
        subtitle=f"Class {args.class_level} · type 'undo' to go back",
        expand=False,
    ))

    try:
        engine = AdaptiveQuizEngine(get_question_catalog(args.class_level), settings.quiz)
        state = load_saved(engine, args.answers) if args.answers else engine.initialize()
        state = run_quiz(engine, state, args.answers)
        profile = ask_profile(args.class_level, args.name)
        show_results(engine, state, profile, settings)
    except QuizError as exc:
        logger.error("Could not process your answers: %s", exc)
        return 1
    except KeyboardInterrupt:
        console.print("\n[dim]Quiz abandoned.[/dim]")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
