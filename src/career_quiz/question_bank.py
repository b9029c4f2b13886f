"""
question_bank.py — Bundled question catalogs
=============================================
Two catalogs, one per class level. Both share the 8 baseline questions, the
six RIASEC deep-dive groups, and the values and learning-style questions;
the academic and skills groups are class specific.

Weight conventions
------------------
  Choice options     up to 10 points on the dimension they express,
                     4–5 on a secondary dimension.
  Sliders            `weights` are the points at a rating of 10
                     (baseline sliders: 15 on their primary dimension).
  Ranking options    up to 8 points, scaled by rank position.
  Skill grids        the 0–10 rating itself.

Deep-dive gates
---------------
  Each RIASEC group opens on the baseline choices that express that
  dimension (b1 scenario, b2 activity, b8 fest role, b7 top value) or on a
  strong baseline slider rating (≥ 7).
"""

from __future__ import annotations

from typing import Optional

from career_quiz.catalog import QuestionCatalog
from career_quiz.models import (
    ActivationRule,
    DeepDiveGroup,
    Dimension,
    Option,
    Question,
    QuestionGroup,
    QuestionKind,
    SkillSpec,
)

CATALOG_VERSION = "2025.1"

_K = QuestionKind
_G = QuestionGroup


def _w(**codes: float) -> dict[Dimension, float]:
    """_w(I=10, R=4) → {INVESTIGATIVE: 10.0, REALISTIC: 4.0}"""
    return {Dimension.from_code(code): float(v) for code, v in codes.items()}


def _q(
    qid: str,
    text: str,
    kind: QuestionKind,
    group: QuestionGroup,
    options: tuple = (),
    *,
    weights: Optional[dict] = None,
    skills: tuple = (),
    min_label: str = "",
    max_label: str = "",
    max_selections: Optional[int] = None,
) -> Question:
    # options: (id, text, weights) or (id, text, description, weights)
    opts = []
    for item in options:
        if len(item) == 4:
            oid, otext, desc, ow = item
        else:
            (oid, otext, ow), desc = item, ""
        opts.append(Option(id=oid, text=otext, description=desc, weights=ow))
    return Question(
        id=qid,
        text=text,
        kind=kind,
        group=group,
        options=tuple(opts),
        skills=tuple(SkillSpec(name=n, dimension=Dimension.from_code(c)) for n, c in skills),
        weights=weights or {},
        min_label=min_label,
        max_label=max_label,
        max_selections=max_selections,
    )


# ─── Baseline (8, shared) ────────────────────────────────────────────────────

_BASELINE: tuple[Question, ...] = (
    _q("base-1", "It's a free Saturday. Which plan sounds best?", _K.SCENARIO, _G.BASELINE, (
        ("b1-build",      "Fix or build something",  "Repair a cycle, assemble a kit, wire a circuit.", _w(R=10)),
        ("b1-experiment", "Run an experiment",       "Test an idea, take something apart to see how it works.", _w(I=10)),
        ("b1-create",     "Make something original", "Draw, write, film or compose.", _w(A=10)),
        ("b1-volunteer",  "Help out somewhere",      "Teach a younger kid, volunteer at a shelter.", _w(S=10)),
        ("b1-stall",      "Start a mini venture",    "Run a stall, sell something, plan a fundraiser.", _w(E=10)),
        ("b1-organise",   "Get things in order",     "Sort a collection, plan the week, tidy accounts.", _w(C=10)),
    )),
    _q("base-2", "Which school activity do you look forward to most?", _K.SINGLE_CHOICE, _G.BASELINE, (
        ("b2-workshop",  "Workshop or practical lab sessions",  _w(R=10, I=3)),
        ("b2-olympiad",  "Science or maths olympiad",           _w(I=10, C=3)),
        ("b2-drama",     "Drama, music or art club",            _w(A=10, S=3)),
        ("b2-tutoring",  "Peer tutoring or buddy programmes",   _w(S=10)),
        ("b2-council",   "Student council or debate",           _w(E=10, S=3)),
        ("b2-treasurer", "Keeping the class records or funds",  _w(C=10, E=3)),
    )),
    _q("base-3", "Which of these could you happily spend hours on? (pick up to 3)", _K.MULTI_SELECT, _G.BASELINE, (
        ("b3-gadgets",   "Tinkering with gadgets or engines",  _w(R=5)),
        ("b3-puzzles",   "Logic puzzles and brain teasers",    _w(I=5)),
        ("b3-coding",    "Coding or building apps",            _w(I=4, R=2)),
        ("b3-sketching", "Sketching, photography or design",   _w(A=5)),
        ("b3-listening", "Listening to friends' problems",     _w(S=5)),
        ("b3-selling",   "Negotiating or selling",             _w(E=5)),
        ("b3-planning",  "Planning budgets or schedules",      _w(C=5)),
    ), max_selections=3),
    _q("base-4", "How much do you enjoy figuring out why things work the way they do?",
       _K.SLIDER, _G.BASELINE, weights=_w(I=15), min_label="Not at all", max_label="Love it"),
    _q("base-5", "How much do you enjoy working with your hands: building, repairing, assembling?",
       _K.SLIDER, _G.BASELINE, weights=_w(R=15), min_label="Not at all", max_label="Love it"),
    _q("base-6", "How comfortable are you leading a group or convincing others?",
       _K.SLIDER, _G.BASELINE, weights=_w(E=15), min_label="Very uneasy", max_label="Very comfortable"),
    _q("base-7", "Rank what matters most to you in future work", _K.RANKING, _G.BASELINE, (
        ("b7-help",     "Helping people directly",       _w(S=8)),
        ("b7-create",   "Creating something original",   _w(A=8)),
        ("b7-discover", "Discovering new knowledge",     _w(I=8)),
        ("b7-order",    "Stability and clear structure", _w(C=8)),
    )),
    _q("base-8", "Your school is organising its annual fest. Which role do you grab?", _K.SCENARIO, _G.BASELINE, (
        ("b8-decor",      "Stage and decor",     "Design the look and feel of the event.", _w(A=10)),
        ("b8-tech",       "Tech and sound",      "Rig the lights, speakers and projector.", _w(R=10)),
        ("b8-budget",     "Budget and tickets",  "Track every rupee and every entry pass.", _w(C=10)),
        ("b8-sponsor",    "Sponsorships",        "Pitch local shops to fund the fest.", _w(E=10)),
        ("b8-volunteers", "Volunteer crew",      "Brief volunteers and look after guests.", _w(S=10)),
        ("b8-quiz",       "Quiz round",          "Research and set the science quiz.", _w(I=10)),
    )),
)


# ─── Deep dives (shared) ─────────────────────────────────────────────────────

def _rule(qid: str, *any_of: str, min_value: Optional[int] = None) -> ActivationRule:
    return ActivationRule(question_id=qid, any_of=tuple(any_of), min_value=min_value)


_DEEP_DIVE: tuple[DeepDiveGroup, ...] = (
    DeepDiveGroup(
        id="realistic",
        title="Hands-on & technical",
        activation=(
            _rule("base-1", "b1-build"),
            _rule("base-2", "b2-workshop"),
            _rule("base-8", "b8-tech"),
            _rule("base-5", min_value=7),
        ),
        questions=(
            _q("dd-r-1", "A machine at home stops working. What do you do first?", _K.SCENARIO, _G.DEEP_DIVE, (
                ("r1-open",   "Open it up",        "Unscrew the panel and look inside.", _w(R=10)),
                ("r1-manual", "Read the manual",   "Look up the fault code and steps.", _w(C=6, I=4)),
                ("r1-call",   "Call a technician", "Find someone who fixes these.", _w(E=3, S=3)),
            )),
            _q("dd-r-2", "How much would you enjoy a job that keeps you outdoors or on a shop floor?",
               _K.SLIDER, _G.DEEP_DIVE, weights=_w(R=10), min_label="Not for me", max_label="Ideal"),
            _q("dd-r-3", "Which project would you pick?", _K.SINGLE_CHOICE, _G.DEEP_DIVE, (
                ("r3-robot",   "Build a line-following robot",      _w(R=8, I=4)),
                ("r3-bridge",  "Design a model bridge and load-test it", _w(R=7, I=3)),
                ("r3-garden",  "Set up a school kitchen garden",    _w(R=6, S=3)),
            )),
        ),
    ),
    DeepDiveGroup(
        id="investigative",
        title="Research & problem solving",
        activation=(
            _rule("base-1", "b1-experiment"),
            _rule("base-2", "b2-olympiad"),
            _rule("base-8", "b8-quiz"),
            _rule("base-4", min_value=7),
        ),
        questions=(
            _q("dd-i-1", "You read a surprising claim online. What do you do?", _K.SCENARIO, _G.DEEP_DIVE, (
                ("i1-verify", "Check the sources",  "Dig into the data behind it.", _w(I=10)),
                ("i1-debate", "Argue about it",     "Bring it up with friends.", _w(E=4, S=3)),
                ("i1-share",  "Make a post on it",  "Turn it into a meme or reel.", _w(A=5)),
            )),
            _q("dd-i-2", "Which of these would you like to understand deeply? (pick up to 2)",
               _K.MULTI_SELECT, _G.DEEP_DIVE, (
                   ("i2-body",    "How the human body fights disease", _w(I=5, S=2)),
                   ("i2-space",   "How stars and planets form",        _w(I=5)),
                   ("i2-ai",      "How computers learn from data",     _w(I=5, C=2)),
                   ("i2-society", "Why societies behave as they do",   _w(I=3, S=3)),
               ), max_selections=2),
            _q("dd-i-3", "How much do you enjoy solving a hard maths or science problem on your own?",
               _K.SLIDER, _G.DEEP_DIVE, weights=_w(I=10), min_label="Dread it", max_label="Thrilled"),
        ),
    ),
    DeepDiveGroup(
        id="artistic",
        title="Creative expression",
        activation=(
            _rule("base-1", "b1-create"),
            _rule("base-2", "b2-drama"),
            _rule("base-8", "b8-decor"),
            _rule("base-7", "b7-create"),
        ),
        questions=(
            _q("dd-a-1", "Which creative medium pulls you in most?", _K.SINGLE_CHOICE, _G.DEEP_DIVE, (
                ("a1-visual",  "Drawing, painting or design",  _w(A=10)),
                ("a1-words",   "Writing stories or poems",     _w(A=9, S=2)),
                ("a1-perform", "Acting, dance or music",       _w(A=9, E=2)),
                ("a1-film",    "Video and photography",        _w(A=8, R=2)),
            )),
            _q("dd-a-2", "How important is it that your work lets you express yourself?",
               _K.SLIDER, _G.DEEP_DIVE, weights=_w(A=10), min_label="Not important", max_label="Essential"),
            _q("dd-a-3", "Rank these creative careers by appeal", _K.RANKING, _G.DEEP_DIVE, (
                ("a3-designer",  "Designer",           _w(A=8)),
                ("a3-writer",    "Writer / journalist", _w(A=6, S=2)),
                ("a3-architect", "Architect",          _w(A=5, R=3)),
            )),
        ),
    ),
    DeepDiveGroup(
        id="social",
        title="Helping & teaching",
        activation=(
            _rule("base-1", "b1-volunteer"),
            _rule("base-2", "b2-tutoring"),
            _rule("base-8", "b8-volunteers"),
            _rule("base-7", "b7-help"),
        ),
        questions=(
            _q("dd-s-1", "A classmate is struggling before exams. What do you do?", _K.SCENARIO, _G.DEEP_DIVE, (
                ("s1-teach",  "Sit and teach them",       "Work through the chapters together.", _w(S=10)),
                ("s1-notes",  "Share organised notes",    "Send them your summary sheets.", _w(C=6, S=3)),
                ("s1-group",  "Start a study group",      "Get a few people together.", _w(E=5, S=5)),
            )),
            _q("dd-s-2", "How much energy do you get from being around people all day?",
               _K.SLIDER, _G.DEEP_DIVE, weights=_w(S=10), min_label="It drains me", max_label="Energised"),
            _q("dd-s-3", "Which role appeals to you most?", _K.SINGLE_CHOICE, _G.DEEP_DIVE, (
                ("s3-doctor",    "Treating patients",          _w(S=8, I=4)),
                ("s3-teacher",   "Teaching a class",           _w(S=10)),
                ("s3-counsel",   "Counselling young people",   _w(S=9, A=2)),
            )),
        ),
    ),
    DeepDiveGroup(
        id="enterprising",
        title="Leading & persuading",
        activation=(
            _rule("base-1", "b1-stall"),
            _rule("base-2", "b2-council"),
            _rule("base-8", "b8-sponsor"),
            _rule("base-6", min_value=7),
        ),
        questions=(
            _q("dd-e-1", "Your team disagrees on a plan. What do you do?", _K.SCENARIO, _G.DEEP_DIVE, (
                ("e1-decide",   "Take the call",          "Weigh it up and decide.", _w(E=10)),
                ("e1-vote",     "Call a vote",            "Let the group decide fairly.", _w(S=5, C=3)),
                ("e1-research", "Gather more facts",      "Find data to settle it.", _w(I=6)),
            )),
            _q("dd-e-2", "How excited would you be to run your own business one day?",
               _K.SLIDER, _G.DEEP_DIVE, weights=_w(E=10), min_label="Not at all", max_label="Very"),
            _q("dd-e-3", "Which of these have you enjoyed? (pick any)", _K.MULTI_SELECT, _G.DEEP_DIVE, (
                ("e3-pitch",    "Pitching an idea to a group",   _w(E=5)),
                ("e3-captain",  "Captaining a team",             _w(E=4, S=2)),
                ("e3-trade",    "Buying and reselling things",   _w(E=5, C=1)),
            )),
        ),
    ),
    DeepDiveGroup(
        id="conventional",
        title="Organising & systems",
        activation=(
            _rule("base-1", "b1-organise"),
            _rule("base-2", "b2-treasurer"),
            _rule("base-8", "b8-budget"),
            _rule("base-7", "b7-order"),
        ),
        questions=(
            _q("dd-c-1", "How satisfying is it to get a spreadsheet or ledger to balance exactly?",
               _K.SLIDER, _G.DEEP_DIVE, weights=_w(C=10), min_label="Boring", max_label="Very satisfying"),
            _q("dd-c-2", "Which task would you volunteer for?", _K.SINGLE_CHOICE, _G.DEEP_DIVE, (
                ("c2-accounts", "Maintaining the club accounts",   _w(C=10, E=2)),
                ("c2-records",  "Digitising the library records",  _w(C=8, R=2)),
                ("c2-timetable","Building the exam timetable",     _w(C=8, I=2)),
            )),
            _q("dd-c-3", "Rank how you prefer instructions", _K.RANKING, _G.DEEP_DIVE, (
                ("c3-steps",    "Clear step-by-step procedure", _w(C=8)),
                ("c3-goal",     "Just the goal, I'll figure it out", _w(I=4, E=2)),
                ("c3-example",  "A worked example to copy",     _w(C=4, R=2)),
            )),
        ),
    ),
)


# ─── Academic (class specific) ───────────────────────────────────────────────

_ACADEMIC_10: tuple[Question, ...] = (
    _q("10-acad-1", "Which subjects do you score best in? (pick up to 3)", _K.MULTI_SELECT, _G.ACADEMIC, (
        ("ac10-maths",    "Mathematics",            _w(I=4, C=2)),
        ("ac10-science",  "Science",                _w(I=4, R=2)),
        ("ac10-english",  "English / Languages",    _w(A=4, S=1)),
        ("ac10-social",   "Social Studies",         _w(S=3, E=2)),
        ("ac10-computer", "Computer Science",       _w(I=3, C=2)),
    ), max_selections=3),
    _q("10-acad-2", "How easy does Mathematics feel to you?", _K.SLIDER, _G.ACADEMIC,
       weights=_w(I=5, C=5), min_label="Very hard", max_label="Very easy"),
)

_ACADEMIC_12: tuple[Question, ...] = (
    _q("12-acad-1", "Rate your confidence in these subjects", _K.SKILL_GRID, _G.ACADEMIC, skills=(
        ("Mathematics", "I"),
        ("Physics", "R"),
        ("Chemistry", "I"),
        ("Biology", "S"),
        ("Economics", "E"),
        ("Accountancy", "C"),
        ("English", "A"),
    )),
    _q("12-acad-2", "Which band was your last exam percentage in?", _K.SINGLE_CHOICE, _G.ACADEMIC, (
        ("ac12-90", "90 % and above", {}),
        ("ac12-75", "75–89 %",        {}),
        ("ac12-60", "60–74 %",        {}),
        ("ac12-lt", "Below 60 %",     {}),
    )),
)


# ─── Values (shared) ─────────────────────────────────────────────────────────

_VALUES: tuple[Question, ...] = (
    _q("val-1", "Rank these by how much they matter in a career", _K.RANKING, _G.VALUES, (
        ("v1-salary",    "High salary",           _w(E=6)),
        ("v1-security",  "Job security",          _w(C=6)),
        ("v1-society",   "Helping society",       _w(S=6)),
        ("v1-freedom",   "Creative freedom",      _w(A=6)),
        ("v1-handson",   "Hands-on, visible results", _w(R=6)),
        ("v1-challenge", "Intellectual challenge", _w(I=6)),
    )),
    _q("val-2", "Which statement sounds most like you?", _K.SINGLE_CHOICE, _G.VALUES, (
        ("v2-impact",  "I want my work to change people's lives",  _w(S=5)),
        ("v2-mastery", "I want to be the expert others come to",   _w(I=5)),
        ("v2-lead",    "I want to lead and build something big",   _w(E=5)),
        ("v2-craft",   "I want to make things that last",          _w(R=3, A=2)),
        ("v2-steady",  "I want a steady, well-organised life",     _w(C=5)),
    )),
)


# ─── Skills (class specific) ─────────────────────────────────────────────────

_SKILLS_10: tuple[Question, ...] = (
    _q("10-skill-1", "Rate yourself on these skills", _K.SKILL_GRID, _G.SKILLS, skills=(
        ("Problem solving", "I"),
        ("Drawing", "A"),
        ("Making friends", "S"),
        ("Using tools", "R"),
        ("Speaking up in class", "E"),
        ("Keeping neat notes", "C"),
    )),
    _q("10-skill-2", "The school computer lab needs a volunteer. Which job do you take?",
       _K.SCENARIO, _G.SKILLS, (
           ("sk10-setup",  "Set up the machines", "Connect cables and install software.", _w(R=6, I=2)),
           ("sk10-teach",  "Teach juniors",       "Show younger students the basics.", _w(S=6)),
           ("sk10-poster", "Design the posters",  "Make the lab rules look good.", _w(A=6)),
       )),
)

_SKILLS_12: tuple[Question, ...] = (
    _q("12-skill-1", "Rate yourself on these skills", _K.SKILL_GRID, _G.SKILLS, skills=(
        ("Problem solving", "I"),
        ("Communication", "S"),
        ("Design & drawing", "A"),
        ("Organising data", "C"),
        ("Public speaking", "E"),
        ("Using tools & machines", "R"),
    )),
    _q("12-skill-2", "Which of these have you actually done? (pick any)", _K.MULTI_SELECT, _G.SKILLS, (
        ("sk12-code",     "Finished a coding project",         _w(I=4, C=1)),
        ("sk12-model",    "Built a working model",             _w(R=4, I=1)),
        ("sk12-magazine", "Wrote for the school magazine",     _w(A=4)),
        ("sk12-event",    "Organised an event",                _w(E=4)),
        ("sk12-tutor",    "Tutored a junior",                  _w(S=4)),
        ("sk12-accounts", "Managed money for a club",          _w(C=4)),
    )),
)


# ─── Learning style (shared) ─────────────────────────────────────────────────

_LEARNING_STYLE: tuple[Question, ...] = (
    _q("ls-1", "How do you learn best?", _K.SINGLE_CHOICE, _G.LEARNING_STYLE, (
        ("ls1-doing",    "By doing it myself",             _w(R=3)),
        ("ls1-reading",  "By reading and researching",     _w(I=3)),
        ("ls1-visuals",  "Through pictures and videos",    _w(A=3)),
        ("ls1-talking",  "By discussing with others",      _w(S=3)),
        ("ls1-notes",    "With structured notes and lists", _w(C=3)),
    )),
    _q("ls-2", "Exams are a week away. What's your plan?", _K.SCENARIO, _G.LEARNING_STYLE, (
        ("ls2-timetable", "Make a timetable",   "Split every chapter across the days.", _w(C=3)),
        ("ls2-practice",  "Practise problems",  "Solve past papers end to end.", _w(I=3)),
        ("ls2-group",     "Study with friends", "Quiz each other every evening.", _w(S=3)),
        ("ls2-mindmap",   "Draw mind maps",     "Turn chapters into colourful maps.", _w(A=3)),
    )),
)


# ─── Registry ────────────────────────────────────────────────────────────────

def _build(class_level: str, academic: tuple, skills: tuple) -> QuestionCatalog:
    return QuestionCatalog(
        version=CATALOG_VERSION,
        class_level=class_level,
        baseline=_BASELINE,
        deep_dive=_DEEP_DIVE,
        academic=academic,
        values=_VALUES,
        skills=skills,
        learning_style=_LEARNING_STYLE,
    )


QUESTION_CATALOG_REGISTRY: dict[str, QuestionCatalog] = {
    "10": _build("10", _ACADEMIC_10, _SKILLS_10),
    "12": _build("12", _ACADEMIC_12, _SKILLS_12),
}

DEFAULT_CLASS_LEVEL = "12"


def get_question_catalog(class_level: Optional[str] = None) -> QuestionCatalog:
    """Return the catalog for *class_level* ("10" / "12"), falling back to class 12."""
    key = getattr(class_level, "value", class_level) or DEFAULT_CLASS_LEVEL
    return QUESTION_CATALOG_REGISTRY.get(str(key), QUESTION_CATALOG_REGISTRY[DEFAULT_CLASS_LEVEL])
