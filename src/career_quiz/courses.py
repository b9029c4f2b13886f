"""
courses.py — Course catalog
============================
Reference data on courses and streams a student can move into after class
10 or class 12, plus the loader that validates it.

Each entry carries the display facts shown to students (duration, exams,
salary bands, demand, colleges) and two matching inputs:

  min_marks          nominal aggregate % usually needed to get a seat
  dimension_profile  RIASEC emphasis of the course, 0–10 per dimension
                     (keys may be single-letter codes: {"I": 9, "R": 7})

The catalog is loaded once and is read-only afterwards.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional

from pydantic import ValidationError

from career_quiz.errors import ConfigurationError
from career_quiz.models import ClassLevel, Course, Dimension, Stream

logger = logging.getLogger(__name__)


class CourseCatalog:
    """
    Ordered, validated course list. Declaration order is the matcher's
    tie-break order.

    Usage::

        catalog = default_course_catalog()
        catalog.get("btech-cs").demand        # Demand.VERY_HIGH
        catalog.for_class("10")               # class 10 options only
    """

    def __init__(self, courses: Iterable[Course]):
        self.courses: tuple[Course, ...] = tuple(courses)
        self._by_id: dict[str, Course] = {}
        for course in self.courses:
            if course.id in self._by_id:
                raise ConfigurationError(f"Duplicate course id: '{course.id}'")
            for dim, weight in course.dimension_profile.items():
                if weight < 0:
                    raise ConfigurationError(
                        f"Course '{course.id}' has negative {dim.value} profile weight"
                    )
            self._by_id[course.id] = course
        logger.info("Loaded course catalog: %d courses", len(self.courses))

    def __len__(self) -> int:
        return len(self.courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(self.courses)

    def __contains__(self, course_id: object) -> bool:
        return course_id in self._by_id

    def get(self, course_id: str) -> Optional[Course]:
        return self._by_id.get(course_id)

    def for_class(self, class_level) -> list[Course]:
        level = ClassLevel(getattr(class_level, "value", class_level))
        return [c for c in self.courses if c.class_level == level]

    def by_stream(self, stream) -> list[Course]:
        target = Stream(getattr(stream, "value", stream))
        return [c for c in self.courses if c.stream == target]


def _profile(raw: dict) -> dict[Dimension, float]:
    out: dict[Dimension, float] = {}
    for key, value in raw.items():
        dim = Dimension.from_code(key) if isinstance(key, str) and len(key) == 1 else Dimension(key)
        out[dim] = float(value)
    return out


def load_course_catalog(raw: Iterable[dict[str, Any]]) -> CourseCatalog:
    """Build a CourseCatalog from plain dicts; any malformed entry is a ConfigurationError."""
    courses: list[Course] = []
    for item in raw:
        data = dict(item)
        try:
            data["dimension_profile"] = _profile(data.get("dimension_profile", {}))
            courses.append(Course(**data))
        except (ValidationError, ValueError, TypeError) as exc:
            raise ConfigurationError(
                f"Course '{item.get('id', '?')}' is malformed: {exc}"
            ) from exc
    return CourseCatalog(courses)


# ─── Bundled data ────────────────────────────────────────────────────────────

_COURSES: list[dict[str, Any]] = [
    # ── After class 12: Science ──────────────────────────────────────────────
    {
        "id": "btech-cs", "name": "B.Tech CS",
        "full_name": "Bachelor of Technology - Computer Science",
        "stream": "science", "branch": "engineering", "class_level": "12",
        "duration": "4 years",
        "eligibility": "12th with Physics, Chemistry, Mathematics (PCM)",
        "entrance_exams": ["JEE Main", "JEE Advanced", "BITSAT", "VITEEE", "SRMJEEE"],
        "avg_salary": "Rs. 6-12 LPA", "top_salary": "Rs. 25-50 LPA",
        "demand": "Very High", "difficulty": 4,
        "top_colleges": ["IIT Bombay", "IIT Delhi", "IIT Madras", "IIT Kharagpur", "NIT Trichy"],
        "careers": ["Software Engineer", "Data Scientist", "AI/ML Engineer", "Full Stack Developer", "Cloud Architect"],
        "skills": ["Programming", "Problem Solving", "Algorithms", "Data Structures", "System Design"],
        "description": "Focus on software development, algorithms, AI, and cutting-edge technology.",
        "min_marks": 75, "dimension_profile": {"I": 9, "R": 6, "C": 4},
    },
    {
        "id": "btech-mechanical", "name": "B.Tech Mechanical",
        "full_name": "Bachelor of Technology - Mechanical Engineering",
        "stream": "science", "branch": "engineering", "class_level": "12",
        "duration": "4 years", "eligibility": "12th with PCM",
        "entrance_exams": ["JEE Main", "JEE Advanced", "State CETs"],
        "avg_salary": "Rs. 4-8 LPA", "top_salary": "Rs. 12-20 LPA",
        "demand": "High", "difficulty": 4,
        "top_colleges": ["IIT Madras", "IIT Kharagpur", "IIT Roorkee", "NIT Surathkal", "NIT Trichy"],
        "careers": ["Mechanical Engineer", "Automobile Engineer", "Manufacturing Engineer", "Production Manager"],
        "skills": ["CAD/CAM", "Thermodynamics", "Manufacturing", "Design", "Automation"],
        "description": "Core engineering with focus on machines, manufacturing, and automobile industry.",
        "min_marks": 75, "dimension_profile": {"R": 9, "I": 7, "C": 3},
    },
    {
        "id": "btech-civil", "name": "B.Tech Civil",
        "full_name": "Bachelor of Technology - Civil Engineering",
        "stream": "science", "branch": "engineering", "class_level": "12",
        "duration": "4 years", "eligibility": "12th with PCM",
        "entrance_exams": ["JEE Main", "State CETs"],
        "avg_salary": "Rs. 3.5-7 LPA", "top_salary": "Rs. 10-15 LPA",
        "demand": "High", "difficulty": 3,
        "top_colleges": ["IIT Roorkee", "NIT Warangal", "VNIT Nagpur", "IIT Madras"],
        "careers": ["Civil Engineer", "Structural Engineer", "Urban Planner", "Construction Manager"],
        "skills": ["Structural Design", "AutoCAD", "Project Management", "Surveying"],
        "description": "Design and construction of infrastructure, buildings, roads, and bridges.",
        "min_marks": 70, "dimension_profile": {"R": 9, "I": 5, "C": 4, "E": 2},
    },
    {
        "id": "mbbs", "name": "MBBS",
        "full_name": "Bachelor of Medicine and Bachelor of Surgery",
        "stream": "science", "branch": "medical", "class_level": "12",
        "duration": "5.5 years",
        "eligibility": "12th with Physics, Chemistry, Biology (PCB)",
        "entrance_exams": ["NEET UG"],
        "avg_salary": "Rs. 8-15 LPA", "top_salary": "Rs. 30-100 LPA",
        "demand": "Very High", "difficulty": 5,
        "top_colleges": ["AIIMS Delhi", "JIPMER", "GMC Chandigarh", "KGMU Lucknow", "CMC Vellore"],
        "careers": ["Doctor (General Physician)", "Surgeon", "Medical Officer", "Healthcare Consultant"],
        "skills": ["Medical Knowledge", "Patient Care", "Diagnosis", "Emergency Response", "Research"],
        "description": "Comprehensive medical training to become a licensed medical practitioner.",
        "min_marks": 85, "dimension_profile": {"I": 8, "S": 8, "R": 4},
    },
    {
        "id": "bds", "name": "BDS",
        "full_name": "Bachelor of Dental Surgery",
        "stream": "science", "branch": "medical", "class_level": "12",
        "duration": "5 years", "eligibility": "12th with PCB",
        "entrance_exams": ["NEET UG"],
        "avg_salary": "Rs. 5-10 LPA", "top_salary": "Rs. 15-30 LPA",
        "demand": "High", "difficulty": 4,
        "top_colleges": ["Maulana Azad Dental College", "GDC Mumbai"],
        "careers": ["Dentist", "Orthodontist", "Dental Surgeon", "Oral Pathologist"],
        "skills": ["Dental Procedures", "Patient Care", "Diagnosis", "Surgery"],
        "description": "Study of dental science and oral health care.",
        "min_marks": 75, "dimension_profile": {"I": 7, "S": 6, "R": 6},
    },
    {
        "id": "bsc-physics", "name": "B.Sc Physics",
        "full_name": "Bachelor of Science - Physics",
        "stream": "science", "branch": "research", "class_level": "12",
        "duration": "3 years", "eligibility": "12th with PCM",
        "entrance_exams": ["CUET", "University-specific exams"],
        "avg_salary": "Rs. 3-6 LPA", "top_salary": "Rs. 8-12 LPA",
        "demand": "Medium", "difficulty": 3,
        "top_colleges": ["St. Stephen's College", "Jamia Millia Islamia"],
        "careers": ["Research Scientist", "Professor", "Data Analyst", "ISRO Scientist"],
        "skills": ["Research", "Mathematics", "Analytical Thinking", "Lab Work"],
        "description": "Foundation in physics for research and higher studies (M.Sc, PhD).",
        "min_marks": 60, "dimension_profile": {"I": 10, "R": 4, "C": 2},
    },
    # ── After class 12: Commerce ─────────────────────────────────────────────
    {
        "id": "ca", "name": "CA",
        "full_name": "Chartered Accountancy",
        "stream": "commerce", "branch": "finance", "class_level": "12",
        "duration": "4-5 years", "eligibility": "12th (any stream)",
        "entrance_exams": ["CA Foundation", "CA Intermediate", "CA Final"],
        "avg_salary": "Rs. 8-15 LPA", "top_salary": "Rs. 25-50 LPA",
        "demand": "Very High", "difficulty": 5,
        "top_colleges": ["The Institute of Chartered Accountants of India (ICAI)"],
        "careers": ["Chartered Accountant", "Tax Consultant", "Auditor", "CFO", "Financial Advisor"],
        "skills": ["Accounting", "Taxation", "Audit", "Financial Analysis", "Business Law"],
        "description": "Premier accounting and finance qualification in India.",
        "min_marks": 60, "dimension_profile": {"C": 10, "E": 5, "I": 4},
    },
    {
        "id": "bcom", "name": "B.Com",
        "full_name": "Bachelor of Commerce",
        "stream": "commerce", "branch": "business", "class_level": "12",
        "duration": "3 years", "eligibility": "12th (preferably Commerce)",
        "entrance_exams": ["CUET", "DU JAT", "IPU CET"],
        "avg_salary": "Rs. 3-6 LPA", "top_salary": "Rs. 10-15 LPA",
        "demand": "High", "difficulty": 2,
        "top_colleges": ["SRCC Delhi", "Lady Shri Ram College"],
        "careers": ["Accountant", "Financial Analyst", "Business Consultant", "Investment Banker (after MBA)"],
        "skills": ["Accounting", "Finance", "Business Studies", "Economics"],
        "description": "Foundation in commerce, accounting, and business management.",
        "min_marks": 55, "dimension_profile": {"C": 8, "E": 6},
    },
    {
        "id": "bba", "name": "BBA",
        "full_name": "Bachelor of Business Administration",
        "stream": "commerce", "branch": "business", "class_level": "12",
        "duration": "3 years", "eligibility": "12th (any stream)",
        "entrance_exams": ["CUET", "IPMAT", "NPAT"],
        "avg_salary": "Rs. 4-7 LPA", "top_salary": "Rs. 12-20 LPA",
        "demand": "High", "difficulty": 3,
        "top_colleges": ["Shaheed Sukhdev College", "IIM Indore (IPM)", "IIM Rohtak (IPM)"],
        "careers": ["Business Manager", "Marketing Executive", "HR Manager", "Entrepreneur"],
        "skills": ["Management", "Leadership", "Marketing", "Communication", "Strategy"],
        "description": "Management education with focus on business operations and strategy.",
        "min_marks": 55, "dimension_profile": {"E": 9, "S": 5, "C": 4},
    },
    # ── After class 12: Arts ─────────────────────────────────────────────────
    {
        "id": "ba-llb", "name": "BA LLB",
        "full_name": "Bachelor of Arts & Bachelor of Legislative Law",
        "stream": "arts", "branch": "law", "class_level": "12",
        "duration": "5 years", "eligibility": "12th (any stream)",
        "entrance_exams": ["CLAT", "AILET", "LSAT India"],
        "avg_salary": "Rs. 5-10 LPA", "top_salary": "Rs. 30-100 LPA",
        "demand": "Very High", "difficulty": 4,
        "top_colleges": ["NLSIU Bangalore", "NLU Delhi", "NALSAR Hyderabad"],
        "careers": ["Lawyer", "Judge", "Legal Advisor", "Corporate Lawyer", "Civil Services"],
        "skills": ["Legal Research", "Argumentation", "Critical Thinking", "Communication"],
        "description": "Integrated law degree for becoming a legal professional.",
        "min_marks": 65, "dimension_profile": {"E": 8, "I": 6, "S": 5},
    },
    {
        "id": "ba", "name": "BA",
        "full_name": "Bachelor of Arts",
        "stream": "arts", "branch": "humanities", "class_level": "12",
        "duration": "3 years", "eligibility": "12th (any stream)",
        "entrance_exams": ["CUET", "University entrance exams"],
        "avg_salary": "Rs. 3-5 LPA", "top_salary": "Rs. 8-15 LPA",
        "demand": "Medium", "difficulty": 2,
        "top_colleges": ["St. Stephen's College", "Lady Shri Ram College", "Jamia Millia Islamia"],
        "careers": ["Civil Services (UPSC)", "Journalist", "Teacher", "Content Writer", "Psychologist"],
        "skills": ["Critical Thinking", "Research", "Writing", "Communication", "Analysis"],
        "description": "Liberal arts education in subjects like History, Political Science, Psychology.",
        "min_marks": 50, "dimension_profile": {"S": 7, "A": 7, "I": 5},
    },
    {
        "id": "journalism", "name": "BA Journalism",
        "full_name": "Bachelor of Arts - Journalism & Mass Communication",
        "stream": "arts", "branch": "humanities", "class_level": "12",
        "duration": "3 years", "eligibility": "12th (any stream)",
        "entrance_exams": ["University-specific exams"],
        "avg_salary": "Rs. 4-7 LPA", "top_salary": "Rs. 15-30 LPA",
        "demand": "Good", "difficulty": 3,
        "top_colleges": ["IIMC New Delhi", "Jamia Millia Islamia", "Lady Shri Ram College"],
        "careers": ["Journalist", "News Anchor", "Content Creator", "PR Specialist", "Digital Marketer"],
        "skills": ["Writing", "Communication", "Video Editing", "Research", "Interviewing"],
        "description": "Training in journalism, media production, and mass communication.",
        "min_marks": 50, "dimension_profile": {"A": 9, "S": 5, "E": 5},
    },
    # ── After class 10: streams ──────────────────────────────────────────────
    {
        "id": "10th-science-pcm", "name": "Science (PCM)",
        "full_name": "Science Stream - Physics, Chemistry, Mathematics",
        "stream": "science", "class_level": "10",
        "duration": "2 years (11th-12th)",
        "eligibility": "10th pass with good marks in Science & Maths",
        "entrance_exams": ["School entrance for Science stream"],
        "avg_salary": "Leads to Engineering/Tech careers", "top_salary": "Rs. 25-50 LPA (after B.Tech)",
        "demand": "Very High", "difficulty": 4,
        "top_colleges": ["Top CBSE/State Board schools", "Kendriya Vidyalayas", "DAV Schools"],
        "careers": ["Engineer", "Architect", "Pilot", "Data Scientist", "Research Scientist"],
        "skills": ["Mathematics", "Physics", "Chemistry", "Problem Solving", "Logical Thinking"],
        "description": "Ideal for students interested in engineering, technology, architecture, and pure sciences.",
        "min_marks": 70, "dimension_profile": {"I": 9, "R": 7, "C": 3},
    },
    {
        "id": "10th-science-pcb", "name": "Science (PCB)",
        "full_name": "Science Stream - Physics, Chemistry, Biology",
        "stream": "science", "class_level": "10",
        "duration": "2 years (11th-12th)",
        "eligibility": "10th pass with good marks in Science",
        "entrance_exams": ["School entrance for Science stream"],
        "avg_salary": "Leads to Medical careers", "top_salary": "Rs. 30-100 LPA (after MBBS/BDS)",
        "demand": "Very High", "difficulty": 5,
        "top_colleges": ["Top CBSE/State Board schools", "Kendriya Vidyalayas"],
        "careers": ["Doctor", "Dentist", "Pharmacist", "Biotechnologist", "Nurse", "Veterinarian"],
        "skills": ["Biology", "Chemistry", "Physics", "Memorization", "Empathy", "Patient Care"],
        "description": "Perfect for aspiring doctors, dentists, and healthcare professionals.",
        "min_marks": 70, "dimension_profile": {"I": 8, "S": 7, "R": 3},
    },
    {
        "id": "10th-science-pcmb", "name": "Science (PCMB)",
        "full_name": "Science Stream - Physics, Chemistry, Mathematics, Biology",
        "stream": "science", "class_level": "10",
        "duration": "2 years (11th-12th)",
        "eligibility": "10th pass with excellent marks, strong academic ability",
        "entrance_exams": ["School entrance for Science stream"],
        "avg_salary": "Maximum career flexibility", "top_salary": "Highest among all streams",
        "demand": "Very High", "difficulty": 5,
        "top_colleges": ["Top CBSE schools", "International schools"],
        "careers": ["Biomedical Engineer", "Biotechnologist", "Research Scientist", "Any Science career"],
        "skills": ["All Sciences", "Mathematics", "Time Management", "Multi-tasking"],
        "description": "Most flexible option keeping both Engineering and Medical doors open.",
        "min_marks": 85, "dimension_profile": {"I": 10, "R": 5, "S": 4, "C": 3},
    },
    {
        "id": "10th-commerce", "name": "Commerce",
        "full_name": "Commerce Stream - Accountancy, Business Studies, Economics",
        "stream": "commerce", "class_level": "10",
        "duration": "2 years (11th-12th)",
        "eligibility": "10th pass, interest in business/finance",
        "entrance_exams": ["School entrance for Commerce stream"],
        "avg_salary": "Leads to Business/Finance careers", "top_salary": "Rs. 25-50 LPA (after CA/MBA)",
        "demand": "High", "difficulty": 3,
        "top_colleges": ["Commerce-focused schools", "Private schools"],
        "careers": ["Chartered Accountant", "Business Manager", "Entrepreneur", "Banker", "Stock Broker"],
        "skills": ["Accountancy", "Business Studies", "Economics", "Numerical Ability"],
        "description": "Ideal for students interested in business, finance, accounting, and entrepreneurship.",
        "min_marks": 55, "dimension_profile": {"C": 8, "E": 8},
    },
    {
        "id": "10th-arts", "name": "Arts/Humanities",
        "full_name": "Arts Stream - History, Political Science, Psychology, Sociology",
        "stream": "arts", "class_level": "10",
        "duration": "2 years (11th-12th)", "eligibility": "10th pass",
        "entrance_exams": ["School entrance for Arts stream"],
        "avg_salary": "Leads to diverse careers", "top_salary": "Rs. 15-30 LPA (Civil Services/Law)",
        "demand": "Good", "difficulty": 2,
        "top_colleges": ["All schools offer Arts stream"],
        "careers": ["Civil Servant (IAS/IPS)", "Lawyer", "Journalist", "Psychologist", "Teacher", "Social Worker"],
        "skills": ["Critical Thinking", "Reading", "Writing", "Communication", "Creativity"],
        "description": "For creative minds and those interested in social sciences, law, civil services, teaching, and media.",
        "min_marks": 0, "dimension_profile": {"A": 8, "S": 8, "E": 4},
    },
    # ── After class 10: vocational ───────────────────────────────────────────
    {
        "id": "iti-electrician", "name": "ITI Electrician",
        "full_name": "Industrial Training Institute - Electrician Trade",
        "stream": "vocational", "branch": "skilled", "class_level": "10",
        "duration": "2 years", "eligibility": "10th pass",
        "entrance_exams": ["State ITI entrance tests"],
        "avg_salary": "Rs. 3-6 LPA", "top_salary": "Rs. 8-12 LPA",
        "demand": "High", "difficulty": 2,
        "top_colleges": ["Government ITIs across India"],
        "careers": ["Electrician", "Electrical Supervisor", "Maintenance Engineer", "Contractor"],
        "skills": ["Electrical Wiring", "Circuit Design", "Troubleshooting", "Safety"],
        "description": "Practical training in electrical systems and installations.",
        "min_marks": 35, "dimension_profile": {"R": 10, "I": 3, "C": 3},
    },
    {
        "id": "iti-fitter", "name": "ITI Fitter",
        "full_name": "Industrial Training Institute - Fitter Trade",
        "stream": "vocational", "branch": "skilled", "class_level": "10",
        "duration": "2 years", "eligibility": "10th pass",
        "entrance_exams": ["State ITI entrance tests"],
        "avg_salary": "Rs. 3-5 LPA", "top_salary": "Rs. 7-10 LPA",
        "demand": "High", "difficulty": 2,
        "top_colleges": ["Government ITIs"],
        "careers": ["Fitter", "Maintenance Technician", "Machine Operator", "Workshop Supervisor"],
        "skills": ["Machine Fitting", "Hand Tools", "Precision Work", "Assembly"],
        "description": "Training in fitting, assembling, and maintaining machinery.",
        "min_marks": 35, "dimension_profile": {"R": 10, "C": 4},
    },
    {
        "id": "iti-mechanic", "name": "ITI Mechanic",
        "full_name": "Industrial Training Institute - Motor Mechanic",
        "stream": "vocational", "branch": "skilled", "class_level": "10",
        "duration": "2 years", "eligibility": "10th pass",
        "entrance_exams": ["State ITI entrance tests"],
        "avg_salary": "Rs. 3-6 LPA", "top_salary": "Rs. 8-10 LPA",
        "demand": "High", "difficulty": 2,
        "top_colleges": ["Government ITIs"],
        "careers": ["Auto Mechanic", "Service Technician", "Workshop Manager"],
        "skills": ["Vehicle Repair", "Engine Maintenance", "Diagnostics"],
        "description": "Training in automobile maintenance and repair.",
        "min_marks": 35, "dimension_profile": {"R": 10, "I": 3, "E": 2},
    },
    {
        "id": "iti-welder", "name": "ITI Welder",
        "full_name": "Industrial Training Institute - Welder Trade",
        "stream": "vocational", "branch": "skilled", "class_level": "10",
        "duration": "1 year", "eligibility": "10th pass",
        "entrance_exams": ["State ITI entrance tests"],
        "avg_salary": "Rs. 3-5 LPA", "top_salary": "Rs. 7-10 LPA",
        "demand": "High", "difficulty": 2,
        "top_colleges": ["Government ITIs"],
        "careers": ["Welder", "Fabricator", "Welding Supervisor"],
        "skills": ["Welding Techniques", "Metal Cutting", "Safety Procedures"],
        "description": "Training in various welding and metal fabrication techniques.",
        "min_marks": 35, "dimension_profile": {"R": 10, "A": 2},
    },
    {
        "id": "iti-computer", "name": "ITI Computer",
        "full_name": "Industrial Training Institute - Computer Operator & Programming Assistant",
        "stream": "vocational", "branch": "skilled", "class_level": "10",
        "duration": "1 year", "eligibility": "10th pass",
        "entrance_exams": ["State ITI entrance tests"],
        "avg_salary": "Rs. 2.5-5 LPA", "top_salary": "Rs. 6-8 LPA",
        "demand": "Medium", "difficulty": 2,
        "top_colleges": ["Government ITIs"],
        "careers": ["Computer Operator", "Data Entry Operator", "Office Assistant"],
        "skills": ["Computer Basics", "MS Office", "Typing", "Basic Programming"],
        "description": "Foundation in computer operations and basic programming.",
        "min_marks": 35, "dimension_profile": {"C": 9, "R": 5, "I": 4},
    },
    {
        "id": "diploma-polytechnic", "name": "Polytechnic Diploma",
        "full_name": "Diploma in Engineering (Various Branches)",
        "stream": "vocational", "branch": "engineering", "class_level": "10",
        "duration": "3 years",
        "eligibility": "10th pass with good marks in Science & Maths",
        "entrance_exams": ["State Polytechnic entrance exams"],
        "avg_salary": "Rs. 3-7 LPA", "top_salary": "Rs. 10-15 LPA",
        "demand": "High", "difficulty": 3,
        "top_colleges": ["Government Polytechnics", "Autonomous Polytechnics"],
        "careers": ["Junior Engineer", "Technical Assistant", "Supervisor", "Can pursue B.Tech later"],
        "skills": ["Technical Knowledge", "Practical Skills", "Problem Solving"],
        "description": "Three-year technical diploma in engineering branches; an alternative to 11th-12th for technical careers.",
        "min_marks": 50, "dimension_profile": {"R": 9, "I": 6, "C": 3},
    },
]

_DEFAULT: Optional[CourseCatalog] = None


def default_course_catalog() -> CourseCatalog:
    """The bundled catalog, built on first use and shared afterwards."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = load_course_catalog(_COURSES)
    return _DEFAULT
