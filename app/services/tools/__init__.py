"""Small helpers shared by the interview and session services."""
from .helpers import INTERVIEW_COVERS, get_random_interview_cover, utc_now_iso
from .parsers import parse_questions, split_techstack, strip_code_fences

__all__ = [
    "INTERVIEW_COVERS",
    "get_random_interview_cover",
    "utc_now_iso",
    "parse_questions",
    "split_techstack",
    "strip_code_fences",
]
