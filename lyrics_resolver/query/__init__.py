from .candidates import generate, reduced_query, variants
from .normalize import main_title, normalize
from .title import parse_video_title
from .types import CandidateQuery, QueryVariants, RawQuery

__all__ = [
    "CandidateQuery",
    "QueryVariants",
    "RawQuery",
    "generate",
    "main_title",
    "normalize",
    "parse_video_title",
    "reduced_query",
    "variants",
]
