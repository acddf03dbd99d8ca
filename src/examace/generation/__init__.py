"""Study-guide generation: prompt, endpoint client and response parsing."""

from .client import StudyGuideGenerator
from .config import GenerationSettings
from .models import Concept, GenerationResult
from .parser import parse_generation_response

__all__ = [
    "Concept",
    "GenerationResult",
    "GenerationSettings",
    "StudyGuideGenerator",
    "parse_generation_response",
]
