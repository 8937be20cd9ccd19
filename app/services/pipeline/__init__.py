"""
Interview Generation Package

Architecture:
- interview_pipeline.py: validation, generation, parsing and persistence of one interview
"""

from .interview_pipeline import (
    InterviewGenerationPipeline,
    MISSING_FIELDS_MESSAGE,
    EMPTY_RESPONSE_MESSAGE,
)

__all__ = [
    'InterviewGenerationPipeline',
    'MISSING_FIELDS_MESSAGE',
    'EMPTY_RESPONSE_MESSAGE',
]
