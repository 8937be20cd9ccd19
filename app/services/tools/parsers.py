import json
import logging
import re
from typing import List

from pydantic import TypeAdapter, ValidationError

from app.core.exceptions import GenerationError

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r'^\s*```(?:json)?\s*|\s*```\s*$')
_QUESTIONS_ADAPTER = TypeAdapter(List[str])


def strip_code_fences(raw_text: str) -> str:
    """Remove a surrounding markdown code fence, which Gemini adds now and then."""
    return _FENCE_PATTERN.sub('', raw_text).strip()


def parse_questions(raw_text: str) -> List[str]:
    """
    Parse generated text as a literal JSON array of question strings.

    A json.JSONDecodeError is deliberately not caught here; it reaches the
    endpoint's error boundary with the parser's own message.

    Raises:
        json.JSONDecodeError: The text is not JSON.
        GenerationError: The text is JSON but not an array of strings.
    """
    data = json.loads(strip_code_fences(raw_text))
    try:
        return _QUESTIONS_ADAPTER.validate_python(data, strict=True)
    except ValidationError as e:
        logger.error(f"Generated questions have the wrong shape: {str(raw_text)[:500]}")
        raise GenerationError(
            "AI response is not a JSON array of strings",
            details={"errors": e.errors(include_url=False)},
        ) from e


def split_techstack(techstack: str) -> List[str]:
    """Split the comma separated tech stack. Items are kept as sent, untrimmed."""
    return techstack.split(",")
