"""
Interview Generation Pipeline.

This module turns a generation request into a stored interview:
1. Required field validation
2. Prompt construction and a single Gemini call
3. Parsing the generated text into a list of questions
4. Persisting the interview document

Each step runs sequentially; no step is retried.
"""
from __future__ import annotations
import logging
import random
from typing import Optional

from app.core.config import settings
from app.core.exceptions import GenerationError, MissingFieldsError
from app.core.prompts import generate_interview_questions_prompt
from app.schemas.interview import GenerateInterviewRequest, InterviewDocument
from app.services.interfaces import DocumentStore, TextGenerator
from app.services.tools import get_random_interview_cover, parse_questions, split_techstack, utc_now_iso

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"
EMPTY_RESPONSE_MESSAGE = "AI response is empty or invalid"


class InterviewGenerationPipeline:
    """
    Generates interview questions and stores them as an interview document.

    Collaborators are injected so the pipeline runs against fakes in tests:
    - generator: text-completion client (Gemini in production)
    - store: document store (Firestore in production)
    """

    def __init__(
        self,
        generator: TextGenerator,
        store: DocumentStore,
        collection: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        self.generator = generator
        self.store = store
        self.collection = collection or settings.INTERVIEWS_COLLECTION
        self.rng = rng

    async def run(self, request: GenerateInterviewRequest) -> InterviewDocument:
        """
        Run the pipeline for one request.

        Raises:
            MissingFieldsError: A required field is absent or falsy. Nothing else is called.
            GenerationError: The generated text is empty or not an array of strings.
            json.JSONDecodeError: The generated text is not JSON.
        """
        missing = request.missing_fields()
        if missing:
            logger.warning(f"Generation request rejected, missing fields: {missing}")
            raise MissingFieldsError(MISSING_FIELDS_MESSAGE, details={"missing": missing})

        prompt = generate_interview_questions_prompt(
            role=request.role,
            level=request.level,
            techstack=request.techstack,
            focus=request.type,
            amount=request.amount,
        )

        logger.info(f"Generating {request.amount} {request.type} questions for role '{request.role}' ({request.level})")
        generated = await self.generator.generate_text(prompt)

        if not generated:
            logger.error("Generation service returned an empty response")
            raise GenerationError(EMPTY_RESPONSE_MESSAGE)

        interview = InterviewDocument(
            role=request.role,
            type=request.type,
            level=request.level,
            techstack=split_techstack(request.techstack),
            questions=parse_questions(generated),
            userId=str(request.userid),
            finalized=True,
            coverImage=get_random_interview_cover(self.rng),
            createdAt=utc_now_iso(),
        )

        doc_id = await self.store.add(self.collection, interview.model_dump())
        logger.info(f"Stored interview {doc_id} with {len(interview.questions)} questions for user {request.userid}")
        return interview
