import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.deps import get_interview_pipeline
from app.core.exceptions import MissingFieldsError, error_response
from app.schemas.interview import GenerateInterviewRequest, GenerateInterviewResponse
from app.services.pipeline import InterviewGenerationPipeline

logger = logging.getLogger(__name__)

interview_router = APIRouter()


@interview_router.post("/vapi/generate", response_model=GenerateInterviewResponse)
async def generate_interview(
    request: Request,
    pipeline: InterviewGenerationPipeline = Depends(get_interview_pipeline),
):
    """
    Generates interview questions with Gemini and stores the interview.

    Every failure past validation is reported as a 500 carrying the
    underlying error message.
    """
    try:
        body = await request.json()
        if body is None:
            raise TypeError("Request body must not be null")
        # Non-object JSON carries none of the fields and is reported as missing them
        payload = GenerateInterviewRequest.model_validate(body if isinstance(body, dict) else {})
        await pipeline.run(payload)
        return JSONResponse(status_code=200, content={"success": True})

    except MissingFieldsError as e:
        return error_response(400, e.message)
    except Exception as e:
        logger.error(f"Error generating interview: {e}", exc_info=True)
        return error_response(500, str(e) or "Internal Server Error")


@interview_router.get("/vapi/generate", response_model=GenerateInterviewResponse)
async def generate_interview_ack():
    return JSONResponse(status_code=200, content={"success": True, "data": "Thank you!"})
