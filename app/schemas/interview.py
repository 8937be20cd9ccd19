from pydantic import BaseModel, Field
from typing import Any, List, Optional, Union

REQUIRED_GENERATION_FIELDS = ("type", "role", "level", "techstack", "amount", "userid")

# --- Request Models ---

class GenerateInterviewRequest(BaseModel):
    """
    Body of the interview generation endpoint.

    Every field is optional at the schema level so that an incomplete body is
    reported with the endpoint's own 400 message instead of a 422.
    """
    type: Optional[str] = Field(default=None, description="Leaning between behavioural and technical questions.")
    role: Optional[str] = Field(default=None, description="The job role, e.g. 'Frontend Developer'.")
    level: Optional[str] = Field(default=None, description="Experience level, e.g. 'Junior'.")
    techstack: Optional[str] = Field(default=None, description="Comma separated tech stack, e.g. 'React,Node,SQL'.")
    amount: Optional[Union[int, float, str]] = Field(default=None, description="Number of questions to generate.")
    userid: Optional[Union[str, int]] = Field(default=None, description="Id of the user the interview belongs to.")

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent or falsy (empty string, zero)."""
        return [name for name in REQUIRED_GENERATION_FIELDS if not getattr(self, name)]


# --- Persisted Documents ---

class InterviewDocument(BaseModel):
    """Shape of a document in the interviews collection."""
    role: str
    type: str
    level: str
    techstack: List[str] = Field(..., description="Tech stack split on commas, untrimmed.")
    questions: List[str] = Field(..., description="Questions parsed from the generated text.")
    userId: str
    finalized: bool = True
    coverImage: str
    createdAt: str = Field(..., description="ISO-8601 creation timestamp.")


# --- API Responses ---

class GenerateInterviewResponse(BaseModel):
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
