from functools import lru_cache

from fastapi import Depends, Request, Response

from app.core.firebase import FirebaseIdentityProvider, FirestoreDocumentStore
from app.core.llm import GeminiTextGenerator
from app.services.auth import SessionCookies, SessionManager
from app.services.interfaces import DocumentStore, IdentityProvider, TextGenerator
from app.services.pipeline import InterviewGenerationPipeline


# Process-wide clients. Construction is lazy; the SDKs are only touched on first use.

@lru_cache(maxsize=1)
def get_document_store() -> DocumentStore:
    return FirestoreDocumentStore()


@lru_cache(maxsize=1)
def get_identity_provider() -> IdentityProvider:
    return FirebaseIdentityProvider()


@lru_cache(maxsize=1)
def get_text_generator() -> TextGenerator:
    return GeminiTextGenerator()


# Request-scoped objects

def get_interview_pipeline(
    generator: TextGenerator = Depends(get_text_generator),
    store: DocumentStore = Depends(get_document_store),
) -> InterviewGenerationPipeline:
    return InterviewGenerationPipeline(generator=generator, store=store)


def get_session_cookies(request: Request, response: Response) -> SessionCookies:
    """Cookies of the incoming request; changes are written to the outgoing response."""
    return SessionCookies(request.cookies, response=response)


def get_session_manager(
    cookies: SessionCookies = Depends(get_session_cookies),
    identity: IdentityProvider = Depends(get_identity_provider),
    store: DocumentStore = Depends(get_document_store),
) -> SessionManager:
    return SessionManager(identity=identity, store=store, cookies=cookies)
