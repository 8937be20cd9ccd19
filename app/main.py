import logging
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from app.api.v1.auth import auth_router
from app.api.v1.interview import interview_router
from app.core.config import settings
from app.core.logger import setup_logger, set_correlation_id, correlation_id_var
from app.core.exceptions import global_exception_handler, http_exception_handler

# Setup logger with fresh log file on startup
setup_logger(log_level=logging.DEBUG if settings.DEBUG_MODE else logging.INFO, clear_log=True, use_json=settings.LOG_JSON)
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Application startup: Interview generation service ({settings.ENVIRONMENT})")
    yield
    logger.info("Application shutdown")

app = FastAPI(
    title="AI Interview Generator",
    description="Gemini-backed interview generation and Firebase session authentication.",
    version="1.0.0",
    lifespan=lifespan
)

app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)

# Credentials are required for the session cookie, so origins must be explicit
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next):
    correlation_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    token = set_correlation_id(correlation_id)
    try:
        response = await call_next(request)
    finally:
        correlation_id_var.reset(token)
    response.headers[REQUEST_ID_HEADER] = correlation_id
    return response


# Include routers
app.include_router(interview_router, prefix="/api", tags=["interview"])
app.include_router(auth_router, prefix="/api", tags=["auth"])


@app.get("/health")
async def health():
    return {"ok": True}
