# crowdcheck/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .combiner import combine_verdict
from .config import settings
from .firebase import NotFound, SentimentStore, get_db
from .logging_config import configure_logging
from .model import classify_text
from .models import (
    AnalyzeOut,
    ClassificationRequest,
    CombinedVerdict,
    CommentSentimentIn,
    ContentType,
    ErrorOut,
    InvalidRequest,
    PostSentimentIn,
)
from .ollama import OllamaClient

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"

app = FastAPI(title="CrowdCheck Sentiment Service")

# --- Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

# built once from settings and handed to every classification
ollama_client = OllamaClient.from_settings(settings)

_ERRORS = {400: {"model": ErrorOut}, 500: {"model": ErrorOut}}


# --- Error handlers ---
@app.exception_handler(InvalidRequest)
async def invalid_request_handler(request: Request, exc: InvalidRequest):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"error": f"Not found: {exc}"})


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


# --- Helper Functions ---
def get_store() -> SentimentStore:
    return SentimentStore(get_db(settings.FIREBASE_PROJECT_ID))


# --- Routes ---

@app.get("/health")
def health():
    return {
        "ok": True,
        "ollama_base_url": ollama_client.base_url,
        "model": settings.OLLAMA_MODEL,
        "alternative_model": settings.OLLAMA_ALTERNATIVE_MODEL,
    }


@app.post("/analyze-sentiment", response_model=AnalyzeOut, responses=_ERRORS)
async def analyze_sentiment(request: Request):
    """
    Classify a comment or post:
    - Asks the Ollama model for a label, reinforced by keyword indicators
    - Falls back to the weighted keyword analyzer if the model call fails
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.exception("Could not decode analyze-sentiment body")
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})

    req = ClassificationRequest.from_payload(payload)
    verdict = await run_in_threadpool(classify_text, req.text, req.content_type, ollama_client)
    return verdict.to_response()


@app.post("/comments/{comment_id}/sentiment", response_model=AnalyzeOut, responses=_ERRORS)
def analyze_comment(comment_id: str, payload: CommentSentimentIn):
    content = payload.content.strip()
    if not content:
        raise InvalidRequest("Missing required field: content")

    verdict = classify_text(content, ContentType.COMMENT, ollama_client)
    get_store().save_comment_sentiment(comment_id, verdict)
    return verdict.to_response()


@app.post("/posts/{post_id}/sentiment", response_model=AnalyzeOut, responses=_ERRORS)
def analyze_post(post_id: str, payload: PostSentimentIn):
    text = f"{payload.title} {payload.description or ''}".strip()
    if not text:
        raise InvalidRequest("Missing required fields: title and description")

    verdict = classify_text(text, ContentType.POST, ollama_client)
    get_store().save_post_sentiment(post_id, verdict)
    return verdict.to_response()


@app.get("/posts/{post_id}/verdict", response_model=CombinedVerdict)
def post_verdict(post_id: str):
    tally, stored = get_store().get_post(post_id)
    return combine_verdict(tally, stored)
