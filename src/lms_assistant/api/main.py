"""FastAPI application exposing the intent analyzer."""

import time
from datetime import date
from typing import Any, List, Optional

import pendulum
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from lms_assistant.config import settings
from lms_assistant.intent.analyzer import IntentAnalyzer
from lms_assistant.intent.interpreter import interpret
from lms_assistant.intent.llm import OpenAIFallback
from lms_assistant.logging import configure_logging, get_logger

logger = get_logger(__name__)

VERSION = "0.1.0"


class AnalyzeRequest(BaseModel):
    """Request model for the analyze endpoint."""

    message: str = Field(..., max_length=settings.MAX_MESSAGE_CHARS)
    # Anchor for relative session dates; defaults to the server's today
    reference_date: Optional[str] = None
    use_fallback: bool = False


class AnalyzeResponse(BaseModel):
    """Response model for the analyze endpoint."""

    intent: str
    entities: dict[str, Any]
    confidence: float
    source_of_intent: str = "rule_only"
    processing_time_ms: float


class IntentInfo(BaseModel):
    name: str
    confidence: float


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str
    components: dict[str, str]


analyzer: Optional[IntentAnalyzer] = None


def _configure_startup_event(app: FastAPI) -> None:
    @app.on_event("startup")
    async def startup_event() -> None:
        global analyzer
        log_dir = configure_logging()
        logger.info(f"Starting up LMS assistant API (logs in {log_dir})")
        analyzer = IntentAnalyzer()
        logger.info(f"Loaded {len(analyzer.rules)} intent rules")


def _configure_shutdown_event(app: FastAPI) -> None:
    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info("Shutting down LMS assistant API")


def _configure_health_endpoint(app: FastAPI) -> None:
    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        components = {
            "analyzer": "ready" if analyzer is not None else "not_initialized",
            "fallback": "enabled" if settings.FALLBACK_ENABLED else "disabled",
        }
        status = "healthy" if analyzer is not None else "unhealthy"
        return HealthResponse(status=status, version=VERSION, components=components)


def _configure_intents_endpoint(app: FastAPI) -> None:
    @app.get("/intents", response_model=List[IntentInfo])
    async def list_intents() -> List[IntentInfo]:
        if analyzer is None:
            raise HTTPException(status_code=503, detail="Analyzer not initialized.")
        return [
            IntentInfo(name=rule.name, confidence=rule.confidence)
            for rule in analyzer.rules
        ]


def _parse_reference_date(value: Optional[str]) -> date:
    if value is None:
        return pendulum.today().date()
    try:
        parsed = pendulum.parse(value, exact=True)
    except ValueError as e:
        raise HTTPException(
            status_code=422, detail=f"Invalid reference_date: {value}"
        ) from e
    if not isinstance(parsed, pendulum.Date):
        raise HTTPException(status_code=422, detail=f"Invalid reference_date: {value}")
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    return parsed


def _configure_analyze_endpoint(app: FastAPI) -> None:
    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze_message(request: AnalyzeRequest) -> AnalyzeResponse:
        if analyzer is None:
            raise HTTPException(
                status_code=503,
                detail="Analyzer not initialized. Check service health.",
            )

        reference_date = _parse_reference_date(request.reference_date)

        try:
            start_time = time.perf_counter()
            interpretation = interpret(
                request.message,
                fallback=OpenAIFallback() if request.use_fallback else None,
                reference_date=reference_date,
                analyzer=analyzer,
            )
            processing_time = (time.perf_counter() - start_time) * 1000
        except Exception as e:
            logger.error(f"Error analyzing message: {e}")
            raise HTTPException(
                status_code=500,
                detail=f"Error analyzing message: {str(e)}",
            ) from e

        result = interpretation.result
        logger.info(
            f"Classified as {result.intent} ({result.confidence:.2f}) "
            f"in {processing_time:.2f}ms"
        )
        return AnalyzeResponse(
            intent=result.intent,
            entities=result.entities.as_dict(),
            confidence=result.confidence,
            source_of_intent=interpretation.source_of_intent,
            processing_time_ms=processing_time,
        )


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="LMS Assistant API",
        description="Rule-based intent analysis for LMS administration commands",
        version=VERSION,
    )

    _configure_startup_event(app)
    _configure_shutdown_event(app)
    _configure_health_endpoint(app)
    _configure_intents_endpoint(app)
    _configure_analyze_endpoint(app)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "lms_assistant.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True,
    )
