import uuid
import logging
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from logging_setup import setup_logging
from errors import DeliveryError, UpstreamError, ValidationError
from email_service import EmailDispatcher, SmtpTransport
from summarization_service import SummarizationGateway
from validation import validate_share_request, validate_summarize_request
from Models.ErrorResponse import ErrorResponse
from Models.ShareResponse import ShareResponse
from Models.SummaryResponse import SummaryResponse

setup_logging()
logger = logging.getLogger("summary-service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.API_KEY:
        logger.warning("API_KEY is not set; summarization requests will be rejected by the provider.")
    if not settings.EMAIL_USER:
        logger.warning("EMAIL_USER is not set; sharing summaries by email will fail.")

    client = httpx.AsyncClient(timeout=settings.GENERATION_TIMEOUT_SECONDS)
    transport = SmtpTransport(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.EMAIL_USER,
        password=settings.EMAIL_PASS,
        use_ssl=settings.SMTP_USE_SSL,
    )
    app.state.gateway = SummarizationGateway(settings.API_KEY, client, settings.generate_content_url)
    app.state.dispatcher = EmailDispatcher(transport, settings.EMAIL_USER)
    logger.info(f"Summary service started. model: {settings.GEMINI_MODEL}, smtp: {settings.SMTP_HOST}:{settings.SMTP_PORT}")
    try:
        yield
    finally:
        await client.aclose()


app = FastAPI(
    title="AI Meeting Summary Service",
    description="An API for summarizing meeting transcripts and sharing the summaries by email.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_gateway(request: Request) -> SummarizationGateway:
    return request.app.state.gateway

def get_dispatcher(request: Request) -> EmailDispatcher:
    return request.app.state.dispatcher


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(f"Rejected request to {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})

@app.exception_handler(RequestValidationError)
async def malformed_body_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Malformed request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object."})

@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    logger.error(f"Error generating summary (status: {exc.status_code}): {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Failed to generate summary."})

@app.exception_handler(DeliveryError)
async def delivery_error_handler(request: Request, exc: DeliveryError):
    return JSONResponse(
        status_code=500,
        content={"message": "Failed to send email. Please check your mail configuration."},
    )


@app.get("/")
async def root():
    return {"message": "Meeting summary service is running"}

@app.get("/health")
async def health_check():
    return {"status": "ok"}

@app.post(
    "/api/summarize",
    response_model=SummaryResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Summarizes a meeting transcript according to a prompt",
)
async def summarize_endpoint(
    payload: Any = Body(default=None),
    gateway: SummarizationGateway = Depends(get_gateway),
):
    request = validate_summarize_request(payload)
    request_id = str(uuid.uuid4())
    logger.info(f"New summary request received. requestId: {request_id}")
    result = await gateway.generate(request.transcript, request.prompt)
    logger.info(f"Summary generated. requestId: {request_id}")
    return SummaryResponse(summary=result.text)

@app.post(
    "/api/share",
    response_model=ShareResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ShareResponse}},
    summary="Shares a summary by email with a comma-separated list of recipients",
)
async def share_endpoint(
    payload: Any = Body(default=None),
    dispatcher: EmailDispatcher = Depends(get_dispatcher),
):
    request = validate_share_request(payload)
    receipt = await dispatcher.share(request.summary, request.emails)
    return ShareResponse(message=f"Summary successfully shared via email to: {', '.join(receipt.recipients)}")
