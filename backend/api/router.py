import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    AssistantQueryRequest,
    ExtractSkillsRequest,
    QuickAnalyzeRequest,
    SimulationInput,
    SuggestionsRequest,
)
from models.responses import AnalysisResult, AssistantResponse, SimulationResult, SuggestionsResponse
from models.schemas.assistant_intent import Intent
from models.schemas.skills_comparison import WeightedSkills
from services import pdf_parser, resume_analyzer
from services.assistant.assistant import get_suggested_actions, process_query
from services.jd_skill_extractor import extract_weighted_skills
from services.simulator import simulate_improvements

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

ASSISTANT_CAPABILITIES = (
    Intent.SCORE_EXPLANATION,
    Intent.SKILLS_GAP,
    Intent.JD_MATCH,
    Intent.EXPERIENCE_IMPROVE,
    Intent.KEYWORD_SUGGESTION,
    Intent.FORMATTING_FEEDBACK,
    Intent.RESUME_REWRITE,
)


def _check_job_description(job_description: str) -> None:
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit(settings.analyze_rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(...),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        logger.warning("Rejected upload %r: not a PDF", resume_file.filename)
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        logger.warning("Rejected upload %r: %d bytes", resume_file.filename, len(content))
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    _check_job_description(job_description)

    # Extract text from PDF
    try:
        resume_text = pdf_parser.extract_text(content)
    except Exception:
        logger.warning("Could not parse PDF %r", resume_file.filename, exc_info=True)
        raise HTTPException(status_code=400, detail="Could not parse PDF file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from PDF")

    return resume_analyzer.analyze_text(resume_text, job_description)


@router.post("/analyze/quick", response_model=AnalysisResult)
@limiter.limit(settings.analyze_rate_limit)
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return resume_analyzer.analyze_text(body.resume_text, body.job_description)


@router.post("/skills/extract", response_model=WeightedSkills)
async def extract_skills(body: ExtractSkillsRequest):
    return extract_weighted_skills(body.job_description)


@router.post("/simulate", response_model=SimulationResult)
async def simulate(body: SimulationInput):
    return simulate_improvements(body)


@router.post("/assistant/query", response_model=AssistantResponse)
async def assistant_query(body: AssistantQueryRequest):
    if len(body.query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query is too long. Please keep it under {settings.max_query_length} characters.",
        )
    try:
        return process_query(body.query, body.ats_result)
    except Exception:
        logger.exception("Assistant failed to answer query")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "Failed to process query",
                "message": "An unexpected error occurred. Please try again.",
            },
        )


@router.post("/assistant/suggestions", response_model=SuggestionsResponse)
async def assistant_suggestions(body: SuggestionsRequest):
    return SuggestionsResponse(suggestions=get_suggested_actions(body.ats_result))


@router.get("/assistant/health")
async def assistant_health():
    return {
        "success": True,
        "status": "active",
        "version": "1.0.0",
        "capabilities": [intent.value for intent in ASSISTANT_CAPABILITIES],
    }
