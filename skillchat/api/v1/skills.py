import json
import logging
import time

from fastapi import APIRouter, Depends, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from skillchat.core.config import settings
from skillchat.core.rate_limit import rate_limit
from skillchat.schemas.skills import SkillAnalysisError, SkillAnalysisRequest, SkillAnalysisResponse
from skillchat.skills import SkillGapAnalyzer, get_skill_gap_analyzer

router = APIRouter()
logger = logging.getLogger(__name__)

ANALYZE_PATH = "/v1/skills/analyze"


@router.post(
    "/skills/analyze",
    response_model=SkillAnalysisResponse,
    response_model_exclude_none=True,
    responses={400: {"model": SkillAnalysisError}, 500: {"model": SkillAnalysisError}},
)
@rate_limit(settings.skills_rate_limit)
async def analyze_skills(
    request: Request,
    payload: SkillAnalysisRequest,
    analyzer: SkillGapAnalyzer = Depends(get_skill_gap_analyzer),
):
    _ = request
    started_at = time.perf_counter()
    logger.info(
        json.dumps(
            {
                "event": "skill_analysis_request",
                "role": payload.role,
                "company": payload.company,
                "skills_count": len(payload.skills),
            }
        )
    )
    try:
        result = await analyzer.analyze(payload.role, payload.company, payload.skills)
    except Exception as exc:  # noqa: BLE001 - any unanticipated failure becomes a generic 500 body
        logger.exception(
            json.dumps(
                {
                    "event": "skill_analysis_error",
                    "error": str(exc),
                    "duration_ms": int((time.perf_counter() - started_at) * 1000),
                }
            )
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=SkillAnalysisError(error="Internal server error", details=str(exc)).model_dump(),
        )

    logger.info(
        json.dumps(
            {
                "event": "skill_analysis_complete",
                "status": result.status,
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return result


async def skill_analysis_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed analyze bodies get the same ``{error, details}`` shape as other failures."""
    if request.url.path != ANALYZE_PATH:
        return await request_validation_exception_handler(request, exc)
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}" for error in exc.errors()
    )
    logger.info(json.dumps({"event": "skill_analysis_invalid_request", "details": details}))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=SkillAnalysisError(error="Invalid request", details=details).model_dump(),
    )
