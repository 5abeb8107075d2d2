import logging

from fastapi import APIRouter, HTTPException, status

from app.core.config import settings
from app.schemas.ats import ATSScore, ATSScoreRequest
from app.services.ats_service import calculate_ats_score

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/ats/score",
    response_model=ATSScore,
    summary="ATS Compatibility Score",
    description="Score a structured resume against a job description and target job title.",
)
def score_resume(payload: ATSScoreRequest) -> ATSScore:
    if payload.resume is None or not payload.job_description.strip() or not payload.job_title.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: resume, job_description, job_title",
        )

    if len(payload.job_description) > settings.ats_max_job_description_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Job description exceeds {settings.ats_max_job_description_chars} characters.",
        )

    try:
        score = calculate_ats_score(payload.resume, payload.job_description, payload.job_title)
    except Exception as exc:
        logger.exception("ats_score_failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to calculate ATS score",
        ) from exc

    logger.info("ats_score overall=%s rating=%s", score.overall, score.rating)
    return score
