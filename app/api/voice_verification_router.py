import logging
from typing import List

from fastapi import APIRouter, Query, Request, Response

from app.core import twiml_service
from app.helper import locale_helper, verification_helper
from app.schemas.voice_verification_schemas import ErrorResponse, SupportedLocalesResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/v1/voice",
    tags=["Voice Verification"]
)

@router.post(
    "/description/{code}",
    response_class=Response,
    responses={
        200: {"content": {"application/xml": {}}},
        400: {"model": ErrorResponse},
    },
)
async def get_voice_description(
    request: Request,
    code: str,
    locales: List[str] = Query(default=[], alias="l"),
):
    """전화로 읽어줄 인증 코드 안내 TwiML을 반환합니다."""
    settings = request.app.state.voice_settings

    verification_helper.validate_code(code)
    locale = locale_helper.resolve_locale(locales, settings.supported_locales, settings.default_locale)
    logger.info(f"Voice verification announcement requested: locales={locales} resolved={locale}")

    body = twiml_service.render_announcement(settings.base_url, locale, code)
    return Response(content=body, media_type="application/xml")

@router.get("/locales", response_model=SupportedLocalesResponse)
async def list_supported_locales(request: Request):
    settings = request.app.state.voice_settings
    return SupportedLocalesResponse(
        supported_locales=sorted(settings.supported_locales),
        default_locale=settings.default_locale,
    )
