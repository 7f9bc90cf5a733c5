import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.voice_verification_router import router as voice_verification_router
from app.config.config import Config, load_voice_settings
from app.core.exceptions import VoiceVerificationError
from app.utils.logger import setup_logging

logger = logging.getLogger(__name__)

def create_app(config=Config):
    setup_logging(config.LOG_LEVEL) # 로깅 설정 초기화
    app = FastAPI(title="Voice Verification Service")

    # 요청마다 공유되는 읽기 전용 설정 (프로세스 시작 시 한 번만 로드)
    app.state.voice_settings = load_voice_settings(config)
    logger.info(
        f"Voice settings loaded: supported={sorted(app.state.voice_settings.supported_locales)} "
        f"default={app.state.voice_settings.default_locale}"
    )

    app.include_router(voice_verification_router)

    @app.exception_handler(VoiceVerificationError)
    async def voice_verification_error_handler(request: Request, exc: VoiceVerificationError):
        logger.warning(f"Rejected {request.url.path}: {exc.error_code} - {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.error_code, "message": exc.message},
        )

    @app.get("/")
    async def root():
        return {"message": "Voice Verification Service is running"}

    return app
