import logging

from twilio.twiml.voice_response import VoiceResponse

logger = logging.getLogger(__name__)

ANNOUNCEMENT_REPETITIONS = 3


def _prompt_url(base_url: str, locale: str, name: str) -> str:
    return f"{base_url}/{locale}/{name}"


def build_announcement(base_url: str, locale: str, code: str) -> VoiceResponse:
    """
    인증 코드를 읽어주는 TwiML 응답을 만듭니다.
    Each repetition plays the intro prompt followed by one clip per digit;
    the last digit uses the falling-intonation clip.
    """
    base_url = base_url.rstrip("/")
    response = VoiceResponse()

    for repetition in range(ANNOUNCEMENT_REPETITIONS):
        response.play(_prompt_url(base_url, locale, "verification.mp3"))
        for index, digit in enumerate(code):
            suffix = "falling" if index == len(code) - 1 else "middle"
            response.play(_prompt_url(base_url, locale, f"{digit}_{suffix}.wav"))
        if repetition < ANNOUNCEMENT_REPETITIONS - 1:
            response.pause(length=1)

    logger.debug(f"Built voice announcement for locale {locale}")
    return response


def render_announcement(base_url: str, locale: str, code: str) -> str:
    return str(build_announcement(base_url, locale, code))
