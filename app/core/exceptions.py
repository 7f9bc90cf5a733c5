class VoiceVerificationError(Exception):
    """Base class for request rejections raised by the voice verification core."""

    error_code = "invalid_request"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCodeError(VoiceVerificationError):
    error_code = "invalid_code"


class InvalidLocaleError(VoiceVerificationError):
    error_code = "invalid_locale"

    def __init__(self, message: str, token: str = None):
        super().__init__(message)
        self.token = token
