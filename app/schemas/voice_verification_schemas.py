from typing import List

from pydantic import BaseModel

class ErrorResponse(BaseModel):
    error: str
    message: str

class SupportedLocalesResponse(BaseModel):
    supported_locales: List[str]
    default_locale: str
