from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional

from ...domain.constants import PROVIDER_NAME


class AnalysisRequest(BaseModel):
    """DTO for POST /analyze. Both fields are optional; unknown keys are ignored."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    image_data: Optional[str] = Field(default=None, alias="imageData")  # data URL or remote URL
    model: Optional[str] = None


class ChoiceMessage(BaseModel):
    content: str


class Choice(BaseModel):
    message: ChoiceMessage


class AnalysisResponse(BaseModel):
    """DTO for a successful analysis, shaped like a chat-completion reply"""
    provider: str = PROVIDER_NAME
    choices: List[Choice]
    raw: Any = None

    @classmethod
    def from_text(cls, text: str, raw: Any) -> "AnalysisResponse":
        return cls(choices=[Choice(message=ChoiceMessage(content=text))], raw=raw)


class ErrorResponse(BaseModel):
    """DTO for error bodies. ``details`` is only serialized when explicitly set."""
    error: str
    details: Any = None
