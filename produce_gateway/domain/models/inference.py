# Standard library imports
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class InlineImage:
    """
    Image payload ready for inline submission to the model.

    Produced once per request and consumed by a single inference call.
    """
    mime_type: str
    data: str  # base64, no data-URL prefix

    def to_part(self) -> Dict[str, Any]:
        """Render as a Gemini ``inlineData`` content part."""
        return {"inlineData": {"mimeType": self.mime_type, "data": self.data}}


@dataclass(frozen=True)
class InferenceResult:
    """Successful model call: extracted text plus the untouched upstream payload."""
    text: str
    raw_payload: Any
    status_code: int = 200
