"""
Shared constants for image payloads and the client-facing contract.

Used by the image resolver, the Gemini client and the analysis controller.
"""

# -----------------------------------------------------------------------------
# Images
# -----------------------------------------------------------------------------
DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"
DATA_URL_SCHEME = "data:"

# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
JSON_MEDIA_TYPE = "application/json"
PROVIDER_NAME = "gemini"
