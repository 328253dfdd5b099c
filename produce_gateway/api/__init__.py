"""
API layer for the produce gateway.

Exposes POST /analyze plus the CORS middleware and error handlers that give
every response the same headers and ``{"error": ...}`` body shape.
"""
