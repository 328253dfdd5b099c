"""
Produce Inspection Gateway root package.

A single-endpoint FastAPI service that takes a produce photo (data URL or
remote URL), asks Gemini for a structured quality verdict, and returns the
answer in a stable chat-completion-like shape. The API key never leaves the
server.
"""
