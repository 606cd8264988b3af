"""Rendering collaborators: markup string and plain text.

RULES:
- Both consume the opaque value returned by serialize_capable
- Both are pure and deterministic
"""
