"""
Core dependencies module.
"""
from app.api.core.dependencies.auth import get_current_admin, get_token_payload, security

__all__ = [
    "get_current_admin",
    "get_token_payload",
    "security",
]
