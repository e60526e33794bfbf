"""
Authentication service module.
"""
from app.api.modules.v1.auth.service.login_service import LoginService, logout_admin

__all__ = [
    "LoginService",
    "logout_admin",
]
