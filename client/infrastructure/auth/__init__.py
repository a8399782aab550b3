from .http_auth_service import HttpAuthService

__all__ = ["HttpAuthService"]
