"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .base import Service
from .jwt_service import JWTService
from .notification_service import Notifier
from .otp_service import OTPService
from .user_service import UserService

__all__ = [
    "AuthService",
    "JWTService",
    "Notifier",
    "OAuthClient",
    "OTPService",
    "Service",
    "UserService",
]
