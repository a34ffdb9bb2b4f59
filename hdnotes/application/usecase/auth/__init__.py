"""Authentication use cases."""

from .federated_login import FederatedLoginUseCase
from .get_current_user import GetCurrentUserUseCase
from .oauth_login import OAuthLoginUseCase
from .resend_otp import ResendOTPUseCase
from .signin import SigninUseCase
from .signin_verify import SigninVerifyUseCase
from .signup import SignupUseCase
from .verify_otp import VerifyOTPUseCase

__all__ = [
    "FederatedLoginUseCase",
    "GetCurrentUserUseCase",
    "OAuthLoginUseCase",
    "ResendOTPUseCase",
    "SigninUseCase",
    "SigninVerifyUseCase",
    "SignupUseCase",
    "VerifyOTPUseCase",
]
