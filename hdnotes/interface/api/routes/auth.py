"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from hdnotes.application.usecase.auth import (
    FederatedLoginUseCase,
    GetCurrentUserUseCase,
    OAuthLoginUseCase,
    ResendOTPUseCase,
    SigninUseCase,
    SigninVerifyUseCase,
    SignupUseCase,
    VerifyOTPUseCase,
)
from hdnotes.application.usecase.auth.common import (
    AuthResponse,
    OTPSentResponse,
    PublicProfile,
)
from hdnotes.application.usecase.auth.federated_login import FederatedLoginRequest
from hdnotes.application.usecase.auth.get_current_user import GetCurrentUserRequest
from hdnotes.application.usecase.auth.oauth_login import OAuthLoginRequest
from hdnotes.application.usecase.auth.resend_otp import (
    ResendOTPRequest,
    ResendOTPResponse,
)
from hdnotes.application.usecase.auth.signin import SigninRequest
from hdnotes.application.usecase.auth.signin_verify import SigninVerifyRequest
from hdnotes.application.usecase.auth.signup import SignupRequest
from hdnotes.application.usecase.auth.verify_otp import VerifyOTPRequest
from hdnotes.config import Settings
from hdnotes.domain.error import BusinessRuleViolationError, NotFoundError
from hdnotes.domain.service import AuthService
from hdnotes.interface.error import APIError
from hdnotes.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute
)

SEND_OTP_FAILED = "Failed to send OTP. Please check your email configuration."
RESEND_OTP_FAILED = "Failed to resend OTP"
INTERNAL_ERROR = "Internal server error"


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /api/auth/me to return the current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: PublicProfile | None = None


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session cookie to a response.

    Production (cross-site frontend) needs samesite="none" and secure=True.
    Development runs over plain HTTP on localhost with samesite="lax".
    """
    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        domain=settings.auth.cookie_domain,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post("/signup", response_model=OTPSentResponse)
async def signup(
    request: SignupRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> OTPSentResponse:
    """Register an email address and send it a verification code.

    Example:
        POST /api/auth/signup
        {"name": "Ada", "email": "ada@example.com", "dateOfBirth": "1990-01-01"}

        Response:
        {"message": "OTP sent successfully to your email", "email": "ada@example.com"}
    """
    try:
        return await signup_use_case.execute(request)
    except BusinessRuleViolationError as e:
        raise APIError(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception:
        logger.exception("Signup failed")
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, SEND_OTP_FAILED)


@router.post("/verify-otp", response_model=AuthResponse)
async def verify_otp(
    request: VerifyOTPRequest,
    response: Response,
    verify_otp_use_case: FromDishka[VerifyOTPUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Complete a signup with the emailed code and start a session."""
    try:
        result = await verify_otp_use_case.execute(request)
    except BusinessRuleViolationError as e:
        raise APIError(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception:
        logger.exception("OTP verification failed")
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/signin", response_model=OTPSentResponse)
async def signin(
    request: SigninRequest,
    signin_use_case: FromDishka[SigninUseCase],
) -> OTPSentResponse:
    """Send a sign-in code to a verified email user."""
    try:
        return await signin_use_case.execute(request)
    except BusinessRuleViolationError as e:
        raise APIError(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception:
        logger.exception("Signin failed")
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, SEND_OTP_FAILED)


@router.post("/signin-verify", response_model=AuthResponse)
async def signin_verify(
    request: SigninVerifyRequest,
    response: Response,
    signin_verify_use_case: FromDishka[SigninVerifyUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Exchange a sign-in code for a session."""
    try:
        result = await signin_verify_use_case.execute(request)
    except BusinessRuleViolationError as e:
        raise APIError(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception:
        logger.exception("Signin verification failed")
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/resend-otp", response_model=ResendOTPResponse)
async def resend_otp(
    request: ResendOTPRequest,
    resend_otp_use_case: FromDishka[ResendOTPUseCase],
) -> ResendOTPResponse:
    """Replace the outstanding code with a fresh one."""
    try:
        return await resend_otp_use_case.execute(request)
    except BusinessRuleViolationError as e:
        raise APIError(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception:
        logger.exception("Resending OTP failed")
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, RESEND_OTP_FAILED)


@router.post("/google-firebase", response_model=AuthResponse)
async def google_firebase(
    request: FederatedLoginRequest,
    response: Response,
    federated_login_use_case: FromDishka[FederatedLoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Sign in with a Google identity already verified by the frontend.

    Example:
        POST /api/auth/google-firebase
        {"firebaseUid": "abc123", "email": "ada@gmail.com", "name": "Ada"}
    """
    try:
        result = await federated_login_use_case.execute(request)
    except BusinessRuleViolationError as e:
        raise APIError(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception:
        logger.exception("Google authentication failed")
        raise APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    _set_auth_cookie(response, result.token, settings)
    return result


@router.get("/google")
async def google_login(
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Redirect the browser to Google's consent screen."""
    state = secrets.token_urlsafe(32)
    try:
        auth_url = await auth_service.initiate_login(state)
    except Exception:
        logger.exception("Failed to initiate Google login")
        return _google_failure_redirect(settings)

    return RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)


@router.get("/google/callback")
async def google_callback(
    oauth_login_use_case: FromDishka[OAuthLoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Handle Google's redirect and hand the session to the frontend.

    Example:
        GET /api/auth/google/callback?code=abc123&state=xyz789

        Redirects to: {frontend}/auth/callback?token=...
        Sets cookie: auth_token
    """
    if error or not code or not state:
        logger.warning(f"Google callback without code: error={error}")
        return _google_failure_redirect(settings)

    try:
        result = await oauth_login_use_case.execute(
            OAuthLoginRequest(code=code, state=state)
        )
    except Exception:
        logger.exception("Google OAuth callback failed")
        return _google_failure_redirect(settings)

    redirect_url = (
        f"{settings.api.frontend_url}/auth/callback?"
        f"{urlencode({'token': result.token})}"
    )
    redirect_response = RedirectResponse(
        url=redirect_url, status_code=status.HTTP_302_FOUND
    )
    # Cookies must be set on the returned response object
    _set_auth_cookie(redirect_response, result.token, settings)

    logger.info(f"Google login complete for user: {result.user.id}")
    return redirect_response


def _google_failure_redirect(settings: Settings) -> RedirectResponse:
    return RedirectResponse(
        url=f"{settings.api.frontend_url}/signin?error=google_auth_failed",
        status_code=status.HTTP_302_FOUND,
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    # Same domain/path as when it was created
    response.delete_cookie(
        key=settings.auth.cookie_name,
        domain=settings.auth.cookie_domain,
        path="/",
    )
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    authorization: str | None = Header(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    The token is read from the session cookie, or from an
    ``Authorization: Bearer`` header for clients that keep it themselves.
    Calling without credentials is not an error.
    """
    token = request.cookies.get(settings.auth.cookie_name)
    if not token and authorization and authorization.lower().startswith("bearer "):
        token = authorization[len("bearer ") :].strip()

    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
        return AuthStatusResponse(authenticated=True, user=user)
    except JWTError:
        # Invalid or expired token
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # Token outlived its user
        return AuthStatusResponse(authenticated=False)
