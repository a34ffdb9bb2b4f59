"""Application layer DI providers."""

from dishka import Scope, provide

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
from hdnotes.domain.service import (
    AuthService,
    JWTService,
    Notifier,
    OTPService,
    UserService,
)
from hdnotes.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Email OTP use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self,
        user_service: UserService,
        otp_service: OTPService,
        notifier: Notifier,
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(
            user_service=user_service,
            otp_service=otp_service,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_verify_otp_use_case(
        self,
        user_service: UserService,
        otp_service: OTPService,
        jwt_service: JWTService,
        notifier: Notifier,
    ) -> VerifyOTPUseCase:
        """Provide signup verification use case."""
        return VerifyOTPUseCase(
            user_service=user_service,
            otp_service=otp_service,
            jwt_service=jwt_service,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_signin_use_case(
        self,
        user_service: UserService,
        otp_service: OTPService,
        notifier: Notifier,
    ) -> SigninUseCase:
        """Provide signin use case."""
        return SigninUseCase(
            user_service=user_service,
            otp_service=otp_service,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_signin_verify_use_case(
        self,
        user_service: UserService,
        otp_service: OTPService,
        jwt_service: JWTService,
    ) -> SigninVerifyUseCase:
        """Provide signin verification use case."""
        return SigninVerifyUseCase(
            user_service=user_service,
            otp_service=otp_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_resend_otp_use_case(
        self,
        user_service: UserService,
        otp_service: OTPService,
        notifier: Notifier,
    ) -> ResendOTPUseCase:
        """Provide resend OTP use case."""
        return ResendOTPUseCase(
            user_service=user_service,
            otp_service=otp_service,
            notifier=notifier,
        )

    # Google use cases
    @provide(scope=Scope.REQUEST)
    def get_federated_login_use_case(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        notifier: Notifier,
    ) -> FederatedLoginUseCase:
        """Provide federated login use case."""
        return FederatedLoginUseCase(
            user_service=user_service,
            jwt_service=jwt_service,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_oauth_login_use_case(
        self,
        auth_service: AuthService,
        federated_login_use_case: FederatedLoginUseCase,
    ) -> OAuthLoginUseCase:
        """Provide server-side Google OAuth login use case."""
        return OAuthLoginUseCase(
            auth_service=auth_service,
            federated_login_use_case=federated_login_use_case,
        )

    # Session use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
        )
