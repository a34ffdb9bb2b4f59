"""User aggregate root.

One record per person. Users sign up by email and verify ownership with a
one-time passcode, or arrive through Google and start out verified.
"""

from datetime import date

from hdnotes.domain.model.common import DomainModel
from hdnotes.domain.value import AuthProvider, Email, PendingChallenge, UserId


class User(DomainModel):
    """User aggregate root.

    Lifecycle:
        Unregistered -> PendingVerification (challenge set, unverified)
        PendingVerification -> Verified (challenge cleared)
        Verified -> Verified with a challenge while an OTP signin is pending

    Google users are created directly in the Verified state.
    """

    id: UserId
    name: str
    email: Email
    date_of_birth: date | None = None
    avatar_url: str | None = None
    auth_provider: AuthProvider = AuthProvider.EMAIL
    federated_id: str | None = None  # Google account id, unique when set
    is_email_verified: bool = False
    challenge: PendingChallenge | None = None

    @property
    def is_pending_verification(self) -> bool:
        """Signed up but never completed an OTP verification."""
        return not self.is_email_verified and self.challenge is not None
