"""Domain layer errors.

Business rule violations carry the user-facing message as their string form.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class UserAlreadyExistsError(BusinessRuleViolationError):
    """Raised when signing up with an email that is already verified."""

    def __init__(self, message: str = "User already exists with this email"):
        super().__init__(message)


class UserNotFoundError(BusinessRuleViolationError):
    """Raised when no user matches the given email."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class SignupIncompleteError(BusinessRuleViolationError):
    """Raised when signing in before the signup OTP was verified."""

    def __init__(self, message: str = "Please complete your signup first"):
        super().__init__(message)


class WrongProviderError(BusinessRuleViolationError):
    """Raised when an OTP signin is attempted for a federated user."""

    def __init__(self, message: str = "Please use Google sign-in for this account"):
        super().__init__(message)


class InvalidOTPError(BusinessRuleViolationError):
    """Raised when no challenge is pending or the code does not match."""

    def __init__(self, message: str = "Invalid OTP"):
        super().__init__(message)


class OTPExpiredError(BusinessRuleViolationError):
    """Raised when the code matches but its window has passed."""

    def __init__(self, message: str = "OTP has expired"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
