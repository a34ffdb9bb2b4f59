"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class APIError(InterfaceError):
    """Error rendered to the client as ``{"message": ...}``.

    Attributes:
        status_code: HTTP status of the response
        message: Client-facing message
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)
