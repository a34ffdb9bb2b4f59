"""Errors raised by shared infrastructure helpers."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """A required setting is missing or unusable.

    Attributes:
        setting: Environment variable an operator has to fix
    """

    def __init__(self, setting: str, problem: str = "must be configured") -> None:
        self.setting = setting
        super().__init__(f"{setting} {problem}")
