"""
bxkit Exception Classes

This module defines the exception hierarchy for all bxkit packages.
All custom exceptions inherit from BxkitError to enable consistent error handling.

Usage:
    from bxkit_common.errors import ValidationError, NotFoundError

    if not key:
        raise ValidationError(f"{kvp} is not a valid secret")
"""

from typing import Optional


class BxkitError(Exception):
    """
    Base exception for all bxkit errors.

    All custom bxkit exceptions should inherit from this class so that callers
    (the CLI in particular) can handle every library failure in one place.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
    """

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """
        Serialize error to dictionary for JSON output.

        Returns:
            dict with error details including class name, code, and message
        """
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code='{self.code}', message='{self.message}')"


class ValidationError(BxkitError):
    """
    Raised when user supplied input does not match the expected grammar.

    Use this for:
    - Malformed secrets (missing '=', empty key or empty value)
    - Non boolean values given to boolean inputs

    Example:
        if not key or not value:
            raise ValidationError(f"{kvp} is not a valid secret")
    """

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(BxkitError):
    """
    Raised when a referenced file or resource does not exist.

    Use this for:
    - Secret files that cannot be read
    - Missing builder instances

    Example:
        if not os.path.exists(path):
            raise NotFoundError(f"secret file {path} not found")
    """

    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND")


class CommandError(BxkitError):
    """
    Raised when an external docker/buildx command fails.

    The message is the trimmed stderr of the command when there is one.

    Attributes:
        exit_code: Exit status reported by the process (None if it never ran)
    """

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message, code="COMMAND_ERROR")
        self.exit_code = exit_code

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["exit_code"] = self.exit_code
        return data


class ConfigError(BxkitError):
    """
    Raised when the environment does not provide required configuration.

    Example:
        if "/" not in repository:
            raise ConfigError("GITHUB_REPOSITORY must be in 'owner/repo' format")
    """

    def __init__(self, message: str):
        super().__init__(message, code="CONFIG_ERROR")
