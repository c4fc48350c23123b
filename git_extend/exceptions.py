"""Custom exceptions for git-extend"""

from pathlib import Path
from typing import Optional, Union


class GitExtendError(Exception):
    """Base exception for all git-extend errors."""
    pass


class ConfigurationError(GitExtendError):
    """Exception raised when the run cannot be configured."""
    pass


class InvalidOutputFormatError(ConfigurationError):
    """Exception raised for an unknown output format."""

    def __init__(self, output_format: str):
        self.output_format = output_format
        super().__init__(f"Invalid output format: {output_format}")


class BaseDirNotSetError(ConfigurationError):
    """Exception raised when no root directory was given and GIT_PATH is unset."""

    def __init__(self):
        super().__init__("GIT_PATH environment variable not set and no directory given")


class GitOperationError(GitExtendError):
    """Exception raised for errors in Git operations."""

    def __init__(
        self,
        operation: str,
        path: Optional[Union[str, Path]] = None,
        message: Optional[str] = None,
    ):
        self.operation = operation
        self.path = path
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if path:
            error_msg += f" for '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class RepositoryOpenError(GitOperationError):
    """Exception raised when a path cannot be opened as a git repository."""

    def __init__(self, path: Union[str, Path], message: Optional[str] = None):
        super().__init__("open_repository", path, message)
