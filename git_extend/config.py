"""Configuration handling for git-extend"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from git_extend.constants import BASE_DIR_ENV_VAR, OUTPUT_FORMATS, OUTPUT_FORMAT_TREE
from git_extend.exceptions import BaseDirNotSetError, InvalidOutputFormatError


def resolve_base_dir(
    provided_dir: Optional[str], environ: Optional[Mapping[str, str]] = None
) -> str:
    """Return the explicit root directory, falling back to $GIT_PATH.

    Raises:
        BaseDirNotSetError: when neither is available
    """
    if provided_dir:
        return provided_dir
    if environ is None:
        environ = os.environ
    base_dir = environ.get(BASE_DIR_ENV_VAR)
    if not base_dir:
        raise BaseDirNotSetError()
    return base_dir


@dataclass
class Config:
    """Configuration for a git-list run with validation."""

    base_dir: Union[str, Path, None] = None
    output_format: str = OUTPUT_FORMAT_TREE

    # Execution modes
    color: bool = True
    verbose: bool = False
    debug: bool = False
    sequential: bool = False  # Resolve repositories one at a time
    workers: Optional[int] = None  # Number of parallel workers (None = auto-detect)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_output_format()
        self._validate_base_dir()
        self._validate_workers()

    def _validate_output_format(self):
        """Validate output_format is one of allowed values."""
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidOutputFormatError(self.output_format)

    def _validate_base_dir(self):
        """Validate base_dir is set and normalize it to an absolute path."""
        if self.base_dir is None or not str(self.base_dir).strip():
            raise BaseDirNotSetError()
        self.base_dir = Path(str(self.base_dir).strip()).expanduser().resolve()

    def _validate_workers(self):
        """Validate workers is positive when given."""
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "base_dir": str(self.base_dir),
            "output_format": self.output_format,
            "color": self.color,
            "verbose": self.verbose,
            "debug": self.debug,
            "sequential": self.sequential,
            "workers": self.workers,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "base_dir",
            "output_format",
            "color",
            "verbose",
            "debug",
            "sequential",
            "workers",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
