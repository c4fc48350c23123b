"""
git-extend - List git repositories under a directory with their branch status
"""

from .__version__ import __version__
from .core import RepoLister
from .cli.main import main

__all__ = ["RepoLister", "main", "__version__"]
