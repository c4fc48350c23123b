"""Shared constants for git-extend."""

from typing import FrozenSet, Tuple


# Environment variable holding the default repositories root
BASE_DIR_ENV_VAR = "GIT_PATH"

# Output formats accepted by git-list
OUTPUT_FORMAT_TREE = "tree"
OUTPUT_FORMAT_FLAT = "flat"
OUTPUT_FORMAT_DUMP = "dump"
OUTPUT_FORMATS: Tuple[str, ...] = (OUTPUT_FORMAT_TREE, OUTPUT_FORMAT_FLAT, OUTPUT_FORMAT_DUMP)

# Directory names the walker never descends into
EXCLUDED_DIRS: FrozenSet[str] = frozenset({
    "node_modules",
    "target",
    "build",
    "dist",
    "out",
    "__pycache__",
    ".cache",
    "vendor",
    "bin",
    "obj",
})

GIT_DIR_NAME = ".git"
HEADS_PREFIX = "refs/heads/"
DETACHED_HEAD = "HEAD"
DEFAULT_REMOTE = "origin"


# Tree drawing
TREE_BRANCH = "├── "
TREE_LAST = "└── "
TREE_PIPE = "│   "
TREE_SPACE = "    "
# Column that continuation branch names are padded towards
BRANCH_ALIGN_WIDTH = 20

NO_REPOSITORIES_MESSAGE = "  No git repositories found"


# Rich styles for status text
STYLE_OK = "green"
STYLE_WARNING = "yellow"
STYLE_UNTRACKED = "red"
