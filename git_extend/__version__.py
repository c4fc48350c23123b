"""Version information for git-extend."""

try:
    from git_extend._version import __version__
except ImportError:
    # Fallback when running from a source checkout without a build
    __version__ = "0.1.0"
