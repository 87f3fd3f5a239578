"""Local-model commit message generator for the prepare-commit-msg hook."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ollacommit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
