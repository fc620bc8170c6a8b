"""CCRM - Campus Course & Records Manager."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the current version of CCRM."""
    return __version__
