"""Base exception shared by all CCRM components."""


class CcrmError(Exception):
    """Base exception for CCRM errors."""
