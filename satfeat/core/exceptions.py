"""
satfeat.core.exceptions

All custom exceptions for satfeat.

Design: Fail fast and loud with informative errors.
"""


class SatFeatError(Exception):
    """Base exception for all satfeat errors."""
    pass


class ValidationError(SatFeatError):
    """Input validation failed.

    Raised when clauses, literals or parameters fail boundary checks.
    """
    pass


class ConfigError(SatFeatError):
    """Configuration invalid or missing.

    Raised when config files are malformed or required fields are absent.
    """
    pass


class NumericalError(SatFeatError):
    """NaN/Inf or other numerical issue.

    Raised when computations produce invalid numerical results.
    """
    pass


class ContractViolationError(SatFeatError):
    """A watch entry that is not a clause was reached during clause iteration.

    The clause database uses index markers for its own bookkeeping; the
    feature traversal must never see one. This is a caller bug, not a
    recoverable condition, and nothing in satfeat catches it.
    """
    pass
