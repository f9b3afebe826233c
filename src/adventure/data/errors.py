"""Custom exceptions for scenario data validation."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataValidationError(DataError):
    """Raised when scenario definitions fail structural validation."""


class DataReferenceError(DataError):
    """Raised when definitions reference missing scenarios."""
