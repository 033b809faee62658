"""Custom exceptions for the domain model.

The model itself handles most abnormal input by policy rather than by raising:
age-gate violations revert silently and unsupported currencies make
``Money.convert`` a no-op. The exceptions here cover the opt-in strict paths.
All of them inherit from DomainModelError.

Example:
    try:
        total = wages.add(bonus, strict=True)
    except UnsupportedCurrencyError as e:
        logger.warning("conversion_failed", **e.details)
"""

from typing import Any, Optional


class DomainModelError(Exception):
    """Base exception for all domain model errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the error is potentially recoverable.

    Example:
        >>> raise DomainModelError("Something went wrong", details={"code": 500})
        DomainModelError: Something went wrong
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize DomainModelError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context about the error.
            recoverable: Whether the caller can retry with corrected input.
                Defaults to False.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class UnsupportedCurrencyError(DomainModelError):
    """Error raised by strict conversions when a currency has no exchange rate.

    Attributes:
        source: Currency code of the amount being converted.
        target: Currency code requested.

    Example:
        >>> raise UnsupportedCurrencyError(
        ...     "Unsupported exchange currency",
        ...     source="XYZ",
        ...     target="USD",
        ... )
        UnsupportedCurrencyError: Unsupported exchange currency
    """

    def __init__(
        self,
        message: str,
        *,
        source: Optional[str] = None,
        target: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize UnsupportedCurrencyError.

        Args:
            message: Human-readable error description.
            source: Currency code of the original amount.
            target: Currency code the caller asked for.
            details: Optional dictionary with additional context.
            recoverable: Defaults to True since the caller can retry with a
                supported currency code.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.source = source
        self.target = target

        if source:
            self.details["source"] = source
        if target:
            self.details["target"] = target


__all__ = [
    "DomainModelError",
    "UnsupportedCurrencyError",
]
