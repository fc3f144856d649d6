"""Ledger business-rule errors.

Read-only operations report problems as values (validation results, reason
strings, diagnostics). The recording operations raise these instead so the
caller never persists a rejected write.
"""
from typing import Any, Dict, List, Optional


class LedgerError(Exception):
    """Base exception for ledger business-rule violations."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_detail(self) -> Dict[str, Any]:
        """Shape used for HTTP error responses."""
        return {"code": self.code, "message": self.message, "details": self.details}


class BuyInError(LedgerError):
    """Raised when a buy-in cannot be recorded for a participant."""
    pass


class CashOutError(LedgerError):
    """Raised when a proposed cash-out fails validation."""

    def __init__(self, errors: List[str], suggested_amount: Optional[float] = None):
        super().__init__(
            ". ".join(errors),
            {"errors": errors, "suggested_amount": suggested_amount},
        )
        self.errors = errors
        self.suggested_amount = suggested_amount


class SettlementError(LedgerError):
    """Raised when an event cannot be finalized."""
    pass
