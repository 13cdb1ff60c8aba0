"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class UnsupportedCurrencyError(AppError):
    """Raised when no rate exists for a currency, even after a refresh."""

    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"Unsupported currency: {currency}", code="UNSUPPORTED_CURRENCY")


class InvalidSplitError(AppError):
    """Raised when split input cannot be allocated."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_SPLIT")


class SplitMismatchError(AppError):
    """Raised when fixed split amounts do not add up to the expense total."""

    def __init__(self, total: str, allocated: str):
        super().__init__(
            f"Split amounts must equal the total: total {total}, allocated {allocated}",
            code="SPLIT_MISMATCH",
        )


class UnknownMemberError(AppError):
    """Raised when a ledger entry references someone outside the roster."""

    status_code = 409

    def __init__(self, member_id: str, expense_id: str):
        self.member_id = member_id
        self.expense_id = expense_id
        super().__init__(
            f"Expense {expense_id} references unknown member: {member_id}",
            code="UNKNOWN_MEMBER",
        )


class RateProviderUnavailableError(AppError):
    """Raised when the exchange rate provider cannot be reached."""

    status_code = 503

    def __init__(self, reason: str):
        super().__init__(f"Exchange rate provider unavailable: {reason}", code="RATE_PROVIDER_UNAVAILABLE")
