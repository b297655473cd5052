"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to and a short snake_case code;
``main.py`` renders them as ``{"detail": code}`` the same way
``HTTPException`` is rendered.
"""


class BankError(Exception):
    status_code: int = 400
    detail: str = "bad_request"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class AccountNotFound(BankError):
    status_code = 404
    detail = "account_not_found"


class OwnerNotFound(BankError):
    status_code = 404
    detail = "user_not_found"


class NotOwner(BankError):
    status_code = 401
    detail = "not_account_owner"


class DuplicateAccount(BankError):
    status_code = 400
    detail = "account_exists"


class EmailTaken(BankError):
    status_code = 400
    detail = "email_exists"


class InsufficientFunds(BankError):
    status_code = 400
    detail = "insufficient_funds"


class SameAccount(BankError):
    status_code = 400
    detail = "same_account"


class CurrencyMismatch(BankError):
    status_code = 400
    detail = "currency_mismatch"


class InvalidAmount(BankError):
    status_code = 400
    detail = "invalid_amount"


class InvalidFormat(BankError):
    status_code = 400
    detail = "invalid_format"


class InvalidCredentials(BankError):
    status_code = 401
    detail = "bad_credentials"
