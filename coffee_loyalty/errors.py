from fastapi import HTTPException


class LoyaltyError(HTTPException):
    """Base error for loyalty operations; carries the HTTP status it maps to."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(status_code=type(self).status_code, detail=message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(LoyaltyError):
    """Malformed or missing input, including badly formed identifiers."""

    status_code = 400


class NotFoundError(LoyaltyError):
    status_code = 404


class BusinessRuleViolation(LoyaltyError):
    """Expired membership, insufficient points, duplicate names and the like."""

    status_code = 400


class StorageError(LoyaltyError):
    status_code = 500
