# marketplace/domain/errors.py


class MarketplaceError(Exception):
    """Bazowy blad domeny, mapowany 1:1 na status HTTP i {"error": message}."""

    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class DuplicateUsername(MarketplaceError):
    status_code = 400
    message = "Username already exists"


class InvalidCredentials(MarketplaceError):
    # ten sam komunikat dla zlego hasla i nieistniejacego usera
    status_code = 401
    message = "Invalid credentials"


class Unauthorized(MarketplaceError):
    status_code = 403
    message = "Unauthorized"


class UpstreamFetchFailure(Exception):
    """Blad pobierania strony obrazka. Zawsze obslugiwany w ImageResolver."""
