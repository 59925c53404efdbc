"""
Custom exceptions for the medal pipeline with user-friendly error messages.
"""

class MedalBotException(Exception):
    """Base exception for steamid/medal errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class InvalidIdentifierError(MedalBotException):
    """Raised when a Steam ID is not made of decimal digits only."""
    def __init__(self, raw_value: str):
        super().__init__(
            f"Invalid Steam ID {raw_value!r}",
            "Invalid steamID. It should only consist of numbers"
        )
        self.raw_value = raw_value

class StoreError(MedalBotException):
    """Raised when the linked-account store fails."""
    DELETE_OPERATION = "delete linked account"

    def __init__(self, operation: str, cause: Exception):
        if operation == self.DELETE_OPERATION:
            user_message = f"Failed to find and remove steamID {cause}"
        else:
            user_message = f"Failed to find and add/ update ID. {cause}"
        super().__init__(f"Store error during {operation}: {cause}", user_message)
        self.operation = operation
        self.cause = cause

class ExternalApiError(MedalBotException):
    """Raised when any OpenDota request fails."""
    def __init__(self, resource: str, details: str = None):
        super().__init__(
            f"OpenDota request for {resource} failed: {details}",
            "Invalid API response, check that the id was correct!"
        )
        self.resource = resource

class MissingProfileError(MedalBotException):
    """Raised when OpenDota returns no usable profile for the account."""
    def __init__(self, steam_id: str = None):
        super().__init__(
            f"No public profile for Steam ID {steam_id}",
            "Unable to retrieve dota profile. Is your profile public and have you played matches?"
        )
        self.steam_id = steam_id

class RoleResolutionError(MedalBotException):
    """Raised when the medal role cannot be found or granted."""
    def __init__(self, medal: str, reason: str = None):
        super().__init__(
            f"Could not assign role '{medal}': {reason or 'no role with that name'}",
            f"No '{medal}' role could be assigned in this server."
        )
        self.medal = medal
