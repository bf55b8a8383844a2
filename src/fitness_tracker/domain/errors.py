"""Errors raised by the service layer."""


class FitnessTrackerError(Exception):
    """Base class for expected, user-facing failures."""

    message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class AuthenticationRequired(FitnessTrackerError):
    message = "Authentication token required"


class InvalidToken(FitnessTrackerError):
    message = "Invalid or expired token"


class InvalidCredentials(FitnessTrackerError):
    message = "Wrong Password"


class AccountNotFound(FitnessTrackerError):
    message = "User not found"


class EmailAlreadyExists(FitnessTrackerError):
    message = "Email already exists"


class WorkoutPlanNotFound(FitnessTrackerError):
    message = "Workout plan not found"


class InvalidProfile(FitnessTrackerError):
    message = "Invalid nutrition profile"


class InvalidPreferences(FitnessTrackerError):
    message = "Invalid preferences"
