# gym_crm/errors/profile_errors.py

class ProfileError(Exception):
    """Base exception for trainee and trainer profile errors."""
    pass

class TraineeNotFoundError(ProfileError):
    """Raised when a trainee is not found."""
    pass

class TrainerNotFoundError(ProfileError):
    """Raised when a trainer is not found."""
    pass

class UsernameAlreadyExistsError(ProfileError):
    """Raised when a profile is saved with a username that is already taken."""

    def __init__(self, username: str):
        super().__init__(f"Username '{username}' already exists")
        self.username = username

class UsernameGenerationError(ProfileError):
    """Raised when no free username candidate could be produced."""
    pass

class WeakPasswordError(ProfileError):
    """Raised when a new password does not satisfy the password policy."""
    pass

class PasswordMismatchError(ProfileError):
    """Raised when the supplied old password does not match the stored hash."""
    pass

class InactiveProfileError(ProfileError):
    """Raised when an operation is attempted with an inactive trainee or trainer."""
    pass
