# gym_crm/errors/training_errors.py

class TrainingError(Exception):
    """Base exception for training-related errors."""
    pass

class TrainingNotFoundError(TrainingError):
    """Raised when a training is not found."""
    pass
