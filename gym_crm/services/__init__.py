from .trainee import TraineeService
from .trainer import TrainerService
from .training import TrainingService
