from .trainee import TraineeCreate, TraineeUpdate
from .trainer import TrainerCreate, TrainerUpdate
from .training import TrainingCreate, TrainingSearch
