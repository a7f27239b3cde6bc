from .training_type import TrainingType
from .trainee import Trainee
from .trainer import Trainer
from .training import Training
