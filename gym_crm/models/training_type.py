from enum import Enum


class TrainingType(str, Enum):
    FITNESS = "FITNESS"
    YOGA = "YOGA"
    ZUMBA = "ZUMBA"
    STRETCHING = "STRETCHING"
    RESISTANCE = "RESISTANCE"
