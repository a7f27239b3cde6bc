from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from gym_crm.models.training_type import TrainingType


class TrainingCreate(BaseModel):
    trainee_username: str = Field(..., min_length=1)
    trainer_username: str = Field(..., min_length=1)
    training_name: str = Field(..., min_length=1, max_length=100)
    training_type: TrainingType
    training_date: datetime
    duration: int | None = Field(None, gt=0, description="Duration in minutes")


class TrainingSearch(BaseModel):
    """
    Criteria for the trainee/trainer training history queries.
    Every field is a mandatory filter; the date range is inclusive by day.
    """
    trainee_username: str = Field(..., min_length=1)
    trainer_username: str = Field(..., min_length=1)
    date_from: date
    date_to: date
    training_type: TrainingType

    @model_validator(mode='after')
    def validate_date_range(self) -> 'TrainingSearch':
        if self.date_from > self.date_to:
            raise ValueError('date_from cannot be after date_to')
        return self
