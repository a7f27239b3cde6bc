from pydantic import BaseModel, Field, field_validator

from gym_crm.models.training_type import TrainingType
from gym_crm.schemas.validators import reject_null, validate_name


class TrainerCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    specialization: TrainingType

    @field_validator('first_name', 'last_name')
    @classmethod
    def check_names(cls, v: str) -> str:
        return validate_name(v)


class TrainerUpdate(BaseModel):
    first_name: str | None = Field(None, min_length=1, max_length=50)
    last_name: str | None = Field(None, min_length=1, max_length=50)
    specialization: TrainingType | None = None
    is_active: bool | None = None

    @field_validator('first_name', 'last_name')
    @classmethod
    def check_names(cls, v: str | None) -> str:
        return validate_name(reject_null(v))

    @field_validator('specialization', 'is_active')
    @classmethod
    def check_not_null(cls, v):
        return reject_null(v)
