from datetime import date

from pydantic import BaseModel, Field, field_validator

from gym_crm.schemas.validators import reject_null, validate_birth_date, validate_name


class TraineeCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    address: str | None = Field(None, max_length=255)
    date_of_birth: date | None = None

    @field_validator('first_name', 'last_name')
    @classmethod
    def check_names(cls, v: str) -> str:
        return validate_name(v)

    @field_validator('date_of_birth')
    @classmethod
    def check_birth_date(cls, v: date | None) -> date | None:
        return validate_birth_date(v)


class TraineeUpdate(BaseModel):
    first_name: str | None = Field(None, min_length=1, max_length=50)
    last_name: str | None = Field(None, min_length=1, max_length=50)
    address: str | None = Field(None, max_length=255)
    date_of_birth: date | None = None
    is_active: bool | None = None

    @field_validator('first_name', 'last_name')
    @classmethod
    def check_names(cls, v: str | None) -> str:
        return validate_name(reject_null(v))

    @field_validator('is_active')
    @classmethod
    def check_not_null(cls, v: bool | None) -> bool:
        return reject_null(v)

    @field_validator('date_of_birth')
    @classmethod
    def check_birth_date(cls, v: date | None) -> date | None:
        return validate_birth_date(v)
