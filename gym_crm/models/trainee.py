from datetime import date

from sqlalchemy import Boolean, Column, Date, Integer, String
from sqlalchemy.orm import relationship, validates

from gym_crm.database import Base


class Trainee(Base):
    __tablename__ = "trainees"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    username = Column(String, unique=True, nullable=False, index=True)  # Уникальный логин
    password = Column(String, nullable=False)  # Хеш пароля
    address = Column(String, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    # Trainings are independent aggregates: deleting a trainee only detaches them
    trainings = relationship("Training", back_populates="trainee")

    @validates("date_of_birth")
    def validate_birth_date(self, key, value):
        if value is not None and value > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return value

    def __repr__(self):
        return f"<Trainee(id={self.id}, username={self.username}, is_active={self.is_active})>"
