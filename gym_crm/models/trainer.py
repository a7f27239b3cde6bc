from sqlalchemy import Boolean, Column, Integer, String, Enum as SQLEnum
from sqlalchemy.orm import relationship

from gym_crm.database import Base
from gym_crm.models.training_type import TrainingType


class Trainer(Base):
    __tablename__ = "trainers"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    username = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    specialization = Column(SQLEnum(TrainingType), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    trainings = relationship("Training", back_populates="trainer")

    def __repr__(self):
        return f"<Trainer(id={self.id}, username={self.username}, specialization={self.specialization})>"
