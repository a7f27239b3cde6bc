from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Enum as SQLEnum
from sqlalchemy.orm import relationship

from gym_crm.database import Base
from gym_crm.models.training_type import TrainingType


class Training(Base):
    __tablename__ = "trainings"

    id = Column(Integer, primary_key=True, index=True)
    trainee_id = Column(Integer, ForeignKey("trainees.id", ondelete="SET NULL"), nullable=True, index=True)
    trainer_id = Column(Integer, ForeignKey("trainers.id", ondelete="SET NULL"), nullable=True, index=True)
    training_name = Column(String, nullable=False)
    training_type = Column(SQLEnum(TrainingType), nullable=False)
    training_date = Column(DateTime, nullable=False, index=True)
    duration = Column(Integer, nullable=True)  # Длительность в минутах

    # Relationships
    trainee = relationship("Trainee", back_populates="trainings")
    trainer = relationship("Trainer", back_populates="trainings")

    def __repr__(self):
        return f"<Training(id={self.id}, name={self.training_name}, type={self.training_type}, date={self.training_date})>"
