from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey, Text, JSON
from todoapp.core.database import Base
from todoapp.utils.timezone import utcnow

class UserPreference(Base):
    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False)

    # Most recently used categories, oldest first
    preferred_categories = Column(JSON, default=list, nullable=False)

    working_hours_start = Column(Integer, default=9, nullable=False) # 0-23
    working_hours_end = Column(Integer, default=17, nullable=False) # 0-23

    # Opaque client-side model blobs
    priority_model = Column(Text, nullable=True)
    category_model = Column(Text, nullable=True)
    duration_model = Column(Text, nullable=True)

    average_tasks_per_day = Column(Float, default=0, nullable=False)
    high_priority_completion_rate = Column(Float, default=0, nullable=False)
    average_completion_time = Column(Float, default=0, nullable=False) # days
    last_calculated = Column(DateTime(timezone=True), default=utcnow)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    @property
    def working_hours(self) -> dict:
        return {"start": self.working_hours_start, "end": self.working_hours_end}

    @property
    def ml_models(self) -> dict:
        return {
            "priority_model": self.priority_model,
            "category_model": self.category_model,
            "duration_model": self.duration_model,
        }

    @property
    def productivity(self) -> dict:
        return {
            "average_tasks_per_day": self.average_tasks_per_day,
            "high_priority_completion_rate": self.high_priority_completion_rate,
            "average_completion_time": self.average_completion_time,
            "last_calculated": self.last_calculated,
        }
