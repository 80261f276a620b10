from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Text
from sqlalchemy.orm import validates
from todoapp.core.database import Base
from todoapp.utils.timezone import utcnow

TASK_PRIORITIES = ("low", "medium", "high")

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, default=False, nullable=False, index=True)
    priority = Column(String, default="medium", nullable=False)
    category = Column(String, default="other", nullable=False)
    due_date = Column(DateTime(timezone=True), nullable=True)
    reminder = Column(DateTime(timezone=True), nullable=True)
    reminder_sent = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    @validates("completed")
    def _sync_completed_at(self, key, value):
        # completed_at is set exactly when completed is true
        if value and self.completed_at is None:
            self.completed_at = utcnow()
        elif not value:
            self.completed_at = None
        return value
