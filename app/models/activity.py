# app/models/activity.py
"""
Append-only audit trail shown on the admin dashboard feed.
Rows are written by the storage façade as a side effect of mutations and never updated.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from app.database import Base


class Activity(Base):
    __tablename__ = "activities"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(50), nullable=False, index=True)   # vehicle_created | feedback_created | feedback_resolved
    title = Column(String(200), nullable=False)
    description = Column(Text)
    timestamp = Column(DateTime, nullable=False, index=True)
    user_id = Column(Integer)
    entity_type = Column(String(50))
    entity_id = Column(Integer)

    def __repr__(self):
        return f"<Activity {self.id} type={self.type} {self.entity_type}#{self.entity_id}>"
