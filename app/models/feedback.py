# app/models/feedback.py
"""
Passenger feedback about a ride. Linked to a vehicle by plate number value only,
so feedback survives deletion of the vehicle it was written about.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean
from app.database import Base


class Feedback(Base):
    __tablename__ = "feedbacks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    passenger_name = Column(String(200), nullable=False)
    passenger_email = Column(String(255))
    plate_number = Column(String(50), nullable=False, index=True)
    rating = Column(Integer, nullable=False)                 # 1..5
    feedback_type = Column(String(20), nullable=False)       # compliment | suggestion | complaint | report
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, index=True)
    resolved = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<Feedback {self.id} plate={self.plate_number} type={self.feedback_type} resolved={self.resolved}>"
