# app/models/user.py
"""
Admin users table. Only admins can sign in to the dashboard.
Passwords are stored as bcrypt hashes and never leave the API.
"""

from sqlalchemy import Column, Integer, String, Boolean
from app.database import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)   # bcrypt hash
    is_admin = Column(Boolean, default=False)

    def __repr__(self):
        return f"<User {self.username} admin={self.is_admin}>"
