"""
Guest model
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime

from app.core.db import Base

class Guest(Base):
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    unique_id = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    qr_code = Column(Text, nullable=False)  # data:image/png;base64,...
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Guest(id={self.id}, unique_id='{self.unique_id}', name='{self.name}')>"
