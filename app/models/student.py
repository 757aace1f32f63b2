from sqlalchemy import Column, DateTime, Integer, String, func
from app.core.database import Base


class Student(Base):
    __tablename__ = "student_details"
    # AUTOINCREMENT keeps ids from being reused after a delete
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
