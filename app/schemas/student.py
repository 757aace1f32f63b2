from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class StudentBase(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    # Same bounds as the client's number input
    age: int = Field(ge=1, le=120)
    gender: str = Field(min_length=1)


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    pass


class StudentInDB(StudentBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):
    pass


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
    student_count: int
