from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas.student import HealthStatus
from app.services.student import student as crud_student

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
def health(db: Session = Depends(get_db)):
    """
    Health check endpoint, also reports how many students are stored
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc),
        "student_count": crud_student.count_students(db),
    }
