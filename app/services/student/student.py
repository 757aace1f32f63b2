import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StorageError
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(db: Session, action: str):
    """Roll back and turn driver errors into StorageError with a generic message."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error {action}: {e}", exc_info=True)
        raise StorageError(f"Failed to {action}") from e


def get_student(db: Session, student_id: int) -> Optional[Student]:
    """Get one student by ID"""
    with _storage_errors(db, "retrieve student"):
        return db.get(Student, student_id)


def get_students(db: Session) -> List[Student]:
    """All students, newest first"""
    with _storage_errors(db, "retrieve students"):
        return db.query(Student).order_by(Student.id.desc()).all()


def count_students(db: Session) -> int:
    with _storage_errors(db, "count students"):
        return db.query(func.count(Student.id)).scalar()


def create_student(db: Session, student: StudentCreate) -> Student:
    """Insert a student and return the stored row with id and created_at"""
    with _storage_errors(db, "add student"):
        db_student = Student(
            name=student.name,
            email=student.email,
            age=student.age,
            gender=student.gender
        )
        db.add(db_student)
        db.commit()
        db.refresh(db_student)
        return db_student


def update_student(db: Session, student_id: int, student: StudentUpdate) -> Optional[Student]:
    """Overwrite all four fields; created_at is left alone"""
    with _storage_errors(db, "update student"):
        db_student = db.get(Student, student_id)
        if db_student:
            db_student.name = student.name
            db_student.email = student.email
            db_student.age = student.age
            db_student.gender = student.gender
            db.commit()
            db.refresh(db_student)
        return db_student


def delete_student(db: Session, student_id: int) -> Optional[Student]:
    """Delete a student and return the row as it was before removal"""
    with _storage_errors(db, "delete student"):
        db_student = db.get(Student, student_id)
        if db_student:
            db.delete(db_student)
            db.commit()
        return db_student
