from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.api.deps import get_db
from app.core.exceptions import NotFoundError
from app.services.student import student as crud_student
from app.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()


def _not_found(student_id: int) -> NotFoundError:
    return NotFoundError(f"Student with ID {student_id} not found")


@router.get("", response_model=List[Student])
def get_students(db: Session = Depends(get_db)):
    """
    List every student, most recently created first
    """
    return crud_student.get_students(db)


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: int,
    db: Session = Depends(get_db)
):
    """
    Get one student by ID
    """
    student = crud_student.get_student(db, student_id=student_id)
    if not student:
        raise _not_found(student_id)
    return student


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new student

    Required:
    - **name**: full name
    - **email**: email address (not unique)
    - **age**: integer between 1 and 120, numeric strings are accepted
    - **gender**: free text
    """
    return crud_student.create_student(db=db, student=student)


@router.put("/{student_id}", response_model=Student)
def update_student(
    student_id: int,
    student: StudentUpdate,
    db: Session = Depends(get_db)
):
    """
    Replace all fields of a student
    """
    updated_student = crud_student.update_student(db=db, student_id=student_id, student=student)
    if not updated_student:
        raise _not_found(student_id)
    return updated_student


@router.delete("/{student_id}", response_model=Student)
def delete_student(
    student_id: int,
    db: Session = Depends(get_db)
):
    """
    Delete a student and return the record as it was before deletion
    """
    student = crud_student.delete_student(db=db, student_id=student_id)
    if not student:
        raise _not_found(student_id)
    return student
