import logging

from app.core.config import settings
from app.core.database import init_db
from app.models.student import Student

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def seed_data(url: str = settings.DATABASE_URL):
    """
    Function to seed initial data into the database.
    """
    database = init_db(url)
    db = database.session()
    try:
        # Check if data already exists to avoid duplication
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")

        students = [
            Student(name="Nguyen Van A", email="vana@example.com", age=20, gender="Male"),
            Student(name="Tran Thi B", email="thib@example.com", age=21, gender="Female"),
            Student(name="Le Van C", email="vanc@example.com", age=22, gender="Other"),
        ]

        db.add_all(students)
        db.commit()

        logger.info("Data seeded successfully!")

    except Exception:
        db.rollback() # Rollback if error occurs
        raise
    finally:
        db.close() # Always close the connection
        database.close()

if __name__ == "__main__":
    seed_data()
