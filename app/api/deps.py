from typing import Generator

from fastapi import Request


def get_db(request: Request) -> Generator:
    """
    Dependency that opens a session on the application's database handle.
    The session is closed once the request is finished.
    """
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
