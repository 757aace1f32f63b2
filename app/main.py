from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import settings
from app.core.database import init_db
from app.core.handlers import register_exception_handlers
from app.core.logging import logger


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    Build the API application.

    The database handle is opened in the lifespan and closed on shutdown;
    ``database_url`` overrides ``settings.DATABASE_URL`` (used by tests).
    """
    url = database_url or settings.DATABASE_URL

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.db = init_db(url, echo=settings.DB_ECHO_SQL)
        try:
            yield
        finally:
            app.state.db.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router)

    @app.get("/")
    def root():
        return {
            "message": "Welcome to Student Management API",
            "docs": "/docs",
            "version": settings.APP_VERSION
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Server running on http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
