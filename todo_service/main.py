"""
Application factory and process entry point.

`python -m todo_service.main` serves on settings.PORT.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import uvicorn

from .config import settings
from .db import init_db
from .error_handlers import register_error_handlers
from .routes import auth, todos, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    yield


def create_app(api_prefix: str = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        api_prefix: Mount point for the auth and todo routers. Defaults to
                    settings.API_PREFIX; "/api" gives /api/auth/... and /api/todos.
    """
    if api_prefix is None:
        api_prefix = settings.API_PREFIX

    application = FastAPI(
        title=settings.APP_NAME,
        description="Multi-user todo lists with JWT authentication",
        version=VERSION,
        docs_url="/api-docs",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    application.include_router(auth.router, prefix=api_prefix)
    application.include_router(todos.router, prefix=api_prefix)
    application.include_router(health.router)

    @application.get("/")
    def root():
        return {"service": settings.APP_NAME, "version": VERSION, "status": "running"}

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
