"""
FastAPI application entry point
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from remotejobs.app.api.v1 import auth, jobs, subscription
from remotejobs.app.api.v1.user import profile_router, resume_router, saved_jobs_router
from remotejobs.app.core.config import Settings, get_settings
from remotejobs.app.core.errors import register_exception_handlers
from remotejobs.app.core.logging_config import get_logger, setup_logging
from remotejobs.app.db.base import Base
from remotejobs.app.db.session import build_engine, build_session_factory, database_is_up
from remotejobs.app.utils import cache

# Import models so they register with Base.metadata
import remotejobs.app.models  # noqa: F401

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    await cache.connect(settings.redis_url)
    logger.info("%s %s started (environment=%s)", settings.app_name, settings.app_version, settings.environment)
    yield
    await cache.disconnect()
    app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an application with its own settings, engine and session factory."""
    settings = settings or get_settings()

    engine = build_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Remote job listings, accounts, profiles and saved jobs",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
    app.include_router(profile_router, prefix="/api/user", tags=["profile"])
    app.include_router(resume_router, prefix="/api/user", tags=["resume"])
    app.include_router(saved_jobs_router, prefix="/api/user", tags=["saved jobs"])
    app.include_router(subscription.router, prefix="/api", tags=["subscription"])
    app.include_router(jobs.router, prefix="/api/jobs", tags=["jobs"])

    @app.get("/")
    def read_root():
        """Root endpoint"""
        return {"message": f"{settings.app_name} API", "version": settings.app_version}

    @app.get("/api/health")
    def health_check(request: Request):
        """Health check endpoint"""
        up = database_is_up(request.app.state.engine)
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "Connected" if up else "Disconnected",
        }

    return app


def main() -> None:
    import uvicorn

    setup_logging()
    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
