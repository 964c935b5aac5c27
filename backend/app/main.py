import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1 import dispatch, energy, engines, instructions, optimization, simulation, storage
from app.core.logging import RequestLoggingMiddleware, setup_logging
from app.models.database import create_tables, get_session_factory, get_sql_engine
from app.services.seed_service import seed_if_enabled

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    setup_logging(json_format=settings.log_json)
    await create_tables()
    async with get_session_factory()() as session:
        await seed_if_enabled(session)
    logger.info("%s started (%s)", settings.app_name, settings.environment)
    yield
    await get_sql_engine().dispose()


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
    )

    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(engines.router, prefix="/api/v1/engines", tags=["engines"])
    application.include_router(energy.solar_router, prefix="/api/v1/solar", tags=["solar"])
    application.include_router(
        energy.consumption_router, prefix="/api/v1/consumption", tags=["consumption"]
    )
    application.include_router(storage.router, prefix="/api/v1/storage", tags=["storage"])
    application.include_router(
        simulation.router, prefix="/api/v1/simulation", tags=["simulation"]
    )
    application.include_router(
        optimization.router, prefix="/api/v1/optimization", tags=["optimization"]
    )
    application.include_router(optimization.refresh_router, prefix="/api/v1", tags=["optimization"])
    application.include_router(
        instructions.router, prefix="/api/v1/instructions", tags=["instructions"]
    )
    application.include_router(dispatch.router, prefix="/api/v1", tags=["dispatch"])

    @application.get("/health")
    async def health_check() -> dict:
        result: dict = {"status": "ok", "services": {}}

        try:
            async with get_session_factory()() as session:
                await session.execute(text("SELECT 1"))
            result["services"]["database"] = "ok"
        except SQLAlchemyError as e:
            logger.warning("Health check database failure: %s", e)
            result["services"]["database"] = f"error: {e}"
            result["status"] = "degraded"

        return result

    return application


app = create_app()
