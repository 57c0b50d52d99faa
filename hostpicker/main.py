from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from hostpicker.config import settings
from hostpicker.database import close_db, get_db, init_db
from hostpicker.logging_config import get_logger
from hostpicker.routers.participants import router as participants_router
from hostpicker.routers.rounds import router as rounds_router
from hostpicker.routers.selections import router as selections_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup
    await init_db()
    logger.info("Host picker started")
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title="Host Picker",
    description="Random host selection per round, without repeats",
    version=settings.COMMIT_HASH or "dev",
    lifespan=lifespan,
)

# Include routers
app.include_router(
    participants_router, prefix="/api/participants", tags=["participants"]
)
app.include_router(rounds_router, prefix="/api/rounds", tags=["rounds"])
app.include_router(selections_router, prefix="/api/selections", tags=["selections"])


@app.get("/health")
async def health_check(
    db: AsyncSession = Depends(get_db),
) -> Dict[str, Optional[str]]:
    """Health check endpoint with database connectivity."""
    try:
        # Test database connection
        result = await db.execute(text("SELECT 1"))
        db_status = "connected" if result.scalar() == 1 else "error"
    except Exception:
        logger.exception("Health check could not reach the database")
        db_status = "disconnected"

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "database": db_status,
        "environment": settings.ENV,
        "version": settings.COMMIT_HASH,
    }


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


# If run directly, start the server
if __name__ == "__main__":
    run()
