# marketplace/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from marketplace.api.routers import auth, products, health
from marketplace.data.database import init_db
from marketplace.domain.errors import MarketplaceError
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


async def marketplace_error_handler(request: Request, exc: MarketplaceError):
    """Bledy domeny -> {"error": "..."} z odpowiednim statusem."""
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing database...")
    init_db()
    yield


def create_app(init_database: bool = True) -> FastAPI:
    app = FastAPI(
        title="Marketplace",
        version="1.0.0",
        lifespan=lifespan if init_database else None,
    )

    app.add_exception_handler(MarketplaceError, marketplace_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(products.router)

    return app
