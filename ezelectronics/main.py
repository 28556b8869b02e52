# ezelectronics/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from ezelectronics.api.errors import register_exception_handlers
from ezelectronics.api.routers import carts, health, products, reviews, users
from ezelectronics.data.database import init_db
from ezelectronics.utils.logging import RequestLoggingMiddleware, get_logger, setup_logging
from ezelectronics.utils.settings import SERVICE_NAME

logger = get_logger(__name__)


def create_app(create_tables: bool = True) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if create_tables:
            try:
                init_db()
            except Exception as e:
                logger.critical(f"Failed to create tables: {e}")
                raise
        yield

    app = FastAPI(
        title="EZElectronics",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware, service_name=SERVICE_NAME)
    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(reviews.router)

    return app


setup_logging()
app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
