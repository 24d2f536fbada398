import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from restaurantos.api import health
from restaurantos.api.routes.dashboards import router as dashboards_router
from restaurantos.api.routes.events import router as events_router
from restaurantos.api.routes.guest import router as guest_router
from restaurantos.api.routes.menu import router as menu_router
from restaurantos.api.routes.orders import router as orders_router
from restaurantos.api.routes.tables import router as tables_router
from restaurantos.api.routes.tickets import router as tickets_router
from restaurantos.config import Settings, settings as default_settings
from restaurantos.crud import Restaurant
from restaurantos.errors import RestaurantError, TransientIOFailure
from restaurantos.logs import setup_logging

logger = logging.getLogger(__name__)


async def restaurant_error_handler(request: Request, exc: RestaurantError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    headers = {"Retry-After": str(exc.retry_after)} if isinstance(exc, TransientIOFailure) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.restaurant = await Restaurant.create(settings)
        logger.info("Application started")
        yield
        await app.state.restaurant.close()
        logger.info("Application stopped")

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    app.add_exception_handler(RestaurantError, restaurant_error_handler)

    app.include_router(health.router)
    app.include_router(menu_router)
    app.include_router(tables_router)
    app.include_router(guest_router)
    app.include_router(orders_router)
    app.include_router(tickets_router)
    app.include_router(dashboards_router)
    app.include_router(events_router)
    return app


app = create_app()
