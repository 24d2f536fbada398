import asyncio
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine

from restaurantos.config import Settings
from restaurantos.db.session import create_engine, create_schema, create_sessionmaker
from restaurantos.models import MenuCategoryEnum, MenuItem, Table, TableStatusEnum
from restaurantos.services import seed
from restaurantos.services.events import EventBus

from .menu import MenuCatalog
from .order import OrderStore
from .table import TableStore

logger = logging.getLogger(__name__)


class Restaurant:
    """
    Owns the whole in-memory state: database, the lock every store
    operation runs under, and the event bus. Built once per process and
    handed to whoever needs the stores.
    """

    def __init__(self, engine: AsyncEngine, settings: Settings):
        self.settings = settings
        self.engine = engine
        self.sessionmaker = create_sessionmaker(engine)
        self.lock = asyncio.Lock()
        self.events = EventBus(queue_size=settings.EVENT_QUEUE_SIZE)

        self.menu = MenuCatalog(self)
        self.tables = TableStore(self)
        self.orders = OrderStore(self)

    @classmethod
    async def create(cls, settings: Settings) -> "Restaurant":
        engine = create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        await create_schema(engine)
        restaurant = cls(engine, settings)
        if settings.SEED_DEMO_DATA:
            await restaurant.seed_demo_data()
        return restaurant

    async def seed_demo_data(self) -> None:
        async with self.lock:
            async with self.sessionmaker() as db:
                has_menu = await db.scalar(select(func.count()).select_from(MenuItem))
                if not has_menu:
                    for position, row in enumerate(seed.MENU_ITEMS):
                        db.add(MenuItem(
                            **{**row, "category": MenuCategoryEnum(row["category"])},
                            position=position,
                        ))
                has_tables = await db.scalar(select(func.count()).select_from(Table))
                if not has_tables:
                    for row in seed.TABLES:
                        db.add(Table(**{**row, "status": TableStatusEnum(row["status"])}))
                await db.commit()
        logger.info("Demo data loaded: %d menu items, %d tables", len(seed.MENU_ITEMS), len(seed.TABLES))

    async def close(self) -> None:
        await self.engine.dispose()
