import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from restaurantos.config import Settings
from restaurantos.crud import Restaurant
from restaurantos.main import create_app
from restaurantos.schemas.cart import CartItem

RISOTTO = "1"
SALMON = "2"
BURRATA = "3"
LAVA_CAKE = "4"
BEER = "5"
WINE = "6"


class LockedDatabase:
    """Session stand-in whose every query fails the way a locked sqlite file does."""

    def __call__(self):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    get = execute

    async def rollback(self):
        pass


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        SEED_DEMO_DATA=True,
        STRICT_STATUS_TRANSITIONS=True,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
async def restaurant(settings):
    restaurant = await Restaurant.create(settings)
    yield restaurant
    await restaurant.close()


@pytest.fixture
def make_cart(restaurant):
    async def _make_cart(*lines):
        """lines: (menu_item_id, quantity) or (menu_item_id, quantity, instructions)"""
        items = []
        for menu_item_id, quantity, *rest in lines:
            menu_item = await restaurant.menu.get_menu_item(menu_item_id)
            items.append(
                CartItem(menu_item=menu_item, quantity=quantity, special_instructions=rest[0] if rest else None)
            )
        return items

    return _make_cart


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as client:
        yield client
