import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from restaurantos.errors import TransientIOFailure, ValidationFailed

if TYPE_CHECKING:
    from restaurantos.crud.restaurant import Restaurant

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_input(schema: Type[SchemaT], data: Union[SchemaT, dict]) -> SchemaT:
    """Accept either the schema itself or a plain dict checked against it."""
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ValidationFailed(f"Invalid {schema.__name__}: {e.errors(include_url=False)}") from e


class StoreBase:
    def __init__(self, restaurant: "Restaurant"):
        self.restaurant = restaurant

    @property
    def settings(self):
        return self.restaurant.settings

    @property
    def events(self):
        return self.restaurant.events

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        """
        One session per store operation, under the restaurant-wide lock,
        so a reader never sees half of a write.
        """
        async with self.restaurant.lock:
            async with self.restaurant.sessionmaker() as session:
                try:
                    yield session
                except IntegrityError as e:
                    await session.rollback()
                    logger.warning("Rejected write in %s: %s", type(self).__name__, e.orig)
                    raise ValidationFailed(f"Rejected by the store: {e.orig}") from e
                except OperationalError as e:
                    await session.rollback()
                    logger.warning("Database error in %s: %s", type(self).__name__, e)
                    raise TransientIOFailure("Store temporarily unavailable") from e
