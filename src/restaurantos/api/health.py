from fastapi import APIRouter, Depends

from restaurantos.api.deps import get_restaurant
from restaurantos.crud import Restaurant
from restaurantos.models.order import utcnow

router = APIRouter()


@router.get("/health", summary="Health check")
async def health_check(restaurant: Restaurant = Depends(get_restaurant)):
    """
    Liveness plus the number of live event subscribers.
    """
    return {
        "status": "ok",
        "version": restaurant.settings.VERSION,
        "subscribers": restaurant.events.subscriber_count,
        "timestamp": utcnow(),
    }
