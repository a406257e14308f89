import logging
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from typing import List

from dubai_horizon.config import get_default_currency
from dubai_horizon.data_managers import (
    BookingDataManager,
    ClientStateStore,
    get_booking_data_manager,
    get_client_state_store,
)
from dubai_horizon.dependencies import get_client_key, get_current_user
from dubai_horizon.models.booking import Booking, BookingCreate, BookingItem
from dubai_horizon.models.user import CurrentUser
from dubai_horizon.services import cart_state
from dubai_horizon.services.notifications import notify_booking_created

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
    responses={401: {"description": "Not authenticated"}},
)


@router.post("/", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingCreate,
    background_tasks: BackgroundTasks,
    client_key: str = Depends(get_client_key),
    user: CurrentUser = Depends(get_current_user),
    store: ClientStateStore = Depends(get_client_state_store),
    bookings: BookingDataManager = Depends(get_booking_data_manager),
):
    cart = store.load_cart(client_key)
    if not cart.items:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please add items to your cart before booking."
        )

    booking = Booking(
        user_id=user.id,
        name=payload.name,
        phone=payload.phone,
        travel_date=payload.travel_date,
        items=[
            BookingItem(
                id=item.destination_id,
                name=item.name,
                quantity=item.quantity,
                price=item.price,
                currency=item.currency,
            )
            for item in cart.items
        ],
        total_cost=cart_state.total_cost(cart),
        currency=cart.items[0].currency or get_default_currency(),
    )
    bookings.add(booking.model_dump(mode="json"))
    logger.info("Booking %s created for user %s (%d items)", booking.id, user.id, len(booking.items))

    store.save_cart(client_key, cart_state.clear_cart(cart))
    background_tasks.add_task(notify_booking_created, booking)
    return booking


@router.get("/", response_model=List[Booking])
async def get_my_bookings(
    user: CurrentUser = Depends(get_current_user),
    bookings: BookingDataManager = Depends(get_booking_data_manager),
):
    return bookings.for_user(user.id)
