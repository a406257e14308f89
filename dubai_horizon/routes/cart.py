from fastapi import APIRouter, Depends, HTTPException, status
from uuid import UUID

from dubai_horizon.data_managers import (
    ClientStateStore,
    DestinationDataManager,
    get_client_state_store,
    get_destination_data_manager,
)
from dubai_horizon.dependencies import get_client_key
from dubai_horizon.models.cart import (
    AddToCartRequest,
    AddToWishlistRequest,
    CartItem,
    CartState,
    CartView,
    UpdateQuantityRequest,
    WishlistItem,
    WishlistState,
    WishlistView,
)
from dubai_horizon.models.destination import Destination
from dubai_horizon.services import cart_state

cart_router = APIRouter(prefix="/cart", tags=["cart"])
wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])


def cart_view(state: CartState) -> CartView:
    return CartView(
        items=state.items,
        total_items=cart_state.total_items(state),
        total_cost=cart_state.total_cost(state),
    )


def load_destination(destination_id: UUID, destinations: DestinationDataManager) -> Destination:
    destination = destinations.get_by_id(destination_id)
    if not destination:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": f"Destination with ID {destination_id} not found"}
        )
    return Destination(**destination)


def item_not_in_cart(destination_id: UUID):
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"message": f"Destination with ID {destination_id} is not in the cart"}
    )


@cart_router.get("/", response_model=CartView)
async def get_cart(
    client_key: str = Depends(get_client_key),
    store: ClientStateStore = Depends(get_client_state_store),
):
    return cart_view(store.load_cart(client_key))


@cart_router.post("/items", response_model=CartView, status_code=status.HTTP_201_CREATED)
async def add_cart_item(
    payload: AddToCartRequest,
    client_key: str = Depends(get_client_key),
    store: ClientStateStore = Depends(get_client_state_store),
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
):
    destination = load_destination(payload.destination_id, destinations)
    state = cart_state.add_to_cart(
        store.load_cart(client_key), CartItem.from_destination(destination), payload.quantity
    )
    store.save_cart(client_key, state)
    return cart_view(state)


@cart_router.patch("/items/{destination_id}", response_model=CartView)
async def update_cart_item(
    destination_id: UUID,
    payload: UpdateQuantityRequest,
    client_key: str = Depends(get_client_key),
    store: ClientStateStore = Depends(get_client_state_store),
):
    state = store.load_cart(client_key)
    if not cart_state.is_in_cart(state, destination_id):
        raise item_not_in_cart(destination_id)
    state = cart_state.update_quantity(state, destination_id, payload.quantity)
    store.save_cart(client_key, state)
    return cart_view(state)


@cart_router.delete("/items/{destination_id}", response_model=CartView)
async def remove_cart_item(
    destination_id: UUID,
    client_key: str = Depends(get_client_key),
    store: ClientStateStore = Depends(get_client_state_store),
):
    state = store.load_cart(client_key)
    if not cart_state.is_in_cart(state, destination_id):
        raise item_not_in_cart(destination_id)
    state = cart_state.remove_from_cart(state, destination_id)
    store.save_cart(client_key, state)
    return cart_view(state)


@cart_router.delete("/", response_model=CartView)
async def clear_cart(
    client_key: str = Depends(get_client_key),
    store: ClientStateStore = Depends(get_client_state_store),
):
    state = cart_state.clear_cart(store.load_cart(client_key))
    store.save_cart(client_key, state)
    return cart_view(state)


@wishlist_router.get("/", response_model=WishlistView)
async def get_wishlist(
    client_key: str = Depends(get_client_key),
    store: ClientStateStore = Depends(get_client_state_store),
):
    return WishlistView(items=store.load_wishlist(client_key).items)


@wishlist_router.post("/items", response_model=WishlistView, status_code=status.HTTP_201_CREATED)
async def add_wishlist_item(
    payload: AddToWishlistRequest,
    client_key: str = Depends(get_client_key),
    store: ClientStateStore = Depends(get_client_state_store),
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
):
    destination = load_destination(payload.destination_id, destinations)
    state = cart_state.add_to_wishlist(store.load_wishlist(client_key), WishlistItem.from_destination(destination))
    store.save_wishlist(client_key, state)
    return WishlistView(items=state.items)


@wishlist_router.delete("/items/{destination_id}", response_model=WishlistView)
async def remove_wishlist_item(
    destination_id: UUID,
    client_key: str = Depends(get_client_key),
    store: ClientStateStore = Depends(get_client_state_store),
):
    state = store.load_wishlist(client_key)
    if not cart_state.is_in_wishlist(state, destination_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": f"Destination with ID {destination_id} is not in the wishlist"}
        )
    state = cart_state.remove_from_wishlist(state, destination_id)
    store.save_wishlist(client_key, state)
    return WishlistView(items=state.items)


@wishlist_router.delete("/", response_model=WishlistView)
async def clear_wishlist(
    client_key: str = Depends(get_client_key),
    store: ClientStateStore = Depends(get_client_state_store),
):
    state = cart_state.clear_wishlist(store.load_wishlist(client_key))
    store.save_wishlist(client_key, state)
    return WishlistView(items=state.items)
