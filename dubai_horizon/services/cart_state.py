# dubai_horizon/services/cart_state.py
from uuid import UUID

from dubai_horizon.models.cart import CartItem, CartState, WishlistItem, WishlistState


def add_to_cart(state: CartState, item: CartItem, quantity: int = 1) -> CartState:
    if is_in_cart(state, item.destination_id):
        return CartState(items=tuple(
            i.model_copy(update={"quantity": i.quantity + quantity}) if i.destination_id == item.destination_id else i
            for i in state.items
        ))
    return CartState(items=state.items + (item.model_copy(update={"quantity": quantity}),))


def remove_from_cart(state: CartState, destination_id: UUID) -> CartState:
    return CartState(items=tuple(i for i in state.items if i.destination_id != destination_id))


def update_quantity(state: CartState, destination_id: UUID, quantity: int) -> CartState:
    if quantity <= 0:
        return remove_from_cart(state, destination_id)
    return CartState(items=tuple(
        i.model_copy(update={"quantity": quantity}) if i.destination_id == destination_id else i
        for i in state.items
    ))


def clear_cart(state: CartState) -> CartState:
    return CartState()


def total_items(state: CartState) -> int:
    return sum(i.quantity for i in state.items)


def total_cost(state: CartState) -> float:
    return sum(i.price * i.quantity for i in state.items)


def is_in_cart(state: CartState, destination_id: UUID) -> bool:
    return any(i.destination_id == destination_id for i in state.items)


def add_to_wishlist(state: WishlistState, item: WishlistItem) -> WishlistState:
    if is_in_wishlist(state, item.destination_id):
        return state
    return WishlistState(items=state.items + (item,))


def remove_from_wishlist(state: WishlistState, destination_id: UUID) -> WishlistState:
    return WishlistState(items=tuple(i for i in state.items if i.destination_id != destination_id))


def is_in_wishlist(state: WishlistState, destination_id: UUID) -> bool:
    return any(i.destination_id == destination_id for i in state.items)


def clear_wishlist(state: WishlistState) -> WishlistState:
    return WishlistState()
