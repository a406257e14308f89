# dubai_horizon/models/cart.py
"""Cart and wishlist snapshots.

Both are immutable; every change goes through a transition function that
returns a new snapshot, and the route layer persists the result.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple
from uuid import UUID

from dubai_horizon.models.destination import Destination


class CartItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination_id: UUID
    name: str
    price: float
    currency: str
    main_image_url: Optional[str] = None
    quantity: int = Field(1, ge=1)

    @classmethod
    def from_destination(cls, destination: Destination, quantity: int = 1) -> "CartItem":
        return cls(
            destination_id=destination.id,
            name=destination.name,
            price=destination.price,
            currency=destination.currency,
            main_image_url=destination.main_image_url,
            quantity=quantity,
        )


class CartState(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: Tuple[CartItem, ...] = ()


class WishlistItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination_id: UUID
    name: str
    short_description: str
    price: float
    currency: str
    main_image_url: Optional[str] = None

    @classmethod
    def from_destination(cls, destination: Destination) -> "WishlistItem":
        return cls(
            destination_id=destination.id,
            name=destination.name,
            short_description=destination.short_description,
            price=destination.price,
            currency=destination.currency,
            main_image_url=destination.main_image_url,
        )


class WishlistState(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: Tuple[WishlistItem, ...] = ()


class AddToCartRequest(BaseModel):
    destination_id: UUID
    quantity: int = Field(1, ge=1)


class UpdateQuantityRequest(BaseModel):
    quantity: int = Field(..., description="Zero or less removes the item")


class AddToWishlistRequest(BaseModel):
    destination_id: UUID


class CartView(BaseModel):
    items: Tuple[CartItem, ...]
    total_items: int
    total_cost: float


class WishlistView(BaseModel):
    items: Tuple[WishlistItem, ...]
