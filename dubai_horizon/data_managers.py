# dubai_horizon/data_managers.py
import json
import logging
import os
from collections import defaultdict
from functools import lru_cache
from typing import Dict, List, Optional
from uuid import UUID

from fastapi import HTTPException, status

from dubai_horizon.config import get_data_dir
from dubai_horizon.models.cart import CartState, WishlistState
from dubai_horizon.storage import JsonDataManager, newest_first

logger = logging.getLogger(__name__)


class DestinationDataManager(JsonDataManager):
    def search(self, term: Optional[str] = None, destination_type: Optional[str] = None) -> List[Dict]:
        """Newest first, matching ``term`` against name, short description or tags."""
        results = newest_first(self.get_all())
        if term:
            key = term.lower()
            results = [
                d for d in results
                if key in d["name"].lower()
                or key in d["short_description"].lower()
                or any(key in tag.lower() for tag in (d.get("tags") or []))
            ]
        if destination_type:
            results = [d for d in results if destination_type in d.get("types", [])]
        return results


class ReviewDataManager(JsonDataManager):
    def for_destination(self, destination_id: UUID) -> List[Dict]:
        return newest_first([r for r in self.get_all() if r["destination_id"] == str(destination_id)])

    def ratings_by_destination(self) -> Dict[str, List[int]]:
        ratings = defaultdict(list)
        for review in self.get_all():
            ratings[review["destination_id"]].append(review["rating"])
        return ratings

    def delete_for_destination(self, destination_id: UUID) -> int:
        doomed = [r["id"] for r in self.for_destination(destination_id)]
        for review_id in doomed:
            self.delete(review_id)
        return len(doomed)


class BookingDataManager(JsonDataManager):
    def for_user(self, user_id: UUID) -> List[Dict]:
        return newest_first([b for b in self.get_all() if b["user_id"] == str(user_id)])

    def update_status(self, booking_id: UUID, new_status: str) -> Optional[Dict]:
        return self.update(booking_id, {"status": new_status})


class UserDataManager(JsonDataManager):
    def get_by_email(self, email: str) -> Optional[Dict]:
        normalized_email = email.lower()
        for user in self._index.values():
            if user["email"].lower() == normalized_email:
                return user
        return None

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None


class ClientStateStore:
    """Cart and wishlist per client key, persisted to one JSON object.

    Layout: ``{client_key: {"cart": [...], "wishlist": [...]}}``. Every
    mutation rewrites the file.
    """

    def __init__(self, data_file: str):
        self.data_file = data_file
        if not os.path.exists(self.data_file):
            os.makedirs(os.path.dirname(self.data_file), exist_ok=True)
            self._write({})

    def _read(self) -> Dict:
        try:
            with open(self.data_file, "r") as f:
                return json.load(f)
        except (json.JSONDecodeError, FileNotFoundError):
            logger.error("Could not read %s, starting with empty client state", self.data_file)
            return {}

    def _write(self, data: Dict):
        try:
            with open(self.data_file, "w") as f:
                json.dump(data, f, default=str)
        except OSError as e:
            logger.error("Failed to write %s: %s", self.data_file, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to write {os.path.basename(self.data_file)}: {str(e)}"
            )

    def _load_items(self, client_key: str, kind: str) -> List[Dict]:
        return self._read().get(client_key, {}).get(kind, [])

    def _save_items(self, client_key: str, kind: str, items: List[Dict]):
        data = self._read()
        data.setdefault(client_key, {})[kind] = items
        self._write(data)

    def load_cart(self, client_key: str) -> CartState:
        try:
            return CartState(items=self._load_items(client_key, "cart"))
        except ValueError:
            logger.error("Discarding corrupt cart for client %s", client_key)
            self._save_items(client_key, "cart", [])
            return CartState()

    def save_cart(self, client_key: str, state: CartState):
        self._save_items(client_key, "cart", [i.model_dump(mode="json") for i in state.items])

    def load_wishlist(self, client_key: str) -> WishlistState:
        try:
            return WishlistState(items=self._load_items(client_key, "wishlist"))
        except ValueError:
            logger.error("Discarding corrupt wishlist for client %s", client_key)
            self._save_items(client_key, "wishlist", [])
            return WishlistState()

    def save_wishlist(self, client_key: str, state: WishlistState):
        self._save_items(client_key, "wishlist", [i.model_dump(mode="json") for i in state.items])


def _data_file(name: str) -> str:
    return os.path.join(get_data_dir(), name)


@lru_cache
def get_destination_data_manager():
    return DestinationDataManager(_data_file("featured_destinations.json"))


@lru_cache
def get_review_data_manager():
    return ReviewDataManager(_data_file("reviews.json"))


@lru_cache
def get_booking_data_manager():
    return BookingDataManager(_data_file("bookings.json"))


@lru_cache
def get_user_data_manager():
    return UserDataManager(_data_file("users.json"))


@lru_cache
def get_client_state_store():
    return ClientStateStore(_data_file("client_state.json"))
