# tests/test_cart_api.py
import uuid

from dubai_horizon.models.cart import CartItem, CartState, WishlistItem, WishlistState
from dubai_horizon.services import cart_state


def make_item(name="Desert Safari", price=250.0, quantity=1):
    return CartItem(destination_id=uuid.uuid4(), name=name, price=price, currency="AED", quantity=quantity)


class TestCartTransitions:

    def test_add_merges_quantity(self):
        item = make_item()
        state = cart_state.add_to_cart(CartState(), item)
        state = cart_state.add_to_cart(state, item, quantity=2)
        assert len(state.items) == 1
        assert state.items[0].quantity == 3

    def test_transitions_return_new_snapshots(self):
        empty = CartState()
        state = cart_state.add_to_cart(empty, make_item())
        assert empty.items == ()
        assert state is not empty

    def test_update_quantity_and_remove(self):
        first, second = make_item("A", 10.0), make_item("B", 20.0)
        state = cart_state.add_to_cart(cart_state.add_to_cart(CartState(), first), second)

        state = cart_state.update_quantity(state, second.destination_id, 3)
        assert cart_state.total_items(state) == 4
        assert cart_state.total_cost(state) == 70.0

        state = cart_state.update_quantity(state, first.destination_id, 0)
        assert [i.name for i in state.items] == ["B"]
        assert not cart_state.is_in_cart(state, first.destination_id)

    def test_clear(self):
        state = cart_state.add_to_cart(CartState(), make_item())
        assert cart_state.clear_cart(state).items == ()

    def test_wishlist_ignores_duplicates(self):
        item = WishlistItem(
            destination_id=uuid.uuid4(), name="Dubai Frame", short_description="Golden picture frame.",
            price=50.0, currency="AED",
        )
        state = cart_state.add_to_wishlist(WishlistState(), item)
        assert cart_state.add_to_wishlist(state, item) is state
        assert cart_state.is_in_wishlist(state, item.destination_id)
        assert cart_state.remove_from_wishlist(state, item.destination_id).items == ()


class TestCartAPI:

    def test_cart_starts_empty(self, test_client, client_headers):
        response = test_client.get("/api/v1/cart/", headers=client_headers)
        assert response.status_code == 200
        assert response.json() == {"items": [], "total_items": 0, "total_cost": 0}

    def test_client_id_required(self, test_client):
        assert test_client.get("/api/v1/cart/").status_code == 422

    def test_add_and_update_items(self, test_client, client_headers, seeded_destinations, managers):
        safari = seeded_destinations[1]
        response = test_client.post(
            "/api/v1/cart/items", json={"destination_id": safari["id"], "quantity": 2}, headers=client_headers
        )
        assert response.status_code == 201
        assert response.json()["total_cost"] == 500.0

        response = test_client.patch(f"/api/v1/cart/items/{safari['id']}", json={"quantity": 1}, headers=client_headers)
        assert response.json()["total_items"] == 1

        # persisted between requests
        stored = managers["client_state"].load_cart(client_headers["X-Client-Id"])
        assert stored.items[0].name == "Desert Safari"

    def test_carts_are_per_client(self, test_client, client_headers, seeded_destinations):
        test_client.post("/api/v1/cart/items", json={"destination_id": seeded_destinations[0]["id"]}, headers=client_headers)
        response = test_client.get("/api/v1/cart/", headers={"X-Client-Id": "someone-else"})
        assert response.json()["items"] == []

    def test_remove_and_clear(self, test_client, client_headers, seeded_destinations):
        for destination in seeded_destinations:
            test_client.post("/api/v1/cart/items", json={"destination_id": destination["id"]}, headers=client_headers)

        response = test_client.delete(f"/api/v1/cart/items/{seeded_destinations[0]['id']}", headers=client_headers)
        assert response.json()["total_items"] == 2

        response = test_client.delete("/api/v1/cart/", headers=client_headers)
        assert response.json()["items"] == []

    def test_unknown_destination(self, test_client, client_headers):
        response = test_client.post("/api/v1/cart/items", json={"destination_id": str(uuid.uuid4())}, headers=client_headers)
        assert response.status_code == 404

    def test_update_item_not_in_cart(self, test_client, client_headers):
        response = test_client.patch(f"/api/v1/cart/items/{uuid.uuid4()}", json={"quantity": 2}, headers=client_headers)
        assert response.status_code == 404

    def test_corrupt_cart_is_discarded(self, test_client, client_headers, managers):
        store = managers["client_state"]
        store._save_items(client_headers["X-Client-Id"], "cart", [{"name": "missing fields"}])
        response = test_client.get("/api/v1/cart/", headers=client_headers)
        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_write_failure_returns_500(self, test_client, client_headers, seeded_destinations, managers, tmp_path):
        managers["client_state"].data_file = str(tmp_path / "missing" / "client_state.json")
        response = test_client.post(
            "/api/v1/cart/items", json={"destination_id": seeded_destinations[0]["id"]}, headers=client_headers
        )
        assert response.status_code == 500
        assert "client_state.json" in response.json()["detail"]


class TestWishlistAPI:

    def test_add_remove(self, test_client, client_headers, seeded_destinations):
        destination_id = seeded_destinations[2]["id"]
        response = test_client.post("/api/v1/wishlist/items", json={"destination_id": destination_id}, headers=client_headers)
        assert response.status_code == 201
        test_client.post("/api/v1/wishlist/items", json={"destination_id": destination_id}, headers=client_headers)

        items = test_client.get("/api/v1/wishlist/", headers=client_headers).json()["items"]
        assert [i["name"] for i in items] == ["Al Fahidi Heritage Walk"]

        response = test_client.delete(f"/api/v1/wishlist/items/{destination_id}", headers=client_headers)
        assert response.json()["items"] == []

    def test_remove_missing(self, test_client, client_headers):
        response = test_client.delete(f"/api/v1/wishlist/items/{uuid.uuid4()}", headers=client_headers)
        assert response.status_code == 404

    def test_clear(self, test_client, client_headers, seeded_destinations):
        for destination in seeded_destinations:
            test_client.post("/api/v1/wishlist/items", json={"destination_id": destination["id"]}, headers=client_headers)
        response = test_client.delete("/api/v1/wishlist/", headers=client_headers)
        assert response.json() == {"items": []}
