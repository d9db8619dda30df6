"""Record store contract tests, run against every implementation."""

import threading

import pytest

from giftlist.database import SessionLocal
from giftlist.services.errors import DuplicateInviteCodeError
from giftlist.services.store import SqlRecordStore


@pytest.fixture
def owner(store):
    return store.create_user(name="Alice", email="alice@example.com", password_hash="x")


@pytest.fixture
def other(store):
    return store.create_user(name="Bob", email="bob@example.com", password_hash="x")


def test_lookups_return_none_for_missing_records(store):
    """Missing ids and codes are reported as None, never raised."""
    assert store.get_user(999) is None
    assert store.get_user_by_email("nobody@example.com") is None
    assert store.get_family_group(999) is None
    assert store.get_family_group_by_invite_code("NOPE42") is None
    assert store.get_wishlist_item(999) is None
    assert store.update_wishlist_item(999, {"name": "x"}) is None
    assert store.update_user_family_group(999, 1) is None
    assert store.delete_wishlist_item(999) is False
    assert store.reserve_wishlist_item(999, 1) is None
    assert store.unreserve_wishlist_item(999, 1) is None


def test_ids_auto_increment(store):
    first = store.create_user(name="A", email=None, password_hash="x")
    second = store.create_user(name="B", email=None, password_hash="x")
    assert second.id > first.id
    assert first.family_group_id is None


def test_family_group_membership(store, owner, other):
    group = store.create_family_group(name="Smith", invite_code="K4J9QZ")
    store.update_user_family_group(owner.id, group.id)
    store.update_user_family_group(other.id, group.id)

    assert store.get_family_group_by_invite_code("K4J9QZ").id == group.id
    assert [m.name for m in store.get_family_members(group.id)] == ["Alice", "Bob"]


def test_joining_another_group_replaces_membership(store, owner):
    first = store.create_family_group(name="Smith", invite_code="AAAAAA")
    second = store.create_family_group(name="Jones", invite_code="BBBBBB")
    store.update_user_family_group(owner.id, first.id)
    store.update_user_family_group(owner.id, second.id)

    assert store.get_family_members(first.id) == []
    assert store.get_user(owner.id).family_group_id == second.id


def test_duplicate_invite_code_rejected(store):
    store.create_family_group(name="Smith", invite_code="K4J9QZ")
    with pytest.raises(DuplicateInviteCodeError):
        store.create_family_group(name="Jones", invite_code="K4J9QZ")


def test_user_by_family_code(store, owner):
    group = store.create_family_group(name="Smith", invite_code="K4J9QZ")
    store.update_user_family_group(owner.id, group.id)

    assert store.get_user_by_family_code("K4J9QZ", "Alice").id == owner.id
    assert store.get_user_by_family_code("K4J9QZ", "Zed") is None
    assert store.get_user_by_family_code("OTHER1", "Alice") is None


def test_new_item_is_open(store, owner):
    item = store.create_wishlist_item(owner.id, {"name": "Bike", "price": 2000})
    assert item.is_reserved is False
    assert item.reserved_by_user_id is None
    assert item.priority == "medium"
    assert item.user_id == owner.id


def test_items_newest_first(store, owner, other):
    for name in ("first", "second", "third"):
        store.create_wishlist_item(owner.id, {"name": name})
    store.create_wishlist_item(other.id, {"name": "not mine"})

    assert [i.name for i in store.get_wishlist_items(owner.id)] == ["third", "second", "first"]


def test_update_ignores_reservation_fields(store, owner, other):
    item = store.create_wishlist_item(owner.id, {"name": "Bike"})
    updated = store.update_wishlist_item(
        item.id, {"name": "Red bike", "is_reserved": True, "reserved_by_user_id": other.id}
    )
    assert updated.name == "Red bike"
    assert updated.is_reserved is False
    assert updated.reserved_by_user_id is None


def test_delete_item(store, owner):
    item_id = store.create_wishlist_item(owner.id, {"name": "Bike"}).id
    assert store.delete_wishlist_item(item_id) is True
    assert store.get_wishlist_item(item_id) is None
    assert store.delete_wishlist_item(item_id) is False


def test_reserve_is_compare_and_swap(store, owner, other):
    item = store.create_wishlist_item(owner.id, {"name": "Bike"})

    reserved = store.reserve_wishlist_item(item.id, other.id)
    assert reserved.is_reserved is True
    assert reserved.reserved_by_user_id == other.id

    # Second attempt loses regardless of actor
    assert store.reserve_wishlist_item(item.id, other.id) is None
    assert store.get_wishlist_item(item.id).reserved_by_user_id == other.id


def test_owner_cannot_reserve_own_item(store, owner):
    item = store.create_wishlist_item(owner.id, {"name": "Bike"})
    assert store.reserve_wishlist_item(item.id, owner.id) is None
    assert store.get_wishlist_item(item.id).is_reserved is False


def test_unreserve_only_by_reserver(store, owner, other):
    item = store.create_wishlist_item(owner.id, {"name": "Bike"})
    store.reserve_wishlist_item(item.id, other.id)

    assert store.unreserve_wishlist_item(item.id, owner.id) is None
    reopened = store.unreserve_wishlist_item(item.id, other.id)
    assert reopened.is_reserved is False
    assert reopened.reserved_by_user_id is None


def test_activities_newest_first_with_limit(store, owner):
    group = store.create_family_group(name="Smith", invite_code="K4J9QZ")
    for i in range(12):
        store.create_activity(owner.id, group.id, "added_item", item_name=f"item {i}")

    default_page = store.get_family_activities(group.id)
    assert len(default_page) == 10
    assert default_page[0].item_name == "item 11"
    assert [a.item_name for a in store.get_family_activities(group.id, limit=2)] == [
        "item 11",
        "item 10",
    ]


def test_activities_hide_reservations_of_one_owner(store, owner, other):
    group = store.create_family_group(name="Smith", invite_code="K4J9QZ")
    store.create_activity(owner.id, group.id, "added_item", item_name="Bike")
    store.create_activity(other.id, group.id, "reserved_item", item_name="Bike", target_user_id=owner.id)
    store.create_activity(owner.id, group.id, "reserved_item", item_name="Kite", target_user_id=other.id)

    visible = store.get_family_activities(group.id, hide_reserved_for=owner.id)
    assert [a.item_name for a in visible] == ["Kite", "Bike"]
    assert [a.action for a in visible] == ["reserved_item", "added_item"]
    assert len(store.get_family_activities(group.id)) == 3


def test_secret_notes_scoped_to_author(store, owner, other):
    item = store.create_wishlist_item(owner.id, {"name": "Bike"})
    store.create_secret_note(other.id, item.id, "Buy the blue one")
    third = store.create_user(name="Carol", email=None, password_hash="x")
    store.create_secret_note(third.id, item.id, "Check the sale")

    notes = store.get_secret_notes(item.id, other.id)
    assert [n.note for n in notes] == ["Buy the blue one"]


def test_in_memory_reserve_race_has_one_winner():
    """Concurrent reservations of the same item: exactly one succeeds."""
    from memory_store import InMemoryRecordStore

    store = InMemoryRecordStore()
    owner = store.create_user(name="Owner", email=None, password_hash="x")
    item = store.create_wishlist_item(owner.id, {"name": "Bike"})
    bidders = [store.create_user(name=f"B{i}", email=None, password_hash="x") for i in range(8)]

    results = []
    barrier = threading.Barrier(len(bidders))

    def attempt(user_id):
        barrier.wait()
        results.append(store.reserve_wishlist_item(item.id, user_id))

    threads = [threading.Thread(target=attempt, args=(b.id,)) for b in bidders]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    winners = [r for r in results if r is not None]
    assert len(winners) == 1
    assert store.get_wishlist_item(item.id).reserved_by_user_id == winners[0].reserved_by_user_id


def test_sql_reserve_race_between_sessions(db):
    """Two connections both see the item open; only one reservation lands."""
    store = SqlRecordStore(db)
    owner_id = store.create_user(name="Owner", email=None, password_hash="x").id
    first_id = store.create_user(name="B1", email=None, password_hash="x").id
    second_id = store.create_user(name="B2", email=None, password_hash="x").id
    item_id = store.create_wishlist_item(owner_id, {"name": "Bike"}).id

    first_session, second_session = SessionLocal(), SessionLocal()
    try:
        first, second = SqlRecordStore(first_session), SqlRecordStore(second_session)
        assert first.get_wishlist_item(item_id).is_reserved is False
        assert second.get_wishlist_item(item_id).is_reserved is False

        won = first.reserve_wishlist_item(item_id, first_id)
        lost = second.reserve_wishlist_item(item_id, second_id)

        assert won is not None
        assert won.reserved_by_user_id == first_id
        assert lost is None
    finally:
        first_session.close()
        second_session.close()

    db.expire_all()
    item = store.get_wishlist_item(item_id)
    assert item.is_reserved is True
    assert item.reserved_by_user_id == first_id
