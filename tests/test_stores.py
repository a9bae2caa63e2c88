# tests/test_stores.py
from storefront.database import Catalog, EntityStore, IdAllocator
from storefront.models import Brand, Token


def test_id_allocator_counts_and_resets():
    ids = IdAllocator()
    assert [ids.next(), ids.next(), ids.next()] == ["1", "2", "3"]
    ids.reset()
    assert ids.next() == "1"
    ids.reset(start=10)
    assert ids.next() == "10"


def test_add_all_assigns_sequential_ids_in_order():
    store = EntityStore()
    stored = store.add_all([Brand(name="A"), Brand(id="77", name="B")])
    assert [(b.id, b.name) for b in stored] == [("1", "A"), ("2", "B")]
    assert store.add_all([]) == []
    assert len(store) == 2


def test_add_one_returns_stored_record():
    store = EntityStore()
    store.add_one(Brand(name="A"))
    b = store.add_one(Brand(name="B"))
    assert b.id == "2"
    assert store.get_by_id("2") == b


def test_get_all_is_a_snapshot():
    store = EntityStore()
    store.add_one(Brand(name="A"))
    snapshot = store.get_all()
    snapshot.clear()
    assert len(store.get_all()) == 1


def test_get_by_id_compares_exactly():
    store = EntityStore()
    store.add_one(Brand(name="A"))
    assert store.get_by_id("1").name == "A"
    assert store.get_by_id("01") is None
    assert store.get_by_id(1) is None
    assert store.get_by_id("a") is None


def test_remove_all_keeps_counter_until_reset():
    store = EntityStore()
    store.add_all([Brand(name="A"), Brand(name="B")])
    store.remove_all()
    assert store.get_all() == []
    assert store.add_one(Brand(name="C")).id == "3"

    store.remove_all()
    store.reset_id()
    assert store.add_one(Brand(name="D")).id == "1"


def test_token_id_is_not_serialized():
    store = EntityStore()
    t = store.add_one(Token(username="u", token="x" * 16))
    assert t.id == "1"
    assert t.model_dump() == {"username": "u", "token": "x" * 16}


def test_catalog_reset_clears_every_store(catalog):
    assert len(catalog.products) == 9
    assert len(catalog.brands) == 5
    assert len(catalog.users) == 3

    catalog.tokens.add_one(Token(username="u", token="t"))
    catalog.reset()
    assert all(len(s) == 0 for s in catalog.stores)
    assert catalog.brands.add_one(Brand(name="fresh")).id == "1"


def test_catalog_load_accepts_partial_collections():
    c = Catalog()
    c.load(brands=[Brand(name="A")])
    assert len(c.brands) == 1
    assert len(c.products) == 0
