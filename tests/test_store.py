"""Unit tests for the in-memory recipe store."""
import threading

from recipes_app.database.session import SAMPLE_RECIPES, init_sample_data
from recipes_app.database.store import RecipeStore


def test_create_and_list_keep_insertion_order():
    store = RecipeStore()
    a = store.create("a", ["1"])
    b = store.create("b", ["2", "3"])
    assert [r.id for r in store.list()] == [a.id, b.id]
    assert store.get(b.id).ingredients == ["2", "3"]
    assert len(store) == 2
    assert a.id in store


def test_update_keeps_id_and_position():
    store = RecipeStore()
    first = store.create("a", [])
    store.create("b", [])
    updated = store.update(first.id, "z", ["x"])
    assert updated.id == first.id
    assert store.list()[0].name == "z"
    assert store.update("missing", "z", []) is None


def test_delete():
    store = RecipeStore()
    recipe = store.create("a", [])
    assert store.delete(recipe.id) is True
    assert store.delete(recipe.id) is False
    assert recipe.id not in store
    assert store.get(recipe.id) is None


def test_returned_records_are_copies():
    store = RecipeStore()
    recipe = store.create("a", ["x"])
    recipe.ingredients.append("y")
    store.list()[0].name = "changed"
    stored = store.get(recipe.id)
    assert stored.name == "a"
    assert stored.ingredients == ["x"]


def test_concurrent_creates_get_unique_ids():
    store = RecipeStore()

    def worker():
        for _ in range(50):
            store.create("r", [])

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [r.id for r in store.list()]
    assert len(ids) == 400
    assert len(set(ids)) == 400


def test_init_sample_data_only_seeds_empty_store():
    store = RecipeStore()
    assert init_sample_data(store) == len(SAMPLE_RECIPES)
    assert init_sample_data(store) == 0
    assert [r.name for r in store.list()] == [name for name, _ in SAMPLE_RECIPES]


def test_clear_empties_store_and_allows_reseeding():
    store = RecipeStore()
    init_sample_data(store)
    old_ids = [r.id for r in store.list()]

    store.clear()
    assert len(store) == 0
    assert store.list() == []
    assert old_ids[0] not in store

    assert init_sample_data(store) == len(SAMPLE_RECIPES)
    assert len(store) == len(SAMPLE_RECIPES)
