"""Tests for DataStoreRegistry."""

from concurrent.futures import ThreadPoolExecutor

from datastore_emulator import DataStoreRegistry, OrderedDataStore, RegistryConfig


def test_same_identity_same_instance(registry):
    assert registry.get_store("inv") is registry.get_store("inv")
    assert registry.get_store("inv", "global") is registry.get_store("inv")
    assert registry.get_ordered_store("inv") is registry.get_ordered_store("inv", "global")


def test_scope_distinguishes_stores(registry):
    a = registry.get_store("inv", "player_1")
    b = registry.get_store("inv", "player_2")
    assert a is not b
    assert a.scope == "player_1"


def test_empty_scope_is_not_default(registry):
    assert registry.get_store("inv", "") is not registry.get_store("inv")


def test_options_are_ignored(registry):
    assert registry.get_store("inv", options={"AllScopes": True}) is registry.get_store("inv")


async def test_mutations_visible_through_both_handles(registry):
    await registry.get_store("inv").set("sword", 1)
    assert await registry.get_store("inv").get("sword") == 1


async def test_plain_and_ordered_are_independent(registry):
    plain = registry.get_store("X")
    ordered = registry.get_ordered_store("X")
    assert plain is not ordered
    assert isinstance(ordered, OrderedDataStore)

    await plain.set("k", 1)
    assert await ordered.get("k") is None


def test_configured_default_scope():
    registry = DataStoreRegistry(RegistryConfig(default_scope="staging"))
    assert registry.get_store("inv").scope == "staging"
    assert registry.get_store("inv") is registry.get_store("inv", "staging")


def test_registries_are_isolated():
    assert DataStoreRegistry().get_store("inv") is not DataStoreRegistry().get_store("inv")


def test_concurrent_creation_yields_one_instance(registry):
    with ThreadPoolExecutor(max_workers=8) as pool:
        stores = list(pool.map(lambda _: registry.get_store("race"), range(64)))
    assert all(s is stores[0] for s in stores)


# ── list_stores ──────────────────────────────────────────────


async def test_list_stores_prefix(registry):
    registry.get_store("inventory")
    registry.get_ordered_store("inv_scores")
    registry.get_store("bank")

    page = await registry.list_stores(prefix="inv")
    entries = page.get_current_page()
    assert sorted(e.key for e in entries) == ["inv_scores", "inventory"]
    assert all(e.value == 0 for e in entries)


async def test_list_stores_names_once(registry):
    registry.get_store("inv")
    registry.get_store("inv", "other")
    registry.get_ordered_store("inv")

    page = await registry.list_stores(prefix="inv")
    assert [e.key for e in page] == ["inv"]


async def test_list_stores_all(registry):
    registry.get_store("a")
    registry.get_ordered_store("b")
    assert [e.key for e in await registry.list_stores()] == ["a", "b"]
    assert [e.key for e in await registry.list_stores(prefix="")] == ["a", "b"]


async def test_list_stores_prefix_is_literal(registry):
    registry.get_store("a.b")
    registry.get_store("axb")
    page = await registry.list_stores(prefix="a.")
    assert [e.key for e in page] == ["a.b"]


async def test_list_stores_ignores_paging_args(registry):
    for name in ("s1", "s2", "s3"):
        registry.get_store(name)
    page = await registry.list_stores(prefix="s", page_size=1, cursor="anything")
    assert len(page) == 3


async def test_list_stores_empty(registry):
    assert (await registry.list_stores()).get_current_page() == []
