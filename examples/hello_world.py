"""
datastore_emulator — Hello World

A registry hands out stores by (name, scope). Plain stores hold any value;
ordered stores can also list their numeric entries in sorted order.
"""

import asyncio

from datastore_emulator import DataStoreRegistry, SortDirection


def add_coins(amount: int):
    def transform(current):
        if current is not None and current["banned"]:
            return None  # leave the record untouched
        profile = dict(current or {"coins": 0, "banned": False})
        profile["coins"] += amount
        return profile

    return transform


async def main():
    # ──────────────────────────────────────
    #  1. Create the registry
    # ──────────────────────────────────────
    registry = DataStoreRegistry()

    # ──────────────────────────────────────
    #  2. Plain store: read-modify-write
    # ──────────────────────────────────────
    profiles = registry.get_store("profiles")
    print("alice:", await profiles.update("alice", add_coins(50)))
    print("alice:", await profiles.update("alice", add_coins(25)))

    await profiles.set("mallory", {"coins": 999, "banned": True})
    print("mallory update:", await profiles.update("mallory", add_coins(1)))
    print("mallory:", await profiles.get("mallory"))

    # ──────────────────────────────────────
    #  3. Ordered store: leaderboard
    # ──────────────────────────────────────
    wins = registry.get_ordered_store("wins", scope="season_1")
    for player, count in [("alice", 12), ("bob", 30), ("carol", 7), ("dave", 19)]:
        await wins.set(player, count)

    top = await wins.get_sorted(SortDirection.DESCENDING, 10, min_value=10)
    for rank, entry in enumerate(top.get_current_page(), start=1):
        print(f"  #{rank} {entry.key}: {entry.value}")

    # ──────────────────────────────────────
    #  4. Enumerate stores
    # ──────────────────────────────────────
    page = await registry.list_stores()
    print("stores:", [entry.key for entry in page.get_current_page()])


if __name__ == "__main__":
    asyncio.run(main())
