import pytest

from src.infrastructure.storage import MemoryKeyValueStore

pytestmark = pytest.mark.anyio


async def test_query_orders_by_sort_key():
    kv = MemoryKeyValueStore()
    for sk in ("message#3", "message#1", "message#2"):
        await kv.put_item({"pk": "p", "sk": sk})

    assert [item["sk"] for item in await kv.query("p")] == ["message#1", "message#2", "message#3"]
    assert await kv.query("missing") == []


async def test_query_prefix_spans_partitions():
    kv = MemoryKeyValueStore()
    await kv.put_item({"pk": "channel#b", "sk": "message#1"})
    await kv.put_item({"pk": "channel#a", "sk": "message#2"})
    await kv.put_item({"pk": "channel", "sk": "channel#a"})

    items = await kv.query_prefix("channel#")
    assert [(i["pk"], i["sk"]) for i in items] == [
        ("channel#a", "message#2"),
        ("channel#b", "message#1"),
    ]


async def test_update_only_touches_existing_items():
    kv = MemoryKeyValueStore()
    assert await kv.update_item("user", "user#x", {"online": True}) is None
    assert await kv.get_item("user", "user#x") is None

    await kv.put_item({"pk": "user", "sk": "user#x", "online": False})
    updated = await kv.update_item("user", "user#x", {"online": True})
    assert updated == {"pk": "user", "sk": "user#x", "online": True}


async def test_returned_items_are_copies():
    kv = MemoryKeyValueStore()
    await kv.put_item({"pk": "p", "sk": "s", "value": 1})
    item = await kv.get_item("p", "s")
    item["value"] = 2
    assert (await kv.get_item("p", "s"))["value"] == 1
