import pytest
from fakeredis import aioredis

from src.domain.entities import Channel
from src.domain.value_objects import ChannelName
from src.infrastructure.persistence import KeyedChatStore
from src.infrastructure.storage import RedisKeyValueStore

pytestmark = pytest.mark.anyio


@pytest.fixture()
def redis():
    return aioredis.FakeRedis(decode_responses=True)


@pytest.fixture()
def kv(redis):
    return RedisKeyValueStore(redis, key_prefix="test:")


async def test_items_live_in_one_hash_per_partition(kv, redis):
    await kv.put_item({"pk": "channel#general", "sk": "message#1", "content": "hi"})

    assert await redis.hkeys("test:channel#general") == ["message#1"]
    assert await kv.get_item("channel#general", "message#1") == {
        "pk": "channel#general",
        "sk": "message#1",
        "content": "hi",
    }
    assert await kv.get_item("channel#general", "message#2") is None


async def test_query_orders_by_sort_key(kv):
    for sk in ("message#3", "message#1", "message#2"):
        await kv.put_item({"pk": "p", "sk": sk})

    assert [item["sk"] for item in await kv.query("p")] == ["message#1", "message#2", "message#3"]
    assert await kv.query("missing") == []


async def test_query_prefix_spans_partitions(kv):
    await kv.put_item({"pk": "channel#b", "sk": "message#1"})
    await kv.put_item({"pk": "channel#a", "sk": "message#2"})
    await kv.put_item({"pk": "channel", "sk": "channel#a"})

    items = await kv.query_prefix("channel#")
    assert [(i["pk"], i["sk"]) for i in items] == [
        ("channel#a", "message#2"),
        ("channel#b", "message#1"),
    ]


async def test_query_prefix_treats_glob_characters_literally(kv):
    await kv.put_item({"pk": "channel#[ab]x", "sk": "message#1"})
    await kv.put_item({"pk": "channel#ax", "sk": "message#2"})
    await kv.put_item({"pk": "channel#*", "sk": "message#3"})

    assert [i["sk"] for i in await kv.query_prefix("channel#[ab]")] == ["message#1"]
    assert [i["sk"] for i in await kv.query_prefix("channel#*")] == ["message#3"]


async def test_update_only_touches_existing_items(kv, redis):
    assert await kv.update_item("user", "user#x", {"online": True}) is None
    assert await redis.exists("test:user") == 0

    await kv.put_item({"pk": "user", "sk": "user#x", "online": False, "id": "1"})
    updated = await kv.update_item("user", "user#x", {"online": True})
    assert updated == {"pk": "user", "sk": "user#x", "online": True, "id": "1"}
    assert await kv.get_item("user", "user#x") == updated


async def test_chat_store_over_redis(kv):
    store = KeyedChatStore(kv)
    await store.create_channel(Channel.create(ChannelName("secret"), locked=True))
    await store.create_channel(Channel.create(ChannelName("general")))

    channels = await store.list_all_channels()
    assert [(c.name.value, c.locked) for c in channels] == [
        ("general", False),
        ("secret", True),
    ]
