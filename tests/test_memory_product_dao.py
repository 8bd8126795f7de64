"""Tests for the in-memory product DAO."""

from app.dao.memory_product_dao import InMemoryProductDAO
from app.models.product import Product


async def test_ids_start_at_one_and_increase():
    dao = InMemoryProductDAO()
    first = await dao.save(Product(name="a", price=1.0))
    second = await dao.save(Product(name="b", price=2.0))
    assert (first.id, second.id) == (1, 2)


async def test_returned_records_are_copies():
    dao = InMemoryProductDAO()
    saved = await dao.save(Product(name="a", price=1.0))
    found = await dao.find_by_id(saved.id)
    found.name = "mutated"
    assert (await dao.find_by_id(saved.id)).name == "a"


async def test_save_with_explicit_id_advances_counter():
    dao = InMemoryProductDAO()
    await dao.save(Product(id=10, name="a", price=1.0))
    nxt = await dao.save(Product(name="b", price=2.0))
    assert nxt.id == 11


async def test_find_all_skip_limit():
    dao = InMemoryProductDAO()
    for i in range(4):
        await dao.save(Product(name=f"p{i}", price=float(i)))
    assert [p.name for p in await dao.find_all(skip=1, limit=2)] == ["p1", "p2"]
    assert [p.name for p in await dao.find_all(skip=3)] == ["p3"]


async def test_delete_unknown_and_known():
    dao = InMemoryProductDAO()
    saved = await dao.save(Product(name="a", price=1.0))
    await dao.delete_by_id(99)
    await dao.delete_by_id(saved.id)
    assert await dao.find_all() == []


async def test_clear_resets_ids():
    dao = InMemoryProductDAO()
    await dao.save(Product(name="a", price=1.0))
    dao.clear()
    assert await dao.find_all() == []
    assert (await dao.save(Product(name="b", price=1.0))).id == 1
