"""
Unit tests for the single-table store adapter and its cursor codec
"""
import pytest

from ton_app.domain.exceptions import ValidationError
from ton_app.infrastructure.db.cursor import decode_cursor, encode_cursor
from ton_app.infrastructure.db.mongo_product_repository import product_schema
from ton_app.infrastructure.db.mongo_user_repository import user_schema
from ton_app.infrastructure.db.single_table import SingleTableStore, ensure_table_indexes


@pytest.fixture
def user_store(table):
    return SingleTableStore(table, user_schema("ton-service"))


@pytest.fixture
def product_store(table):
    return SingleTableStore(table, product_schema("ton-service"))


def _user(user_id, email=None, password_hash="$2b$04$hash"):
    return {
        "user_id": user_id,
        "name": f"User {user_id}",
        "email": email or f"{user_id}@example.com",
        "password_hash": password_hash,
    }


class TestKeys:
    """Tests for the entity-prefixed composite keys"""

    def test_primary_key_is_prefixed_by_service_and_entity(self, user_store):
        key = user_store.primary_key({"user_id": "abc"})
        assert key == {"pk": "$ton-service#userid_abc", "sk": "$user_1"}

    def test_secondary_key_uses_email(self, user_store):
        key = user_store.secondary_key({"email": "Jane@Example.com"})
        assert key == {"gsi1pk": "$ton-service#email_Jane@Example.com", "gsi1sk": "$user_1"}

    def test_missing_key_attribute_raises(self, user_store):
        with pytest.raises(ValidationError):
            user_store.primary_key({})

    @pytest.mark.asyncio
    async def test_stored_item_layout(self, user_store, table):
        await user_store.put(_user("u1", email="u1@example.com"))
        document = table.documents[0]
        assert document["pk"] == "$ton-service#userid_u1"
        assert document["sk"] == "$user_1"
        assert document["gsi1pk"] == "$ton-service#email_u1@example.com"
        assert document["__edb_e__"] == "user"
        assert document["__edb_v__"] == "1"

    @pytest.mark.asyncio
    async def test_product_items_have_no_secondary_key(self, product_store, table):
        await product_store.put({
            "product_id": "p1",
            "title": "T3 Smart Pro",
            "description": "Phone",
            "price": 999.99,
            "publish_date": "2024-01-15",
            "photo_link": "https://example.com/photo.jpg",
        })
        assert "gsi1pk" not in table.documents[0]
        assert table.documents[0]["pk"] == "$ton-service#productid_p1"

    @pytest.mark.asyncio
    async def test_none_attributes_are_not_stored(self, user_store, table):
        await user_store.put(_user("u1", password_hash=None))
        assert "password_hash" not in table.documents[0]
        assert (await user_store.get({"user_id": "u1"}))["password_hash"] is None


class TestGetPutDelete:
    """Tests for point operations"""

    @pytest.mark.asyncio
    async def test_put_then_get(self, user_store):
        stored = await user_store.put(_user("u1"))
        assert await user_store.get({"user_id": "u1"}) == stored

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, user_store):
        assert await user_store.get({"user_id": "missing"}) is None

    @pytest.mark.asyncio
    async def test_entities_do_not_collide(self, user_store, product_store):
        await user_store.put(_user("same-id"))
        assert await product_store.get({"product_id": "same-id"}) is None

    @pytest.mark.asyncio
    async def test_delete_reports_whether_item_existed(self, user_store):
        await user_store.put(_user("u1"))
        assert await user_store.delete({"user_id": "u1"}) is True
        assert await user_store.delete({"user_id": "u1"}) is False

    @pytest.mark.asyncio
    async def test_query_index(self, user_store):
        await user_store.put(_user("u1", email="a@example.com"))
        await user_store.put(_user("u2", email="b@example.com"))
        items = await user_store.query_index({"email": "b@example.com"})
        assert [item["user_id"] for item in items] == ["u2"]
        assert await user_store.query_index({"email": "B@example.com"}) == []

    @pytest.mark.asyncio
    async def test_query_index_without_secondary_index_raises(self, product_store):
        with pytest.raises(ValueError):
            await product_store.query_index({"title": "x"})


class TestUpdate:
    """Tests for partial updates"""

    @pytest.mark.asyncio
    async def test_sets_only_provided_attributes(self, user_store):
        await user_store.put(_user("u1"))
        updated = await user_store.update({"user_id": "u1"}, {"name": "Renamed"})
        assert updated["name"] == "Renamed"
        assert updated["email"] == "u1@example.com"
        assert updated["password_hash"] == "$2b$04$hash"

    @pytest.mark.asyncio
    async def test_explicit_none_removes_nullable_attribute(self, user_store, table):
        await user_store.put(_user("u1"))
        updated = await user_store.update({"user_id": "u1"}, {"password_hash": None})
        assert updated["password_hash"] is None
        assert "password_hash" not in table.documents[0]

    @pytest.mark.asyncio
    async def test_explicit_none_on_required_attribute_raises(self, user_store):
        await user_store.put(_user("u1"))
        with pytest.raises(ValidationError):
            await user_store.update({"user_id": "u1"}, {"name": None})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("attribute", ["user_id", "email"])
    async def test_key_attributes_cannot_change(self, user_store, attribute):
        await user_store.put(_user("u1"))
        with pytest.raises(ValidationError):
            await user_store.update({"user_id": "u1"}, {attribute: "changed"})

    @pytest.mark.asyncio
    async def test_unknown_attribute_raises(self, user_store):
        await user_store.put(_user("u1"))
        with pytest.raises(ValidationError):
            await user_store.update({"user_id": "u1"}, {"role": "admin"})

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, user_store):
        assert await user_store.update({"user_id": "missing"}, {"name": "X"}) is None

    @pytest.mark.asyncio
    async def test_empty_changes_return_current_item(self, user_store):
        stored = await user_store.put(_user("u1"))
        assert await user_store.update({"user_id": "u1"}, {}) == stored


class TestScan:
    """Tests for cursor pagination"""

    @pytest.mark.asyncio
    async def test_limit_one_visits_every_item_once(self, user_store):
        for index in range(5):
            await user_store.put(_user(f"u{index}"))

        seen = []
        cursor = None
        pages = 0
        while True:
            items, cursor = await user_store.scan(limit=1, cursor=cursor)
            pages += 1
            seen.extend(item["user_id"] for item in items)
            if cursor is None:
                break

        assert pages == 5
        assert sorted(seen) == [f"u{index}" for index in range(5)]
        assert len(seen) == len(set(seen))

    @pytest.mark.asyncio
    async def test_pages_concatenate_to_full_scan(self, user_store):
        for index in range(7):
            await user_store.put(_user(f"u{index}"))

        full, full_cursor = await user_store.scan(limit=100)
        assert full_cursor is None

        paged = []
        cursor = None
        while True:
            items, cursor = await user_store.scan(limit=3, cursor=cursor)
            paged.extend(items)
            if cursor is None:
                break
        assert paged == full

    @pytest.mark.asyncio
    async def test_exact_page_boundary_has_no_next_cursor(self, user_store):
        for index in range(2):
            await user_store.put(_user(f"u{index}"))
        items, cursor = await user_store.scan(limit=2)
        assert len(items) == 2
        assert cursor is None

    @pytest.mark.asyncio
    async def test_scan_only_returns_own_entity_type(self, user_store, product_store):
        await user_store.put(_user("u1"))
        items, cursor = await product_store.scan(limit=10)
        assert items == []
        assert cursor is None

    @pytest.mark.asyncio
    async def test_cursor_of_another_entity_is_rejected(self, user_store, product_store):
        for index in range(2):
            await user_store.put(_user(f"u{index}"))
        _, cursor = await user_store.scan(limit=1)
        with pytest.raises(ValidationError):
            await product_store.scan(limit=1, cursor=cursor)

    @pytest.mark.asyncio
    async def test_invalid_limit_raises(self, user_store):
        with pytest.raises(ValidationError):
            await user_store.scan(limit=0)


class TestCursorCodec:
    """Tests for encode_cursor / decode_cursor"""

    def test_roundtrip(self):
        key = {"pk": "$ton-service#userid_1", "sk": "$user_1"}
        cursor = encode_cursor(key)
        assert "=" not in cursor
        assert decode_cursor(cursor) == key

    @pytest.mark.parametrize(
        "cursor",
        ["not base64!", "bm90IGpzb24", encode_cursor({"pk": "a", "sk": "b"})[:-3], "W10", "ñ"],
    )
    def test_garbage_is_rejected(self, cursor):
        with pytest.raises(ValidationError):
            decode_cursor(cursor)


@pytest.mark.asyncio
async def test_ensure_table_indexes(table):
    await ensure_table_indexes(table)
    names = [index.document["name"] for index in table.indexes]
    assert names == ["pk-sk-index", "gsi1pk-gsi1sk-index"]
    assert table.indexes[0].document["unique"] is True
