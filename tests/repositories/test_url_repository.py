"""Tests for the URL repository."""

import pytest

from shorturl.models.url import UrlRecordCreate
from shorturl.repositories.url_repository import DuplicateEntityError
from tests.utils import create_test_record, random_url


@pytest.mark.repository
class TestURLRepository:
    """Test suite for URL repository."""

    @pytest.mark.asyncio
    async def test_create_record(self, test_db, url_repository):
        """Test record creation."""
        test_url = random_url()

        record = await url_repository.create_record(
            db=test_db,
            data=UrlRecordCreate(original=test_url, short=1),
        )

        assert record.id is not None
        assert record.original == test_url
        assert record.short == 1

        db_record = await url_repository.get_by_short(test_db, 1)
        assert db_record is not None
        assert db_record.original == test_url

    @pytest.mark.asyncio
    async def test_create_record_from_dict(self, test_db, url_repository):
        record = await url_repository.create_record(
            test_db, {"original": "https://example.com", "short": 7}
        )
        assert record.short == 7

    @pytest.mark.asyncio
    async def test_create_duplicate_short(self, test_db, url_repository):
        """Test duplicate short id handling."""
        await create_test_record(test_db, short=1)

        with pytest.raises(DuplicateEntityError) as excinfo:
            await url_repository.create_record(
                db=test_db,
                data=UrlRecordCreate(original=random_url(), short=1),
            )

        assert excinfo.value.field_name == "short"
        assert excinfo.value.value == 1

    @pytest.mark.asyncio
    async def test_get_by_original_exact_match(self, test_db, url_repository):
        """Lookups compare the stored string exactly, without normalization."""
        record = await create_test_record(test_db, short=1, original="https://example.com")

        found = await url_repository.get_by_original(test_db, "https://example.com")
        assert found is not None
        assert found.id == record.id

        assert await url_repository.get_by_original(test_db, "https://example.com/") is None
        assert await url_repository.get_by_original(test_db, "HTTPS://example.com") is None

    @pytest.mark.asyncio
    async def test_get_by_short_nonexistent(self, test_db, url_repository):
        assert await url_repository.get_by_short(test_db, 999) is None

    @pytest.mark.asyncio
    async def test_get_max_short(self, test_db, url_repository):
        assert await url_repository.get_max_short(test_db) == 0

        await create_test_record(test_db, short=3)
        await create_test_record(test_db, short=1)

        assert await url_repository.get_max_short(test_db) == 3

    @pytest.mark.asyncio
    async def test_count(self, test_db, url_repository):
        await create_test_record(test_db, short=1, original="https://a.example")
        await create_test_record(test_db, short=2, original="https://b.example")

        assert await url_repository.count(test_db) == 2

    @pytest.mark.asyncio
    async def test_find_one_requires_filters(self, test_db, url_repository):
        with pytest.raises(ValueError):
            await url_repository.find_one(test_db)
