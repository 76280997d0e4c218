import random

import pytest

from app.core.errors import ErrorKind, ShortenerError
from app.services.alias_allocator import AliasAllocator
from app.services.shortener import URLService


@pytest.fixture
def service(repository):
    allocator = AliasAllocator(repository.exists, rng=random.Random(42))
    return URLService(repository, allocator, "https://sho.rt/")


def test_shorten_generated_alias_is_stored(service, repository):
    short_url = service.shorten_url("https://example.com/long")

    assert short_url.startswith("https://sho.rt/")
    alias = short_url[len("https://sho.rt/"):]
    assert repository.find_by_alias(alias).full_url == "https://example.com/long"


def test_shorten_custom_alias_round_trip(service):
    assert service.shorten_url("https://example.com/x", "brand") == "https://sho.rt/brand"
    assert service.get_full_url("brand") == "https://example.com/x"


def test_shorten_duplicate_custom_alias(service):
    service.shorten_url("https://example.com/x", "brand")

    with pytest.raises(ShortenerError) as exc_info:
        service.shorten_url("https://example.com/y", "brand")
    assert exc_info.value.kind is ErrorKind.ALIAS_ALREADY_EXISTS
    assert exc_info.value.status_code == 400


def test_generated_alias_skips_taken_ones(repository):
    # replay the generator to find out which alias it draws first, then occupy it
    first = AliasAllocator(lambda alias: False, rng=random.Random(5)).determine_alias()
    repository.save(first, "https://example.com/occupied")

    allocator = AliasAllocator(repository.exists, rng=random.Random(5))
    service = URLService(repository, allocator, "https://sho.rt")
    short_url = service.shorten_url("https://example.com/new")

    assert not short_url.endswith("/" + first)
    assert repository.find_by_alias(first).full_url == "https://example.com/occupied"


def test_exhaustion_maps_to_error_kind(repository):
    allocator = AliasAllocator(lambda alias: True, rng=random.Random(1))
    service = URLService(repository, allocator, "https://sho.rt")

    with pytest.raises(ShortenerError) as exc_info:
        service.shorten_url("https://example.com")
    assert exc_info.value.kind is ErrorKind.ALIAS_GENERATION_EXHAUSTED
    assert exc_info.value.status_code == 500
    assert repository.list_all() == []


def test_get_full_url_missing(service):
    with pytest.raises(ShortenerError) as exc_info:
        service.get_full_url("nope")
    assert exc_info.value.kind is ErrorKind.ALIAS_NOT_FOUND
    assert exc_info.value.to_body() == {"error": "Alias 'nope' not found"}


def test_delete_url(service):
    service.shorten_url("https://example.com", "tmp")
    service.delete_url("tmp")

    with pytest.raises(ShortenerError):
        service.get_full_url("tmp")
    with pytest.raises(ShortenerError) as exc_info:
        service.delete_url("tmp")
    assert exc_info.value.kind is ErrorKind.ALIAS_NOT_FOUND


def test_get_all_urls(service):
    service.shorten_url("https://example.com/1", "one")
    service.shorten_url("https://example.com/2", "two")

    assert service.get_all_urls() == [
        {"alias": "one", "full_url": "https://example.com/1", "short_url": "https://sho.rt/one"},
        {"alias": "two", "full_url": "https://example.com/2", "short_url": "https://sho.rt/two"},
    ]


def test_validation_error_body_is_field_map():
    error = ShortenerError.validation_failure({"fullUrl": "Full URL is required"})
    assert error.status_code == 400
    assert error.to_body() == {"fullUrl": "Full URL is required"}
