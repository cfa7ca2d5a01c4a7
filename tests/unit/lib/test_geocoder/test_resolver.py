"""Unit tests for the cache-aside geocode resolver."""

import threading
from typing import Any

import httpx
import pytest

from wpl_common.lib.geocoder import (
    BaseGeocoder,
    Coordinates,
    GeocodeErrorKind,
    GeocodeFailure,
    GeocodeResolver,
    GoogleMapsGeocoder,
    ServiceError,
    TransportError,
    is_failure,
)
from wpl_common.lib.options import DatabaseOptionStore, MemoryOptionStore

OPTION = "wplook_map_coordinates"
NEW_YORK = Coordinates(latitude=40.7128, longitude=-74.006)


class RecordingStore(MemoryOptionStore):
    """Memory store counting reads and writes."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        super().__init__(initial)
        self.reads = 0
        self.writes = 0

    def get(self, key: str) -> Any | None:
        self.reads += 1
        return super().get(key)

    def set(self, key: str, value: Any) -> None:
        self.writes += 1
        super().set(key, value)


class TestResolveCacheAside:
    """Tests for cache hits and misses."""

    def test_miss_calls_provider_once_and_caches(self, memory_store, fake_geocoder) -> None:
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=fake_geocoder)

        result = resolver.resolve("New York, NY", "test-key")

        assert result == NEW_YORK
        assert fake_geocoder.calls == [("New York, NY", "test-key")]
        assert memory_store.get(OPTION) == {"New York, NY": {"latitude": 40.7128, "longitude": -74.006}}

    def test_second_resolution_is_served_from_cache(self, memory_store, fake_geocoder) -> None:
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=fake_geocoder)

        first = resolver.resolve("New York, NY", "test-key")
        second = resolver.resolve("New York, NY", "test-key")

        assert first == second == NEW_YORK
        assert len(fake_geocoder.calls) == 1

    def test_prepopulated_entry_needs_no_network(self, fake_geocoder) -> None:
        store = MemoryOptionStore({OPTION: {"New York, NY": {"latitude": 40.7128, "longitude": -74.006}}})
        resolver = GeocodeResolver(store, OPTION, geocoder=fake_geocoder)

        result = resolver.resolve("New York, NY", "test-key")

        assert result == Coordinates(latitude=40.7128, longitude=-74.006)
        assert fake_geocoder.calls == []

    def test_each_new_address_is_fetched_once(self, memory_store, fake_geocoder) -> None:
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=fake_geocoder)
        addresses = ["Paris", "Rome", "Berlin", "Paris", "Rome", "Madrid"]

        for address in addresses:
            resolver.resolve(address, "test-key")

        assert [address for address, _ in fake_geocoder.calls] == ["Paris", "Rome", "Berlin", "Madrid"]
        assert set(memory_store.get(OPTION)) == {"Paris", "Rome", "Berlin", "Madrid"}

    def test_address_keys_are_exact(self, memory_store, fake_geocoder) -> None:
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=fake_geocoder)

        resolver.resolve("New York, NY", "test-key")
        resolver.resolve("new york, ny", "test-key")

        assert len(fake_geocoder.calls) == 2

    def test_existing_entries_survive_a_miss(self, fake_geocoder) -> None:
        store = MemoryOptionStore({OPTION: {"Paris": {"latitude": 48.8566, "longitude": 2.3522}}})
        resolver = GeocodeResolver(store, OPTION, geocoder=fake_geocoder)

        resolver.resolve("New York, NY", "test-key")

        assert store.get(OPTION) == {
            "Paris": {"latitude": 48.8566, "longitude": 2.3522},
            "New York, NY": {"latitude": 40.7128, "longitude": -74.006},
        }

    def test_miss_reads_once_and_writes_once(self, fake_geocoder) -> None:
        store = RecordingStore()
        resolver = GeocodeResolver(store, OPTION, geocoder=fake_geocoder)

        resolver.resolve("New York, NY", "test-key")

        assert (store.reads, store.writes) == (1, 1)

    def test_hit_never_writes(self, fake_geocoder) -> None:
        store = RecordingStore({OPTION: {"New York, NY": {"latitude": 40.7128, "longitude": -74.006}}})
        resolver = GeocodeResolver(store, OPTION, geocoder=fake_geocoder)

        resolver.resolve("New York, NY", "test-key")

        assert store.writes == 0

    def test_unreadable_cached_entry_is_refetched(self, fake_geocoder) -> None:
        store = MemoryOptionStore({OPTION: {"New York, NY": {"lat": 1, "lng": 2}}})
        resolver = GeocodeResolver(store, OPTION, geocoder=fake_geocoder)

        result = resolver.resolve("New York, NY", "test-key")

        assert result == NEW_YORK
        assert len(fake_geocoder.calls) == 1
        assert store.get(OPTION)["New York, NY"] == {"latitude": 40.7128, "longitude": -74.006}

    def test_non_mapping_option_is_replaced(self, fake_geocoder) -> None:
        store = MemoryOptionStore({OPTION: False})
        resolver = GeocodeResolver(store, OPTION, geocoder=fake_geocoder)

        resolver.resolve("New York, NY", "test-key")

        assert store.get(OPTION) == {"New York, NY": {"latitude": 40.7128, "longitude": -74.006}}

    def test_option_name_is_configurable(self, memory_store, fake_geocoder) -> None:
        resolver = GeocodeResolver(memory_store, "custom_coordinates", geocoder=fake_geocoder)

        resolver.resolve("New York, NY", "test-key")

        assert resolver.option_name == "custom_coordinates"
        assert memory_store.get("custom_coordinates") is not None
        assert memory_store.get(OPTION) is None

    def test_cached_addresses(self, memory_store, fake_geocoder) -> None:
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=fake_geocoder)
        resolver.resolve("New York, NY", "test-key")

        assert resolver.cached_addresses() == {"New York, NY": NEW_YORK}


class TestResolveFailures:
    """Tests for failure results; failures never write the cache."""

    def test_service_error_returns_failure_and_leaves_cache(self, geocoder_factory) -> None:
        before = {"Paris": {"latitude": 48.8566, "longitude": 2.3522}}
        store = RecordingStore({OPTION: before})
        geocoder = geocoder_factory(
            error=ServiceError("fake", "The provided API key is invalid.", service_status="REQUEST_DENIED")
        )
        resolver = GeocodeResolver(store, OPTION, geocoder=geocoder)

        result = resolver.resolve("New York, NY", "bad-key")

        assert isinstance(result, GeocodeFailure)
        assert result.kind == GeocodeErrorKind.SERVICE
        assert result.message == "The provided API key is invalid."
        assert result.service_status == "REQUEST_DENIED"
        assert store.writes == 0
        assert store.get(OPTION) == before

    def test_transport_error_returns_failure(self, memory_store, geocoder_factory) -> None:
        geocoder = geocoder_factory(error=TransportError("fake", "Something went wrong"))
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=geocoder)

        result = resolver.resolve("New York, NY", "test-key")

        assert is_failure(result)
        assert result.kind == GeocodeErrorKind.TRANSPORT
        assert memory_store.get(OPTION) is None

    def test_failure_is_not_cached(self, memory_store, geocoder_factory) -> None:
        geocoder = geocoder_factory(error=TransportError("fake", "Something went wrong"))
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=geocoder)

        resolver.resolve("New York, NY", "test-key")
        resolver.resolve("New York, NY", "test-key")

        assert len(geocoder.calls) == 2

    def test_success_is_not_a_failure(self, memory_store, fake_geocoder) -> None:
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=fake_geocoder)
        assert not is_failure(resolver.resolve("New York, NY", "test-key"))


class TestResolveWithGoogleMaps:
    """Resolver wired to the Google Maps provider over a mock transport."""

    def _resolver(self, store, responses: list[httpx.Response]) -> tuple[GeocodeResolver, list[httpx.Request]]:
        requests: list[httpx.Request] = []
        pending = iter(responses)

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return next(pending)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        return GeocodeResolver(store, OPTION, geocoder=GoogleMapsGeocoder(client=client)), requests

    def test_one_request_per_new_address(self, memory_store) -> None:
        body = {"status": "OK", "results": [{"geometry": {"location": {"lat": 40.7128, "lng": -74.006}}}]}
        resolver, requests = self._resolver(memory_store, [httpx.Response(200, json=body)])

        first = resolver.resolve("New York, NY", "test-key")
        second = resolver.resolve("New York, NY", "test-key")

        assert first == second == NEW_YORK
        assert len(requests) == 1

    def test_malformed_json_is_transport_failure(self, memory_store) -> None:
        resolver, _ = self._resolver(memory_store, [httpx.Response(200, text="not json")])

        result = resolver.resolve("New York, NY", "test-key")

        assert isinstance(result, GeocodeFailure)
        assert result.kind == GeocodeErrorKind.TRANSPORT
        assert '"New York, NY"' in result.message
        assert memory_store.get(OPTION) is None

    def test_unencodable_address_is_transport_failure(self, memory_store) -> None:
        resolver, requests = self._resolver(memory_store, [])

        result = resolver.resolve("bad\ud800addr", "test-key")

        assert isinstance(result, GeocodeFailure)
        assert result.kind == GeocodeErrorKind.TRANSPORT
        assert requests == []
        assert memory_store.get(OPTION) is None

    def test_service_status_without_message_uses_generic_message(self, memory_store) -> None:
        resolver, _ = self._resolver(memory_store, [httpx.Response(200, json={"status": "ZERO_RESULTS"})])

        result = resolver.resolve("Nowhere", "test-key")

        assert isinstance(result, GeocodeFailure)
        assert result.kind == GeocodeErrorKind.SERVICE
        assert result.message.startswith('Something went wrong when getting the coordinates for "Nowhere"')

    def test_database_store_round_trip(self, session_factory) -> None:
        body = {"status": "OK", "results": [{"geometry": {"location": {"lat": 40.7128, "lng": -74.006}}}]}
        store = DatabaseOptionStore(session_factory)
        resolver, requests = self._resolver(store, [httpx.Response(200, json=body)])

        resolver.resolve("New York, NY", "test-key")
        again = GeocodeResolver(store, OPTION, geocoder=GoogleMapsGeocoder()).resolve("New York, NY", "test-key")

        assert again == NEW_YORK
        assert len(requests) == 1


class _BarrierGeocoder(BaseGeocoder):
    """Holds every caller until all expected calls are in flight, then answers each with its own result."""

    def __init__(self, results: list[Coordinates]) -> None:
        self._results = results
        self._barrier = threading.Barrier(len(results))
        self._lock = threading.Lock()
        self.calls = 0

    @property
    def provider_name(self) -> str:
        return "barrier"

    def geocode(self, address: str, api_key: str) -> Coordinates:
        with self._lock:
            result = self._results[self.calls]
            self.calls += 1
        self._barrier.wait(timeout=5)
        return result


def _run_concurrently(resolver: GeocodeResolver, addresses: list[str]) -> list[Any]:
    results: list[Any] = [None] * len(addresses)

    def worker(index: int, address: str) -> None:
        results[index] = resolver.resolve(address, "test-key")

    threads = [threading.Thread(target=worker, args=(i, a)) for i, a in enumerate(addresses)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)
    return results


class TestConcurrentMisses:
    """Concurrent misses are not deduplicated and the last full-cache write wins."""

    def test_same_address_fetched_twice_last_writer_wins(self, memory_store) -> None:
        first = Coordinates(latitude=40.7128, longitude=-74.006)
        second = Coordinates(latitude=40.7130, longitude=-74.0059)
        geocoder = _BarrierGeocoder([first, second])
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=geocoder)

        results = _run_concurrently(resolver, ["New York, NY", "New York, NY"])

        assert geocoder.calls == 2
        assert sorted(results, key=lambda c: c.latitude) == [first, second]
        stored = memory_store.get(OPTION)
        assert set(stored) == {"New York, NY"}
        assert stored["New York, NY"] in (first.to_dict(), second.to_dict())

    def test_different_addresses_can_lose_an_entry(self, memory_store) -> None:
        paris = Coordinates(latitude=48.8566, longitude=2.3522)
        rome = Coordinates(latitude=41.9028, longitude=12.4964)
        geocoder = _BarrierGeocoder([paris, rome])
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=geocoder)

        _run_concurrently(resolver, ["Paris", "Rome"])

        # Both callers read the empty cache before either wrote, so each
        # write replaces the other's.
        stored = memory_store.get(OPTION)
        assert len(stored) == 1
        assert set(stored) <= {"Paris", "Rome"}

    @pytest.mark.parametrize("workers", [2, 4])
    def test_no_corrupted_entry(self, memory_store, workers: int) -> None:
        candidates = [Coordinates(latitude=10.0 + i, longitude=20.0 + i) for i in range(workers)]
        geocoder = _BarrierGeocoder(candidates)
        resolver = GeocodeResolver(memory_store, OPTION, geocoder=geocoder)

        _run_concurrently(resolver, ["Somewhere"] * workers)

        assert memory_store.get(OPTION)["Somewhere"] in [c.to_dict() for c in candidates]
