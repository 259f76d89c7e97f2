import threading
import unittest

from address_weather.domain import Address
from address_weather.result_cache import InMemoryResultCache, full_address_key, key_strategy, zipcode_key


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class TestInMemoryResultCache(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()

    def test_entry_present_before_ttl_and_absent_at_ttl(self):
        cache = InMemoryResultCache(ttl_seconds=60, max_entries=10, clock=self.clock)
        cache.put("95747", "{}")
        self.clock.advance(59.9)
        self.assertEqual(cache.get("95747"), "{}")
        self.clock.advance(0.1)
        self.assertIsNone(cache.get("95747"))

    def test_put_overwrites_and_resets_age(self):
        cache = InMemoryResultCache(ttl_seconds=60, max_entries=10, clock=self.clock)
        cache.put("95747", "old")
        self.clock.advance(50)
        cache.put("95747", "new")
        self.clock.advance(50)
        self.assertEqual(cache.get("95747"), "new")
        self.assertEqual(len(cache), 1)

    def test_capacity_keeps_exactly_max_entries(self):
        cache = InMemoryResultCache(ttl_seconds=60, max_entries=3, clock=self.clock)
        keys = ["a", "b", "c", "d"]
        for key in keys:
            cache.put(key, f"payload-{key}")
        retrievable = [key for key in keys if cache.get(key) is not None]
        self.assertEqual(len(retrievable), 3)
        self.assertEqual(len(cache), 3)

    def test_evicts_least_recently_used(self):
        cache = InMemoryResultCache(ttl_seconds=60, max_entries=2, clock=self.clock)
        cache.put("a", "1")
        cache.put("b", "2")
        cache.get("a")
        cache.put("c", "3")
        self.assertEqual(cache.get("a"), "1")
        self.assertIsNone(cache.get("b"))
        self.assertEqual(cache.get("c"), "3")

    def test_expired_entries_are_evicted_before_live_ones(self):
        cache = InMemoryResultCache(ttl_seconds=60, max_entries=2, clock=self.clock)
        cache.put("old", "1")
        self.clock.advance(30)
        cache.put("live", "2")
        self.clock.advance(29)
        # touching "old" makes "live" the least recently used entry
        self.assertEqual(cache.get("old"), "1")
        self.clock.advance(2)
        cache.put("new", "3")
        self.assertEqual(cache.get("live"), "2")
        self.assertEqual(cache.get("new"), "3")
        self.assertIsNone(cache.get("old"))

    def test_clear(self):
        cache = InMemoryResultCache(ttl_seconds=60, max_entries=2, clock=self.clock)
        cache.put("a", "1")
        cache.clear()
        self.assertIsNone(cache.get("a"))
        self.assertEqual(len(cache), 0)

    def test_rejects_non_positive_limits(self):
        with self.assertRaises(ValueError):
            InMemoryResultCache(ttl_seconds=0, max_entries=1)
        with self.assertRaises(ValueError):
            InMemoryResultCache(ttl_seconds=60, max_entries=0)

    def test_concurrent_puts_and_gets_stay_bounded(self):
        cache = InMemoryResultCache(ttl_seconds=60, max_entries=50)
        errors = []

        def worker(offset):
            try:
                for i in range(200):
                    key = str((offset * 200 + i) % 120)
                    cache.put(key, key)
                    value = cache.get(key)
                    if value is not None and value != key:
                        errors.append((key, value))
            except Exception as exc:  # pragma: no cover - surfaced via assertion
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        self.assertLessEqual(len(cache), 50)


class TestCacheKeys(unittest.TestCase):
    def test_zipcode_key_ignores_street_city_state(self):
        a = Address(street="1 Main St", city="Roseville", state="CA", zipcode="95747")
        b = Address(street="99 Other Rd", city="Elsewhere", state="NV", zipcode="95747")
        self.assertEqual(zipcode_key(a), zipcode_key(b))

    def test_full_address_key_normalizes_case_and_spacing(self):
        a = Address(street="1261  Pleasant Grove Blvd", city="Roseville", state="CA", zipcode="95747")
        b = Address(street="1261 pleasant grove blvd", city="ROSEVILLE", state="ca", zipcode="95747")
        c = Address(street="1262 Pleasant Grove Blvd", city="Roseville", state="CA", zipcode="95747")
        self.assertEqual(full_address_key(a), full_address_key(b))
        self.assertNotEqual(full_address_key(a), full_address_key(c))

    def test_key_strategy_lookup(self):
        self.assertIs(key_strategy("zipcode"), zipcode_key)
        self.assertIs(key_strategy("address"), full_address_key)
        with self.assertRaises(ValueError):
            key_strategy("geohash")


if __name__ == "__main__":
    unittest.main()
