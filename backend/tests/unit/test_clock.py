"""
Unit tests for the id and timestamp provider.
"""

import uuid
from datetime import datetime, timedelta
from threading import Thread

from proedit.core.clock import Clock, generate_uuid, utcnow


class TestClock:

    def test_follows_source(self, frozen_time):
        clock = Clock(frozen_time)
        assert clock.now() == datetime(2024, 1, 1, 12, 0, 0)
        frozen_time.advance(minutes=5)
        assert clock.now() == datetime(2024, 1, 1, 12, 5, 0)

    def test_stopped_source_still_increases(self, frozen_time):
        clock = Clock(frozen_time)
        first = clock.now()
        second = clock.now()
        assert second == first + timedelta(microseconds=1)

    def test_source_going_backwards(self, frozen_time):
        clock = Clock(frozen_time)
        first = clock.now()
        frozen_time.advance(seconds=-10)
        assert clock.now() > first

    def test_concurrent_readings_are_unique(self, frozen_time):
        clock = Clock(frozen_time)
        readings = []

        def read():
            for _ in range(200):
                readings.append(clock.now())

        threads = [Thread(target=read) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(set(readings)) == 800

    def test_default_source_is_naive_utc(self):
        now = Clock().now()
        assert now.tzinfo is None
        assert abs(now - utcnow()) < timedelta(seconds=5)


class TestGenerateUuid:

    def test_is_uuid4(self):
        value = generate_uuid()
        assert uuid.UUID(value).version == 4

    def test_unique(self):
        assert len({generate_uuid() for _ in range(100)}) == 100
