"""Performance tests for documentation search."""

import time

import pytest

from doc_search.core.engine import DocSearchEngine
from doc_search.models.api import ApiCategory, ApiKind, Platform, PlatformType


class TestPerformance:
    """Performance testing over a synthetic DeviceInfo-sized corpus."""

    @pytest.fixture
    def large_engine(self, make_api, make_chunk):
        """Create an engine with 150 APIs and 150 documentation chunks."""
        subjects = ["battery", "memory", "network", "display", "storage", "carrier", "audio", "location"]
        verbs = ["level", "state", "capacity", "status", "usage", "availability"]
        categories = list(ApiCategory)
        platforms = list(PlatformType)

        apis = []
        for i in range(150):
            subject = subjects[i % len(subjects)]
            verb = verbs[i % len(verbs)]
            apis.append(make_api(
                f"get{subject.title()}{verb.title()}{i}",
                f"Get the current {subject} {verb} reported by the operating system",
                kind=ApiKind.METHOD if i % 3 else ApiKind.PROPERTY,
                category=categories[i % len(categories)],
                platform=Platform(platforms[i % len(platforms)]),
            ))

        chunks = []
        for i in range(150):
            subject = subjects[i % len(subjects)]
            chunks.append(make_chunk(
                f"docs/guide-{i // 10}.md#{i % 10}",
                f"Working with {subject}",
                f"Read the {subject} values on a physical device. "
                f"The simulator returns placeholder {subject} data on iOS and Android.",
                platforms=("ios", "android")[: i % 3],
            ))

        return DocSearchEngine.build(apis, chunks)

    def test_large_corpus_indexed(self, large_engine):
        """Test that the corpus indexes as expected."""
        stats = large_engine.get_stats()

        assert stats["api_count"] == 150
        assert stats["chunk_count"] == 150
        assert stats["total_documents"] == 300

    def test_query_throughput(self, large_engine):
        """Test that 50 queries complete well within interactive latency."""
        queries = [
            "battery level", "memory usage", "network state", "display capacity",
            "storage availability", "carrier status", "audio level", "location state",
            "iOS simulator battery", "android network",
        ] * 5

        start_time = time.time()
        for query in queries:
            results = large_engine.search(query, limit=10)
            assert results
        search_time = time.time() - start_time

        print(f"\n50 queries over 300 documents took {search_time:.3f}s")
        assert search_time < 5.0

    def test_fuzzy_throughput(self, large_engine):
        """Test fuzzy lookups across the whole API collection."""
        start_time = time.time()
        for i in range(20):
            large_engine.find_similar(f"getBatteryLevl{i}")
        fuzzy_time = time.time() - start_time

        assert fuzzy_time < 5.0
