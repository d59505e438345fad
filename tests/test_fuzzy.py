"""Test fuzzy API name resolution."""

import pytest

from doc_search.core.fuzzy import find_similar_apis, levenshtein_distance


class TestLevenshteinDistance:
    """Test levenshtein_distance function."""

    @pytest.mark.parametrize("a,b,expected", [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("brand", "brand", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("", "", 0),
    ])
    def test_known_distances(self, a, b, expected):
        """Test distances for well-known pairs."""
        assert levenshtein_distance(a, b) == expected

    def test_symmetric(self):
        """Test that argument order does not matter."""
        assert levenshtein_distance("getbatterylevel", "getbattrylevel") == \
            levenshtein_distance("getbattrylevel", "getbatterylevel") == 1

    def test_returns_int(self):
        """Test that the numpy table value is returned as a plain int."""
        assert type(levenshtein_distance("ab", "ba")) is int


class TestFindSimilarApis:
    """Test find_similar_apis function."""

    def test_typo(self, sample_apis):
        """Test that a one-letter typo resolves to the intended API."""
        results = find_similar_apis("getBattryLevel", sample_apis)

        assert results[0].name == "getBatteryLevel"

    def test_exact_match_short_circuits(self, sample_apis):
        """Test that a case-insensitive exact match is returned alone."""
        results = find_similar_apis("GETBATTERYLEVEL", sample_apis, max_distance=0, limit=0)

        assert [api.name for api in results] == ["getBatteryLevel"]

    def test_prefix(self, sample_apis):
        """Test that a name prefix ranks the API first."""
        results = find_similar_apis("getBattery", sample_apis)

        assert results[0].name == "getBatteryLevel"

    def test_substring(self, sample_apis):
        """Test that a name fragment matches."""
        results = find_similar_apis("Charging", sample_apis)

        assert results[0].name == "isBatteryCharging"

    def test_ties_keep_collection_order(self, sample_apis):
        """Test that equally close names keep collection order."""
        results = find_similar_apis("get", sample_apis, limit=3)

        assert [api.name for api in results] == [
            "getBatteryLevel",
            "getPowerState",
            "getHasDynamicIsland",
        ]

    def test_limit(self, sample_apis):
        """Test that the number of suggestions is capped."""
        assert len(find_similar_apis("get", sample_apis, limit=1)) == 1
        assert find_similar_apis("get", sample_apis, limit=0) == []

    def test_no_match(self, sample_apis):
        """Test that distant names yield no suggestions."""
        assert find_similar_apis("zzzzzzzzzz", sample_apis) == []

    def test_max_distance(self, make_api):
        """Test that the edit distance bound is inclusive."""
        apis = [make_api("brand")]

        assert find_similar_apis("bxxnd", apis, max_distance=2) == apis
        assert find_similar_apis("bxxnd", apis, max_distance=1) == []

    def test_empty_collection(self):
        """Test that an empty collection yields no suggestions."""
        assert find_similar_apis("getBatteryLevel", []) == []
