"""Basic usage example for documentation search."""

import json
from pathlib import Path

from doc_search import DocSearchService, ValidationError


def load_corpus(data_file: Path) -> dict:
    """Load extractor output from a JSON file."""
    with open(data_file) as f:
        return json.load(f)


def basic_search_demo():
    """Demonstrate search, lookup and listing."""
    print("Documentation Search - Basic Usage Demo")
    print("=" * 50)

    print("\n1. Initializing search service...")
    service = DocSearchService(log_level="WARNING", min_api_count=1)

    print("\n2. Building search index...")
    corpus = load_corpus(Path(__file__).parent / "sample_data" / "device_info_corpus.json")
    report = service.build(corpus["apis"], corpus["chunks"])

    stats = service.get_stats()["index"]
    print(f"   Indexed {stats['api_count']} APIs and {stats['chunk_count']} chunks")
    print(f"   Vocabulary size: {stats['term_count']} terms")
    for warning in report.warnings:
        print(f"   Warning: {warning}")

    print("\n3. Performing searches...")
    search_examples = [
        ("battery level", "all", "all"),
        ("airplane mode", "guide", "all"),
        ("IP address on iOS simulator", "all", "ios"),
        ("device memory", "api", "all"),
    ]

    for query_text, content_type, platform in search_examples:
        print(f"\n   Query: '{query_text}' (type={content_type}, platform={platform})")
        results = service.search_text(query_text, limit=3, type=content_type, platform=platform)

        if not results:
            print("   No results found")
            continue

        for i, result in enumerate(results, 1):
            label = result.item.name if result.type.value == "api" else result.item.title
            print(f"     {i}. [{result.type.value}] {label} - Score: {result.score}")
            for highlight in result.highlights:
                print(f"        {highlight.field}: {highlight.excerpt[:80]}")

    print("\n4. Looking up APIs...")
    for name in ["getBatteryLevel", "getBattryLevel", "Charging"]:
        lookup = service.lookup_api(name)
        if lookup.found:
            print(f"   {name}: {lookup.api.signature}")
        else:
            suggestions = ", ".join(api.name for api in lookup.suggestions) or "none"
            print(f"   {name}: not found, did you mean {suggestions}?")

    print("\n5. Listing Android APIs by category...")
    for category, apis in service.list_apis(platform="android").items():
        print(f"   {category.display_name}: {', '.join(api.name for api in apis)}")

    print("\n6. Invalid input...")
    try:
        service.search_text("battery", limit=50)
    except ValidationError as e:
        print(f"   Rejected: {e}")

    health = service.health_check()
    print(f"\n   System status: {health['status']}")


if __name__ == "__main__":
    basic_search_demo()
