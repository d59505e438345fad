"""Pytest configuration and shared fixtures."""

import pytest
from typing import List

from doc_search.core.engine import DocSearchEngine
from doc_search.core.index import build_search_index
from doc_search.models.api import (
    ApiCategory,
    ApiKind,
    ApiRecord,
    Parameter,
    Platform,
    PlatformType,
)
from doc_search.models.chunk import ChunkType, DocumentationChunk


def _make_api(name: str, description: str = "Sample API description text", **kwargs) -> ApiRecord:
    """Build an API record with sensible defaults."""
    fields = dict(
        kind=ApiKind.METHOD,
        signature=f"{name}(): string",
        return_type="string",
        category=ApiCategory.CORE_DEVICE_INFO,
    )
    fields.update(kwargs)
    return ApiRecord(name=name, description=description, **fields)


def _make_chunk(chunk_id: str, title: str, content: str, **kwargs) -> DocumentationChunk:
    """Build a documentation chunk with sensible defaults."""
    fields = dict(source="docs/guide.md", type=ChunkType.GUIDE, heading_level=2)
    fields.update(kwargs)
    return DocumentationChunk(id=chunk_id, title=title, content=content, **fields)


@pytest.fixture
def sample_apis() -> List[ApiRecord]:
    """Create a subset of the DeviceInfo interface for testing."""
    return [
        ApiRecord(
            name="getBatteryLevel",
            kind=ApiKind.METHOD,
            description="Get current battery level as a float between 0.0 and 1.0",
            signature="getBatteryLevel(): number",
            return_type="number",
            category=ApiCategory.BATTERY_POWER,
            platform=Platform(PlatformType.BOTH),
            examples=("0.75 represents 75% battery",),
            related_apis=("getPowerState", "isBatteryCharging"),
        ),
        ApiRecord(
            name="getPowerState",
            kind=ApiKind.METHOD,
            description="Get comprehensive power state including battery level and low power mode",
            signature="getPowerState(): PowerState",
            return_type="PowerState",
            category=ApiCategory.BATTERY_POWER,
            platform=Platform(PlatformType.BOTH),
        ),
        ApiRecord(
            name="getHasDynamicIsland",
            kind=ApiKind.METHOD,
            description="Check if the device has a Dynamic Island display cutout",
            signature="getHasDynamicIsland(): boolean",
            return_type="boolean",
            category=ApiCategory.DISPLAY_SCREEN,
            platform=Platform(PlatformType.IOS_ONLY, min_version="16.0"),
        ),
        ApiRecord(
            name="getIsAirplaneMode",
            kind=ApiKind.METHOD,
            description="Check if airplane mode is enabled on the device",
            signature="getIsAirplaneMode(): boolean",
            return_type="boolean",
            category=ApiCategory.NETWORK,
            platform=Platform(PlatformType.ANDROID_ONLY),
        ),
        ApiRecord(
            name="getIpAddress",
            kind=ApiKind.METHOD,
            description="Get the current IP address of the device network interface",
            signature="getIpAddress(): Promise<string>",
            return_type="Promise<string>",
            category=ApiCategory.NETWORK,
            platform=Platform(PlatformType.BOTH),
            is_async=True,
        ),
        ApiRecord(
            name="isBatteryCharging",
            kind=ApiKind.METHOD,
            description="Check if battery is currently charging",
            signature="isBatteryCharging(): boolean",
            return_type="boolean",
            category=ApiCategory.BATTERY_POWER,
            platform=Platform(PlatformType.BOTH),
        ),
        ApiRecord(
            name="deviceId",
            kind=ApiKind.PROPERTY,
            description="Get device model identifier such as iPhone14,2",
            signature="readonly deviceId: string",
            return_type="string",
            category=ApiCategory.CORE_DEVICE_INFO,
            platform=Platform(PlatformType.BOTH),
        ),
        ApiRecord(
            name="brand",
            kind=ApiKind.PROPERTY,
            description="Get device brand or manufacturer name",
            signature="readonly brand: string",
            return_type="string",
            category=ApiCategory.CORE_DEVICE_INFO,
            platform=Platform(PlatformType.BOTH),
        ),
        ApiRecord(
            name="totalMemory",
            kind=ApiKind.PROPERTY,
            description="Total device memory in bytes",
            signature="readonly totalMemory: number",
            return_type="number",
            category=ApiCategory.SYSTEM_RESOURCES,
            platform=Platform(PlatformType.BOTH),
        ),
        ApiRecord(
            name="apiLevel",
            kind=ApiKind.PROPERTY,
            description="Android SDK API level of the running system",
            signature="readonly apiLevel: number",
            return_type="number",
            category=ApiCategory.ANDROID_PLATFORM,
            platform=Platform(PlatformType.ANDROID, min_api_level=1),
        ),
        ApiRecord(
            name="hasSystemFeature",
            kind=ApiKind.METHOD,
            description="Check whether the device declares an Android system feature",
            signature="hasSystemFeature(feature: string): boolean",
            return_type="boolean",
            category=ApiCategory.DEVICE_CAPABILITIES,
            platform=Platform(PlatformType.ANDROID_ONLY),
            parameters=(
                Parameter(name="feature", type="string", description="Feature name to query"),
            ),
        ),
    ]


@pytest.fixture
def sample_chunks() -> List[DocumentationChunk]:
    """Create documentation chunks for testing."""
    return [
        DocumentationChunk(
            id="docs/battery.md#1",
            source="docs/battery.md",
            title="Battery Info",
            content="Use getBatteryLevel to read charge.",
            type=ChunkType.GUIDE,
            heading_level=2,
            parent_id="docs/battery.md#0",
            mentioned_apis=("getBatteryLevel",),
        ),
        DocumentationChunk(
            id="docs/troubleshooting.md#1",
            source="docs/troubleshooting.md",
            title="Simulator Issues",
            content="On the simulator the IP address may return empty. "
                    "Test on a physical device for accurate network information.",
            type=ChunkType.TROUBLESHOOTING,
            heading_level=3,
            mentioned_apis=("getIpAddress",),
            platforms=("ios",),
        ),
        DocumentationChunk(
            id="docs/troubleshooting.md#2",
            source="docs/troubleshooting.md",
            title="Airplane mode detection",
            content="Airplane mode detection only works on Android devices.",
            type=ChunkType.TROUBLESHOOTING,
            heading_level=3,
            mentioned_apis=("getIsAirplaneMode",),
            platforms=("android",),
        ),
    ]


@pytest.fixture
def sample_index(sample_apis, sample_chunks):
    """Build a search index from the sample corpus."""
    return build_search_index(sample_apis, sample_chunks)


@pytest.fixture
def engine(sample_apis, sample_chunks) -> DocSearchEngine:
    """Build a search engine over the sample corpus."""
    return DocSearchEngine.build(sample_apis, sample_chunks)


@pytest.fixture
def raw_api_records() -> List[dict]:
    """API records as the extractor emits them (camelCase keys)."""
    return [
        {
            "name": "getBatteryLevel",
            "kind": "method",
            "description": "Get current battery level as a float between 0.0 and 1.0",
            "signature": "getBatteryLevel(): number",
            "returnType": "number",
            "parameters": [],
            "platform": {"type": "both"},
            "isAsync": False,
            "examples": ["0.75 represents 75% battery"],
            "relatedApis": ["getPowerState"],
            "category": "battery-power",
        },
        {
            "name": "getIsAirplaneMode",
            "kind": "method",
            "description": "Check if airplane mode is enabled on the device",
            "signature": "getIsAirplaneMode(): boolean",
            "returnType": "boolean",
            "platform": {"type": "android-only", "minApiLevel": 17},
            "category": "network",
        },
    ]


@pytest.fixture
def raw_chunks() -> List[dict]:
    """Documentation chunks as the extractor emits them (camelCase keys)."""
    return [
        {
            "id": "README.md#2",
            "source": "README.md",
            "title": "Quick Start",
            "content": "Create the DeviceInfo hybrid object and read the battery level.",
            "type": "guide",
            "headingLevel": 2,
            "parentId": "README.md#0",
            "mentionedApis": ["getBatteryLevel"],
            "platforms": [],
        },
    ]


@pytest.fixture
def make_api():
    """Factory for ad-hoc API records."""
    return _make_api


@pytest.fixture
def make_chunk():
    """Factory for ad-hoc documentation chunks."""
    return _make_chunk
