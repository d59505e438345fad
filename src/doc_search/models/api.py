"""API record data model with validation."""

from enum import Enum
from typing import Dict, Any, List, Optional, Tuple
from dataclasses import dataclass, field
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlatformType(str, Enum):
    """Platform applicability tags."""
    BOTH = "both"
    IOS = "ios"
    ANDROID = "android"
    IOS_ONLY = "ios-only"
    ANDROID_ONLY = "android-only"


class ApiKind(str, Enum):
    """Kind of DeviceInfo interface member."""
    METHOD = "method"
    PROPERTY = "property"


class ApiCategory(str, Enum):
    """API categories, in canonical listing order."""
    CORE_DEVICE_INFO = "core-device-info"
    DEVICE_CAPABILITIES = "device-capabilities"
    DISPLAY_SCREEN = "display-screen"
    SYSTEM_RESOURCES = "system-resources"
    BATTERY_POWER = "battery-power"
    APPLICATION_METADATA = "application-metadata"
    NETWORK = "network"
    CARRIER_INFO = "carrier-info"
    AUDIO_ACCESSORIES = "audio-accessories"
    LOCATION_SERVICES = "location-services"
    LOCALIZATION = "localization"
    CPU_ARCHITECTURE = "cpu-architecture"
    ANDROID_PLATFORM = "android-platform"
    IOS_PLATFORM = "ios-platform"
    INSTALLATION_DISTRIBUTION = "installation-distribution"
    LEGACY_COMPATIBILITY = "legacy-compatibility"
    DEVICE_INTEGRITY = "device-integrity"

    @property
    def display_name(self) -> str:
        return CATEGORY_DISPLAY_NAMES[self]


CATEGORY_DISPLAY_NAMES = {
    ApiCategory.CORE_DEVICE_INFO: "Core Device Information",
    ApiCategory.DEVICE_CAPABILITIES: "Device Capabilities",
    ApiCategory.DISPLAY_SCREEN: "Display & Screen",
    ApiCategory.SYSTEM_RESOURCES: "System Resources",
    ApiCategory.BATTERY_POWER: "Battery & Power",
    ApiCategory.APPLICATION_METADATA: "Application Metadata",
    ApiCategory.NETWORK: "Network",
    ApiCategory.CARRIER_INFO: "Carrier Information",
    ApiCategory.AUDIO_ACCESSORIES: "Audio Accessories",
    ApiCategory.LOCATION_SERVICES: "Location Services",
    ApiCategory.LOCALIZATION: "Localization",
    ApiCategory.CPU_ARCHITECTURE: "CPU & Architecture",
    ApiCategory.ANDROID_PLATFORM: "Android Platform",
    ApiCategory.IOS_PLATFORM: "iOS Platform",
    ApiCategory.INSTALLATION_DISTRIBUTION: "Installation & Distribution",
    ApiCategory.LEGACY_COMPATIBILITY: "Legacy Compatibility",
    ApiCategory.DEVICE_INTEGRITY: "Device Integrity",
}


@dataclass(frozen=True)
class Parameter:
    """Single method parameter."""
    name: str
    type: str
    description: str = ""
    optional: bool = False


@dataclass(frozen=True)
class Platform:
    """
    Platform availability of an API.

    Attributes:
        type: Applicability tag used for filtering
        min_version: Minimum iOS version, if any
        min_api_level: Minimum Android API level, if any
    """
    type: PlatformType = PlatformType.BOTH
    min_version: Optional[str] = None
    min_api_level: Optional[int] = None

    def supports_ios(self) -> bool:
        return self.type in (PlatformType.IOS, PlatformType.IOS_ONLY, PlatformType.BOTH)

    def supports_android(self) -> bool:
        return self.type in (PlatformType.ANDROID, PlatformType.ANDROID_ONLY, PlatformType.BOTH)


@dataclass(frozen=True)
class ApiRecord:
    """
    One member of the DeviceInfo interface, as produced by the API extractor.

    Attributes:
        name: Unique method/property name
        kind: Method or readonly property
        description: Human-readable description from the doc comment
        signature: Full TypeScript signature
        return_type: Return type string
        parameters: Ordered method parameters (empty for properties)
        platform: Platform availability
        is_async: Whether the method returns a Promise
        examples: Example text blocks
        related_apis: Names of related APIs for cross-reference
        category: Category tag
    """
    name: str
    kind: ApiKind
    description: str
    signature: str
    return_type: str
    category: ApiCategory
    parameters: Tuple[Parameter, ...] = ()
    platform: Platform = field(default_factory=Platform)
    is_async: bool = False
    examples: Tuple[str, ...] = ()
    related_apis: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        platform: Dict[str, Any] = {"type": self.platform.type.value}
        if self.platform.min_version is not None:
            platform["min_version"] = self.platform.min_version
        if self.platform.min_api_level is not None:
            platform["min_api_level"] = self.platform.min_api_level

        return {
            "name": self.name,
            "kind": self.kind.value,
            "description": self.description,
            "signature": self.signature,
            "return_type": self.return_type,
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type,
                    "description": p.description,
                    "optional": p.optional,
                }
                for p in self.parameters
            ],
            "platform": platform,
            "is_async": self.is_async,
            "examples": list(self.examples),
            "related_apis": list(self.related_apis),
            "category": self.category.value,
        }


class ParameterModel(BaseModel):
    """Pydantic model for parameter validation."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    type: str = Field("unknown")
    description: str = Field("")
    optional: bool = Field(False)


class PlatformModel(BaseModel):
    """Pydantic model for platform validation."""

    model_config = ConfigDict(populate_by_name=True)

    type: PlatformType = Field(PlatformType.BOTH)
    min_version: Optional[str] = Field(None, alias="minVersion")
    min_api_level: Optional[int] = Field(None, alias="minApiLevel")


class ApiRecordModel(BaseModel):
    """Pydantic model for API records handed over by the extractor.

    Accepts both snake_case and the extractor's camelCase keys.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Method or property name")
    kind: ApiKind = Field(..., description="Member kind")
    description: str = Field("", description="Human description")
    signature: str = Field("", description="Full signature")
    return_type: str = Field("", alias="returnType", description="Return type")
    parameters: List[ParameterModel] = Field(default_factory=list)
    platform: PlatformModel = Field(default_factory=PlatformModel)
    is_async: bool = Field(False, alias="isAsync")
    examples: List[str] = Field(default_factory=list)
    related_apis: List[str] = Field(default_factory=list, alias="relatedApis")
    category: ApiCategory = Field(..., description="Category tag")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is not just whitespace."""
        if not v.strip():
            raise ValueError("API name cannot be empty or whitespace only")
        return v.strip()

    @field_validator("platform", mode="before")
    @classmethod
    def coerce_platform(cls, v: Any) -> Any:
        """Allow a bare platform tag string."""
        if isinstance(v, str):
            return {"type": v}
        return v

    def to_record(self) -> ApiRecord:
        """Convert to ApiRecord dataclass."""
        return ApiRecord(
            name=self.name,
            kind=self.kind,
            description=self.description,
            signature=self.signature,
            return_type=self.return_type,
            category=self.category,
            parameters=tuple(
                Parameter(
                    name=p.name,
                    type=p.type,
                    description=p.description,
                    optional=p.optional,
                )
                for p in self.parameters
            ),
            platform=Platform(
                type=self.platform.type,
                min_version=self.platform.min_version,
                min_api_level=self.platform.min_api_level,
            ),
            is_async=self.is_async,
            examples=tuple(self.examples),
            related_apis=tuple(self.related_apis),
        )
