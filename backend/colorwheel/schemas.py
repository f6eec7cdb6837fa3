"""
ColorWheel API Schemas
Pydantic models for conversion, harmony and wheel selection request/response
validation.
"""
from typing import List, Optional, Dict
from pydantic import BaseModel, ConfigDict, Field, model_validator


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("colorwheel-harmony", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


# ============================================================================
# COLOR VALUES
# ============================================================================

class RGBModel(BaseModel):
    """Normalized RGB color. Out-of-range channels are rejected in strict mode."""
    model_config = ConfigDict(allow_inf_nan=False)

    r: float = Field(..., description="Red channel [0, 1]")
    g: float = Field(..., description="Green channel [0, 1]")
    b: float = Field(..., description="Blue channel [0, 1]")


class HSVModel(BaseModel):
    """HSV color with hue in degrees."""
    model_config = ConfigDict(allow_inf_nan=False)

    h: float = Field(..., description="Hue in degrees (any real, wrapped into [0, 360))")
    s: float = Field(..., description="Saturation [0, 1]")
    v: float = Field(..., description="Value [0, 1]")


class IndicatorModel(BaseModel):
    """Marker placement on the wheel."""
    angle: float = Field(..., description="Rotation in degrees, clockwise-positive (= -hue)")
    distance: float = Field(..., description="Fraction of the wheel radius (= saturation)")


class ColorEntry(BaseModel):
    """A color in a harmony set."""
    role: str = Field(..., pattern="^(base|harmony)$", description="base or harmony")
    hex: str = Field(..., pattern=r"^#[0-9A-F]{6}$", description="Hex color code #RRGGBB")
    rgb: RGBModel
    hsv: HSVModel
    indicator: IndicatorModel


class CombinationInfo(BaseModel):
    """Registry entry for a harmony scheme."""
    name: str = Field(..., description="Scheme identifier")
    label: str = Field(..., description="Display label")
    symbol: str = Field(..., description="Icon symbol name")
    angles: List[float] = Field(..., description="Hue offsets in degrees, clockwise order")
    offset_count: int = Field(..., ge=0, description="Number of additional colors")


class CombinationListResponse(BaseModel):
    """All available harmony schemes."""
    combinations: List[CombinationInfo]
    default: str = Field(..., description="Scheme selected when none is given")


# ============================================================================
# CONVERSION
# ============================================================================

class ConvertRequest(BaseModel):
    """Convert a color given in exactly one representation."""
    rgb: Optional[RGBModel] = None
    hsv: Optional[HSVModel] = None
    hex: Optional[str] = Field(None, description="Hex color code #RRGGBB")

    @model_validator(mode="after")
    def check_single_input(self):
        provided = sum(value is not None for value in (self.rgb, self.hsv, self.hex))
        if provided != 1:
            raise ValueError("Provide exactly one of rgb, hsv or hex")
        return self


class ConvertResponse(BaseModel):
    """A color in every representation."""
    rgb: RGBModel
    hsv: HSVModel
    hex: str = Field(..., pattern=r"^#[0-9A-F]{6}$")
    achromatic: bool = Field(..., description="True when the color has no hue")


# ============================================================================
# HARMONY
# ============================================================================

class HarmonyRequest(BaseModel):
    """Harmony derivation request."""
    model_config = ConfigDict(allow_inf_nan=False)

    rgb: Optional[RGBModel] = Field(None, description="Base color as RGB")
    hex: Optional[str] = Field(None, description="Base color as #RRGGBB")
    combination: Optional[str] = Field(None, description="Harmony scheme name")
    brightness: Optional[float] = Field(None, description="Value applied before derivation [0, 1]")

    @model_validator(mode="after")
    def check_single_base(self):
        if (self.rgb is None) == (self.hex is None):
            raise ValueError("Provide exactly one of rgb or hex")
        return self


class SelectRequest(BaseModel):
    """Polar selection on the wheel."""
    model_config = ConfigDict(allow_inf_nan=False)

    angle: float = Field(..., description="Angle from the wheel centre in degrees")
    distance: float = Field(..., description="Normalized distance from the centre")
    brightness: Optional[float] = Field(None, description="Current brightness [0, 1]")
    combination: Optional[str] = Field(None, description="Harmony scheme name")


class HarmonyDebug(BaseModel):
    """Processing metadata."""
    timing_ms: Dict[str, float]
    request_id: Optional[str] = None


class HarmonyResponse(BaseModel):
    """Ordered color set: base first, then harmony colors in offset order."""
    base: ColorEntry
    combination: CombinationInfo
    colors: List[ColorEntry]
    processing_notes: List[str]
    selection: Optional[HSVModel] = None
    debug: HarmonyDebug
