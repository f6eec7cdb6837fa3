"""
ColorWheel v1 API Routes
Conversion, harmony derivation and wheel selection endpoints.
"""
from typing import Any, Dict
from fastapi import APIRouter, HTTPException

from colorwheel.schemas import (
    CombinationListResponse, ConvertRequest, ConvertResponse, ErrorResponse,
    HarmonyRequest, HarmonyResponse, SelectRequest
)
from colorwheel.services.colors.harmony_api import (
    handle_convert, handle_harmony, handle_select, list_combinations
)
from colorwheel.utils.metrics import get_metrics

router = APIRouter(prefix="/v1", tags=["Color Harmony"])

ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "Invalid color, scheme or range"}}


@router.get("/colors/combinations", response_model=CombinationListResponse,
            summary="List harmony schemes")
def get_combinations() -> CombinationListResponse:
    """Available harmony schemes with their hue offsets, labels and symbols."""
    return list_combinations()


@router.post("/colors/convert", response_model=ConvertResponse,
             responses=ERROR_RESPONSES,
             summary="Convert between RGB, HSV and hex")
def convert_color(request: ConvertRequest) -> ConvertResponse:
    """
    Convert a color given in exactly one representation.

    - **rgb**: channels in [0, 1]
    - **hsv**: hue in degrees, saturation and value in [0, 1]
    - **hex**: #RRGGBB
    """
    return handle_convert(request)


@router.post("/colors/harmony", response_model=HarmonyResponse,
             responses=ERROR_RESPONSES,
             summary="Derive a harmony color set")
def derive_harmony(request: HarmonyRequest) -> HarmonyResponse:
    """
    Derive the ordered color set for a base color.

    - **rgb** or **hex**: base color
    - **combination**: single, complementary, analogous, triadic or tetradic
    - **brightness**: optional value applied before derivation

    Colors come back base first, then one per hue offset in clockwise order.
    """
    return handle_harmony(request)


@router.post("/colors/select", response_model=HarmonyResponse,
             responses=ERROR_RESPONSES,
             summary="Resolve a wheel selection")
def select_color(request: SelectRequest) -> HarmonyResponse:
    """
    Resolve a polar pointer position into a color and its harmony set.

    - **angle**: degrees from the wheel centre, becomes the hue
    - **distance**: normalized distance, becomes the saturation (capped at 1)
    - **brightness**: becomes the value
    """
    return handle_select(request)


@router.get("/metrics", summary="Service metrics")
def service_metrics() -> Dict[str, Any]:
    """In-process request counters, scheme usage and timing statistics."""
    try:
        return get_metrics().get_summary()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get metrics: {str(e)}")
