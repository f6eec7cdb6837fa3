"""
Color Harmony API Handlers

Handles conversion, harmony and wheel-selection requests. Validates inputs
into core types, calls the harmony orchestrator, and formats responses with
request ids, structured logs and metrics.
"""

import time
from typing import Any, Callable, Dict, Optional
from fastapi import HTTPException

from colorwheel.config import config
from colorwheel.schemas import (
    ConvertRequest, ConvertResponse, HarmonyRequest, HarmonyResponse,
    SelectRequest, CombinationListResponse, CombinationInfo,
    RGBModel, HSVModel
)
from colorwheel.services.colors.combinations import ColorCombination, describe_combination
from colorwheel.services.colors.conversion import RGB, hex_to_rgb, hsv_to_rgb, rgb_to_hex
from colorwheel.services.colors.harmony.orchestrator import generate_harmony, generate_selection
from colorwheel.utils.ids import generate_request_id
from colorwheel.utils.logging import get_logger
from colorwheel.utils.metrics import get_metrics


def list_combinations() -> CombinationListResponse:
    """Registry of harmony schemes in declaration order."""
    return CombinationListResponse(
        combinations=[CombinationInfo(**describe_combination(c)) for c in ColorCombination],
        default=_validate_combination(None).value
    )


def handle_convert(request: ConvertRequest) -> ConvertResponse:
    """
    Convert a color given as RGB, HSV or hex into every representation.

    Args:
        request: Conversion request with exactly one representation set

    Returns:
        ConvertResponse with rgb, hsv, hex and achromatic flag

    Raises:
        HTTPException: For out-of-range or malformed inputs
    """
    def convert() -> ConvertResponse:
        if request.hex is not None:
            rgb = _validate_hex(request.hex)
        elif request.rgb is not None:
            rgb = _validate_rgb(request.rgb)
        else:
            _validate_unit("hsv.s", request.hsv.s)
            _validate_unit("hsv.v", request.hsv.v)
            rgb = hsv_to_rgb(request.hsv.h, request.hsv.s, request.hsv.v)

        hsv = rgb.hsv
        return ConvertResponse(
            rgb=RGBModel(r=rgb.r, g=rgb.g, b=rgb.b),
            hsv=HSVModel(h=hsv.h, s=hsv.s, v=hsv.v),
            hex=rgb_to_hex(rgb),
            achromatic=hsv.s == 0
        )

    return _run("convert", convert)


def handle_harmony(request: HarmonyRequest) -> HarmonyResponse:
    """
    Derive the ordered harmony set for a base color.

    Args:
        request: Base color (rgb or hex), scheme and optional brightness

    Returns:
        HarmonyResponse with the base first, then harmony colors in offset order

    Raises:
        HTTPException: For invalid colors, schemes or brightness
    """
    def derive() -> Dict[str, Any]:
        combination = _validate_combination(request.combination)
        base = _validate_hex(request.hex) if request.hex is not None else _validate_rgb(request.rgb)
        if request.brightness is not None:
            _validate_brightness(request.brightness)
        return generate_harmony(base, combination, request.brightness)

    return _run("harmony", derive)


def handle_select(request: SelectRequest) -> HarmonyResponse:
    """
    Resolve a polar wheel selection into a color and its harmony set.

    Args:
        request: Pointer angle and distance, brightness and scheme

    Returns:
        HarmonyResponse including the resolved selection

    Raises:
        HTTPException: For negative distance, invalid brightness or scheme
    """
    def select() -> Dict[str, Any]:
        combination = _validate_combination(request.combination)
        brightness = config.DEFAULT_BRIGHTNESS if request.brightness is None else request.brightness
        _validate_brightness(brightness)
        if not config.validate_distance(request.distance):
            raise HTTPException(
                status_code=400,
                detail=f"Invalid distance: {request.distance}. Must be >= 0"
            )
        return generate_selection(request.angle, request.distance, brightness, combination)

    return _run("select", select)


def _run(endpoint: str, operation: Callable[[], Any]) -> Any:
    """Execute an operation with request id, logging, metrics and error mapping."""
    request_id = generate_request_id()
    start_time = time.time()
    log = get_logger()
    metrics = get_metrics() if config.METRICS_ENABLED else None

    log.request(request_id, f"{endpoint} request started", endpoint=endpoint)

    try:
        result = operation()

        if isinstance(result, dict):
            result["debug"]["request_id"] = request_id
            result = HarmonyResponse(**result)

        total_time = time.time() - start_time
        if metrics is not None:
            metrics.increment_request_count(endpoint)
            metrics.record_timing(endpoint, total_time * 1000)
            if isinstance(result, HarmonyResponse):
                metrics.increment_combination_count(result.combination.name)

        log.request(request_id, f"{endpoint} request completed", endpoint=endpoint,
                    total_time_ms=round(total_time * 1000, 3))
        return result

    except HTTPException as e:
        log.warning(f"{endpoint} request {request_id} rejected", extra={
            "request_id": request_id,
            "status_code": e.status_code,
            "detail": e.detail
        })

        if metrics is not None:
            metrics.increment_failure_count("validation")

        raise

    except Exception as e:
        error_time = time.time() - start_time

        log.error(f"{endpoint} request {request_id} failed", extra={
            "request_id": request_id,
            "error": str(e),
            "error_time_ms": round(error_time * 1000, 3)
        })

        if metrics is not None:
            metrics.increment_failure_count(type(e).__name__)

        raise HTTPException(
            status_code=500,
            detail=f"Internal error during {endpoint} processing"
        )


def _validate_combination(name: Optional[str]) -> ColorCombination:
    """Validate and convert a harmony scheme name."""
    if name is None:
        name = config.DEFAULT_COMBINATION
    try:
        return ColorCombination(name.lower())
    except ValueError:
        valid = [c.value for c in ColorCombination]
        raise HTTPException(
            status_code=400,
            detail=f"Invalid combination: {name}. Valid options: {valid}"
        )


def _validate_hex(hex_color: str) -> RGB:
    """Validate and convert a #RRGGBB code."""
    try:
        return hex_to_rgb(hex_color)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid hex color: {hex_color}. Expected #RRGGBB"
        )


def _validate_unit(name: str, value: float):
    """Reject values outside [0, 1] when strict ranges are enabled."""
    if config.STRICT_RANGES and not config.validate_channel(value):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {name}: {value}. Must be within [0, 1]"
        )


def _validate_rgb(rgb: RGBModel) -> RGB:
    """Validate and convert an RGB payload."""
    _validate_unit("rgb.r", rgb.r)
    _validate_unit("rgb.g", rgb.g)
    _validate_unit("rgb.b", rgb.b)
    return RGB(r=rgb.r, g=rgb.g, b=rgb.b)


def _validate_brightness(brightness: float):
    """Validate brightness parameter."""
    if not config.validate_brightness(brightness):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid brightness: {brightness}. Must be within [0, 1]"
        )
