# core/param_builder.py
from __future__ import annotations
from typing import Dict, Any

from core.types import SpiralParams, CurveGeometry, CandyCaneParams

def _require_number(name: str, value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number (got {value!r})")

def _validate_radii(outer_radius: float, inner_radius: float) -> None:
    if outer_radius <= 0:
        raise ValueError(f"outer_radius must be > 0 (got {outer_radius})")
    if inner_radius < 0:
        raise ValueError(f"inner_radius must be >= 0 (got {inner_radius})")
    if inner_radius >= outer_radius:
        raise ValueError(
            f"inner_radius must be smaller than outer_radius (got {inner_radius} >= {outer_radius})"
        )

def _validate_color_height(color_height: float) -> None:
    if color_height <= 0:
        raise ValueError(f"color_height must be > 0 (got {color_height})")

def _validate_curve_radius(curve_radius: float, outer_radius: float) -> None:
    # the whole tube diameter has to fit between the bend axis and the outside of the bend
    if curve_radius <= 2 * outer_radius:
        raise ValueError(
            f"curve_radius must be larger than 2 * outer_radius (got {curve_radius} <= {2 * outer_radius})"
        )

def build_spiral_params(phase, length, outer_radius, inner_radius, color_height) -> SpiralParams:
    """
    Coerce and validate the spiral inputs.
    Raises ValueError naming the first offending field.
    """
    params = SpiralParams(
        phase        = _require_number("phase", phase),
        length       = _require_number("length", length),
        outer_radius = _require_number("outer_radius", outer_radius),
        inner_radius = _require_number("inner_radius", inner_radius),
        color_height = _require_number("color_height", color_height),
    )
    _validate_radii(params.outer_radius, params.inner_radius)
    _validate_color_height(params.color_height)
    if params.length < 0:
        raise ValueError(f"length must be >= 0 (got {params.length})")
    return params

def build_curve_geometry(curve_radius, outer_radius, inner_radius, color_height,
                         rad_angle: float | None = None) -> CurveGeometry:
    geometry = CurveGeometry(
        curve_radius = _require_number("curve_radius", curve_radius),
        outer_radius = _require_number("outer_radius", outer_radius),
        inner_radius = _require_number("inner_radius", inner_radius),
        color_height = _require_number("color_height", color_height),
    )
    if rad_angle is not None:
        geometry.rad_angle = _require_number("rad_angle", rad_angle)
    _validate_radii(geometry.outer_radius, geometry.inner_radius)
    _validate_color_height(geometry.color_height)
    _validate_curve_radius(geometry.curve_radius, geometry.outer_radius)
    if geometry.rad_angle <= 0:
        raise ValueError(f"rad_angle must be > 0 (got {geometry.rad_angle})")
    return geometry

def build_cane_params(outer_radius, inner_radius, color_height,
                      straight_part_length, curve_radius) -> CandyCaneParams:
    params = CandyCaneParams(
        outer_radius         = _require_number("outer_radius", outer_radius),
        inner_radius         = _require_number("inner_radius", inner_radius),
        color_height         = _require_number("color_height", color_height),
        straight_part_length = _require_number("straight_part_length", straight_part_length),
        curve_radius         = _require_number("curve_radius", curve_radius),
    )
    _validate_radii(params.outer_radius, params.inner_radius)
    _validate_color_height(params.color_height)
    if params.straight_part_length <= 0:
        raise ValueError(f"straight_part_length must be > 0 (got {params.straight_part_length})")
    _validate_curve_radius(params.curve_radius, params.outer_radius)
    return params

def build_params_from_row(row: Dict[str, Any], defaults: CandyCaneParams) -> CandyCaneParams:
    """Fill a CandyCaneParams from a dict of overrides, falling back to defaults."""
    return build_cane_params(
        outer_radius         = row.get("outer_radius", defaults.outer_radius),
        inner_radius         = row.get("inner_radius", defaults.inner_radius),
        color_height         = row.get("color_height", defaults.color_height),
        straight_part_length = row.get("straight_part_length", defaults.straight_part_length),
        curve_radius         = row.get("curve_radius", defaults.curve_radius),
    )
