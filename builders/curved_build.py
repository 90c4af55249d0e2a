# builders/curved_build.py

import math
import cadquery as cq

from core.types import BuildConfig, CurveGeometry, CapPlacement
from core.param_builder import build_curve_geometry
from builders.spiral_build import build_spiral
from builders.end_cap_build import build_end_cap
from builders.build_modules.bend_helpers import (
    cylindric_bend,
    apply_slab_transform,
    bend_point,
    calculate_slab_width,
    calculate_step_angle,
    calculate_slab_index,
)

from core.config import HookSettings
hook = HookSettings()

# -----------------------------------------
# Frames
# -----------------------------------------
#
# spiral frame: tube on the Z axis, z in [0, length]
# box frame:    tube along +Y inside [0, 2r] x [0, length] x [0, 2r], ready for cylindric_bend
# bend frame:   bend axis parallel to X through (y = -curve_radius, z = r)
# seam frame:   start of the tube at the origin heading +Z, curving toward -Y

def _to_box_frame(model: cq.Workplane, r: float) -> cq.Workplane:
    return model.rotate((0, 0, 0), (1, 0, 0), -90).translate((r, 0, r))

def _to_bend_frame(model: cq.Workplane, r: float) -> cq.Workplane:
    return model.rotate((0, 0, 0), (1, 0, 0), 90).translate((-r, 0, r))

def _to_seam_frame(model: cq.Workplane, r: float) -> cq.Workplane:
    return model.translate((0, r, -r))

def _box_point_to_seam(point, r: float):
    x, y, z = point
    return (x - r, r - z, y)

def bend_dimensions(geometry: CurveGeometry):
    r = geometry.outer_radius
    return (r * 2, geometry.length, r * 2)

# -----------------------------------------
# End cap placement
# -----------------------------------------

def empirical_cap_placement(geometry: CurveGeometry) -> CapPlacement:
    """
    Recorded placement of the hook's end cap in the bend frame.

    The +cap_angle_fudge degrees close a residual gap left by the bend
    facets; it was found by eye for 50 facets, not derived.
    """
    angle_covered = 360 + 90 - geometry.rad_angle_degrees + hook.cap_angle_fudge
    a = math.radians(angle_covered)
    y_offset = geometry.adjusted_radius * math.sin(a) - geometry.curve_radius
    z_offset = geometry.adjusted_radius * math.cos(a) + geometry.outer_radius
    return CapPlacement(
        offset=(0.0, y_offset, z_offset),
        rotations=[((0, 0, 1), hook.cap_spin), ((1, 0, 0), 180 + angle_covered)],
    )

def end_phase(phase: float, geometry: CurveGeometry) -> float:
    """Stripe phase of the spiral at its far end."""
    return (phase + 180.0 * geometry.length / geometry.color_height) % 360.0

def _place_empirical_cap(phase, geometry: CurveGeometry, config: BuildConfig) -> cq.Workplane:
    cap = build_end_cap(phase, geometry.outer_radius, geometry.inner_radius, geometry.color_height, config)
    placement = empirical_cap_placement(geometry)
    for axis, degrees in placement.rotations:
        cap = cap.rotate((0, 0, 0), axis, degrees)
    return cap.translate(placement.offset)

def _place_derived_cap(phase, geometry: CurveGeometry, config: BuildConfig) -> cq.Workplane:
    """
    Cap continuing the spiral past its end, moved exactly like the last
    bend slab so the seam closes for any facet count.
    """
    r = geometry.outer_radius
    dims = bend_dimensions(geometry)
    slab_width = calculate_slab_width(dims[1], config.curved_facets)
    step_angle = calculate_step_angle(dims[1], geometry.curve_radius, config.curved_facets)
    index = calculate_slab_index(geometry.length, slab_width, config.curved_facets)

    # turned over, a cap carries the stripes of the opposite phase
    cap = (
        build_end_cap(-end_phase(phase, geometry), r, geometry.inner_radius, geometry.color_height, config)
        # flip so it extends beyond the end instead of below it
        .rotate((0, 0, 0), (0, 1, 0), 180)
        .translate((0, 0, geometry.length))
    )
    cap = _to_box_frame(cap, r)
    cap = apply_slab_transform(cap, index, slab_width, step_angle, geometry.curve_radius)
    return _to_bend_frame(cap, r)

def curved_part_end(geometry: CurveGeometry, config: BuildConfig = BuildConfig()):
    """Centre of the bent spiral's far end face, in the seam frame."""
    r = geometry.outer_radius
    box_end = bend_point((r, geometry.length, r), bend_dimensions(geometry),
                         geometry.curve_radius, config.curved_facets)
    return _box_point_to_seam(box_end, r)

# -----------------------------------------
# Curved part
# -----------------------------------------

def build_curved_part(phase, curve_radius, outer_radius, inner_radius, color_height,
                      config: BuildConfig = BuildConfig()) -> cq.Workplane:
    """
    Hook of the cane: a spiral of length rad_angle * curve_radius bent
    around curve_radius, closed by an end cap.

    Starts at the origin heading +Z (matching a shaft ending at z = 0)
    and curves toward -Y.
    """
    geometry = build_curve_geometry(curve_radius, outer_radius, inner_radius, color_height)
    r = geometry.outer_radius

    straight = build_spiral(phase, geometry.length, r, geometry.inner_radius,
                            geometry.color_height, config)
    bent = cylindric_bend(
        _to_box_frame(straight, r),
        bend_dimensions(geometry),
        geometry.curve_radius,
        config.curved_facets,
    )
    bent = _to_bend_frame(bent, r)

    if config.cap_placement == "empirical":
        cap = _place_empirical_cap(phase, geometry, config)
    else:
        cap = _place_derived_cap(phase, geometry, config)

    return _to_seam_frame(bent + cap, r)
