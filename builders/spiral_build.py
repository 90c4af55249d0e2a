# builders/spiral_build.py

import cadquery as cq

from core.types import BuildConfig, SpiralParams
from core.param_builder import build_spiral_params
from builders.build_modules.sweep_helpers import create_spiral_ribbon

def trim_spiral(ribbon: cq.Workplane, params: SpiralParams) -> cq.Workplane:
    """
    Drop the ribbon by one color_height (half turn of lead-in) and cut it
    flat to z in [0, length].
    """
    trim_box = (
        cq.Workplane("XY")
        .box(params.outer_radius * 2, params.outer_radius * 2, params.length,
             centered=(True, True, False))
    )
    return ribbon.translate((0, 0, -params.color_height)).intersect(trim_box)

def build_spiral(phase, length, outer_radius, inner_radius, color_height,
                 config: BuildConfig = BuildConfig()) -> cq.Workplane:
    """
    One colour's stripe of the cane: a (hollow) spiral tube occupying
    z in [0, length] on the Z axis.

    inner_radius = 0 gives a filled spiral. length = 0 gives an empty
    workplane, callers needing a solid must check length > 0 first.
    """
    params = build_spiral_params(phase, length, outer_radius, inner_radius, color_height)

    if params.length == 0:
        return cq.Workplane("XY")

    ribbon = create_spiral_ribbon(params, config.step_inc, config.axis_clearance)

    return trim_spiral(ribbon, params)
