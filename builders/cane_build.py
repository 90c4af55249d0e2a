# builders/cane_build.py

from typing import List

import cadquery as cq

from core.types import BuildConfig
from core.param_builder import build_cane_params
from builders.spiral_build import build_spiral
from builders.end_cap_build import build_end_cap
from builders.curved_build import build_curved_part
from builders.build_modules.general_helpers import union_all

def build_candy_cane_parts(phase, outer_radius, inner_radius, color_height,
                           straight_part_length, curve_radius,
                           config: BuildConfig = BuildConfig()) -> List[cq.Workplane]:
    """
    Positioned solids of one colour: bottom cap (z <= 0), straight shaft
    (0 <= z <= straight_part_length) and the hook starting at the shaft top.
    """
    params = build_cane_params(outer_radius, inner_radius, color_height,
                               straight_part_length, curve_radius)

    shaft = build_spiral(phase, params.straight_part_length, params.outer_radius,
                         params.inner_radius, params.color_height, config)

    bottom_cap = build_end_cap(phase, params.outer_radius, params.inner_radius,
                               params.color_height, config)

    # stripe phase where the shaft ends, so the hook carries on the same helix
    hook_phase = (phase + 180.0 * params.straight_part_length / params.color_height) % 360.0
    hook = (
        build_curved_part(hook_phase, params.curve_radius, params.outer_radius,
                          params.inner_radius, params.color_height, config)
        .translate((0, 0, params.straight_part_length))
    )

    return [bottom_cap, shaft, hook]

def build_candy_cane_half(phase, outer_radius, inner_radius, color_height,
                          straight_part_length, curve_radius,
                          config: BuildConfig = BuildConfig()) -> cq.Workplane:
    parts = build_candy_cane_parts(phase, outer_radius, inner_radius, color_height,
                                   straight_part_length, curve_radius, config)
    return union_all(parts)
