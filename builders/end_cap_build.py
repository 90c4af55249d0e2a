# builders/end_cap_build.py

import cadquery as cq

from core.types import BuildConfig
from core.param_builder import build_spiral_params
from builders.spiral_build import build_spiral
from builders.build_modules.general_helpers import as_workplane

# pattern reaches this fraction of the radius past the sphere, so the sphere alone bounds the cap
PATTERN_OVERSHOOT = 0.1

def create_support_cone(inner_radius: float) -> cq.Workplane:
    """
    Cone centred on the origin, apex down at -inner_radius/2 and base
    (radius inner_radius) at +inner_radius/2. Cut from the cap it turns
    the end of the bore into a 45 deg roof.
    """
    cone = cq.Solid.makeCone(
        0.0, inner_radius, inner_radius,
        pnt=cq.Vector(0, 0, -inner_radius / 2),
        dir=cq.Vector(0, 0, 1),
    )
    return as_workplane(cone)

def build_end_cap(phase, outer_radius, inner_radius, color_height,
                  config: BuildConfig = BuildConfig()) -> cq.Workplane:
    """
    Hemispherical cap below z = 0 whose stripes continue those of a shaft
    of the same phase standing on it.
    """
    params = build_spiral_params(phase, outer_radius, outer_radius, inner_radius, color_height)
    reach = params.outer_radius * (1 + PATTERN_OVERSHOOT)

    # mirrored in X then Z (180 deg about Y): grows downward and sends angle a to 180 - a,
    # so the pattern is built at -phase to land on the shaft's stripes
    pattern = (
        build_spiral(-params.phase, reach, reach, 0, params.color_height, config)
        .mirror("YZ")
        .mirror("XY")
    )

    # sphere seam midway between the stripe edges at z = 0
    sphere = (
        cq.Workplane("XY")
        .sphere(params.outer_radius)
        .rotate((0, 0, 0), (0, 0, 1), params.phase + 90)
    )
    cap = sphere.intersect(pattern)

    if params.inner_radius > 0:
        cap = cap.cut(create_support_cone(params.inner_radius))

    return cap
