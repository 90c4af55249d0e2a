# builders/build_modules/bend_helpers.py

import math
import cadquery as cq

from typing import Tuple

import builders.build_modules.general_helpers as helpers

# -----------------------------------------
# Cylindric bend
# -----------------------------------------
#
# The model lies in the box [0, dx] x [0, dy] x [0, dz] and is bent along +Y
# around an axis parallel to X through (y = 0, z = radius). The face z = 0
# keeps its length (neutral face); material towards the axis is compressed.
# The box is cut into `facets` slabs along Y and each slab is moved rigidly
# onto the arc.

def cylindric_bend(model: cq.Workplane,
                   dimensions: Tuple[float, float, float],
                   radius: float,
                   facets: int) -> cq.Workplane:
    dx, dy, dz = dimensions
    if radius < dz:
        raise ValueError(f"bend radius {radius} is smaller than the box depth {dz}")

    slab_width = calculate_slab_width(dy, facets)
    step_angle = calculate_step_angle(dy, radius, facets)
    overlap = calculate_slab_overlap(slab_width, step_angle)

    slabs = []
    for i in range(facets):

        # (1) CUT THE SLAB (reaching slightly into the next one)
        extra = overlap if i < facets - 1 else 0.0
        slab_box = (
            cq.Workplane("XY")
            .box(dx, slab_width + extra, dz, centered=False)
            .translate((0, i * slab_width, 0))
        )
        slab = model.intersect(slab_box)
        if helpers.is_empty(slab):
            continue

        # (2) MOVE THE SLAB ONTO THE ARC
        slabs.append(apply_slab_transform(slab, i, slab_width, step_angle, radius))

    return helpers.union_all(slabs)

def apply_slab_transform(model: cq.Workplane, index: int, slab_width: float,
                         step_angle: float, radius: float) -> cq.Workplane:
    """
    Rigid motion of slab `index`: its start face goes to the arc point at
    index * step_angle, turned to the local tangent.
    """
    angle = index * step_angle
    y_offset = calculate_minimum_y_offset(angle, radius)
    z_offset = calculate_minimum_z_offset(angle, radius)
    return (
        model
        .translate((0, -index * slab_width, 0))
        .rotate((0, 0, 0), (1, 0, 0), math.degrees(angle))
        .translate((0, y_offset, z_offset))
    )

def bend_point(point, dimensions, radius: float, facets: int):
    """Where the bend sends a single point of the box (same slab rule as cylindric_bend)."""
    x, y, z = point
    slab_width = calculate_slab_width(dimensions[1], facets)
    step_angle = calculate_step_angle(dimensions[1], radius, facets)
    index = calculate_slab_index(y, slab_width, facets)

    angle = index * step_angle
    local_y = y - index * slab_width
    return (
        x,
        local_y * math.cos(angle) - z * math.sin(angle) + calculate_minimum_y_offset(angle, radius),
        local_y * math.sin(angle) + z * math.cos(angle) + calculate_minimum_z_offset(angle, radius),
    )

# -----------------------------------------
# Helper functions for bending calculations
# -----------------------------------------

def calculate_slab_width(length, facets):
    return length / facets

# angle turned per slab (radians)
def calculate_step_angle(length, radius, facets):
    return length / (radius * facets)

# rigid slabs leave a sliver (about slab_width * step_angle**2 / 3) at the neutral face;
# each slab reaches into the next by a bit more than that
def calculate_slab_overlap(slab_width, step_angle):
    return slab_width * step_angle ** 2 / 2

def calculate_slab_index(y, slab_width, facets):
    return min(max(int(y // slab_width), 0), facets - 1)

# arc point offsets of a slab start, measured on the neutral face
def calculate_minimum_y_offset(angle_rad, radius):
    return radius * math.sin(angle_rad)

def calculate_minimum_z_offset(angle_rad, radius):
    return radius * (1 - math.cos(angle_rad))
