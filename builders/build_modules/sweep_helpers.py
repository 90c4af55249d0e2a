# builders/build_modules/sweep_helpers.py

import math
import numpy as np
import cadquery as cq

from typing import List

from core.types import SpiralParams, SweepStep, Point3
import builders.build_modules.general_helpers as helpers

# -----------------------------------------
# Sampling of the spiral path
# -----------------------------------------

def calculate_step_count(number_of_half_turns: float, step_inc: float) -> int:
    # number of hull segments; the last sample lands exactly on number_of_half_turns
    return max(1, int(math.ceil(number_of_half_turns / step_inc - 1e-9)))

def sample_sweep_steps(params: SpiralParams, step_inc: float) -> List[SweepStep]:
    """
    Discretise the spiral into cross-section positions.
    Step t maps to angle = phase + 180*t and height = color_height*t,
    so every half turn raises the stripe by one color_height.
    """
    n_half_turns = params.number_of_half_turns
    n_steps = calculate_step_count(n_half_turns, step_inc)

    steps = []
    for t in np.linspace(0.0, n_half_turns, n_steps + 1):
        height = params.color_height * float(t)
        steps.append(SweepStep(
            t=float(t),
            angle=params.phase + params.stripe_rate * height,
            height=height,
        ))
    return steps

def cross_section_points(step: SweepStep, inner_radius: float, outer_radius: float,
                         color_height: float) -> List[Point3]:
    """
    Radial rectangle (zero depth) spanning inner_radius..outer_radius,
    color_height tall, in the plane at step.angle.
    """
    a = math.radians(step.angle)
    c, s = math.cos(a), math.sin(a)
    z0 = step.height
    z1 = step.height + color_height
    return [
        (inner_radius * c, inner_radius * s, z0),
        (outer_radius * c, outer_radius * s, z0),
        (outer_radius * c, outer_radius * s, z1),
        (inner_radius * c, inner_radius * s, z1),
    ]

def create_cross_section_wire(points: List[Point3]) -> cq.Wire:
    return cq.Wire.makePolygon([cq.Vector(*pt) for pt in points], close=True)

# -----------------------------------------
# Hull segments
# -----------------------------------------

def create_spiral_ribbon(params: SpiralParams, step_inc: float, axis_clearance: float = 0.0) -> cq.Workplane:
    """
    Sweep the cross-section along the spiral as a chain of hull segments.

    Each adjacent pair of sections is joined by ruled faces. The top and
    bottom faces between skew radial edges are doubly ruled, so this is a
    ruled helicoid approximation of the hull chain, one solid for the whole list.
    """
    # a ruled face between two edges lying on the axis is degenerate
    inner_radius = max(params.inner_radius, axis_clearance)

    wires = []
    for step in sample_sweep_steps(params, step_inc):
        pts = cross_section_points(step, inner_radius, params.outer_radius, params.color_height)
        wires.append(create_cross_section_wire(pts))

    ribbon = cq.Solid.makeLoft(wires, True)

    return helpers.as_workplane(ribbon)
