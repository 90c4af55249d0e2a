# builders.build_modules.general_helpers

from typing import Iterable, List

import cadquery as cq

# helper functions for workplanes
def as_workplane(shape) -> cq.Workplane:
    return cq.Workplane("XY").add(shape)

def is_empty(model: cq.Workplane) -> bool:
    return len(model.solids().vals()) == 0

def as_compound(model: cq.Workplane) -> cq.Compound:
    return cq.Compound.makeCompound(model.solids().vals())

def bounding_box(model: cq.Workplane) -> cq.BoundBox:
    return as_compound(model).BoundingBox()

def total_volume(model: cq.Workplane) -> float:
    return sum(solid.Volume() for solid in model.solids().vals())

def contains_point(model: cq.Workplane, point, tolerance: float = 1e-6) -> bool:
    return any(solid.isInside(cq.Vector(*point), tolerance) for solid in model.solids().vals())

def union_all(parts: Iterable[cq.Workplane]) -> cq.Workplane:
    """
    Merge positioned solids into one model.
    Empty workplanes are skipped; raises ValueError if nothing is left.
    """
    parts: List[cq.Workplane] = [p for p in parts if not is_empty(p)]
    if not parts:
        raise ValueError("union_all needs at least one non-empty part")
    final = parts[0]
    for part in parts[1:]:
        final = final + part
    return final
