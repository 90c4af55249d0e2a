# core.config.py

from dataclasses import dataclass, field
from typing import Tuple

@dataclass
class optionsConfig:
    show_progress_flag: bool = True     # If True, show the estimated-time progress bar during the build
    union_halves_flag: bool = True      # If True, fuse both colour halves into a single Model3D
    cap_placement: str = "derived"      # "derived" (exact, follows the last bend slab) or "empirical"

@dataclass
class SweepSettings:
    # increment of the half-turn parameter between two cross-sections
    # smaller = smoother helix, more sections to loft (0.01 ~ 100 sections per half turn)
    step_inc: float = 0.01
    # keeps the inner edge of a solid spiral off the axis (mm)
    axis_clearance: float = 0.01

@dataclass
class BendSettings:
    curved_facets: int = 50             # > 500 for visually smooth output
    rad_angle: float = 4.2              # radians swept by the hook (~240.6 deg)

@dataclass
class HookSettings:
    # Empirical end cap placement (facet discretisation gap, not derived)
    cap_angle_fudge: float = 2.0        # degrees added to angle_covered
    cap_spin: float = 182.0             # degrees about Z before the bend-axis rotation

@dataclass
class RenderSettings:
    resolution: int = 200               # segments per full circle for curved primitives
    linear_tolerance: float = 0.1       # mm

@dataclass
class ColorSettings:
    first_color: str = "red"
    second_color: str = "white"
    phases: Tuple[float, float] = field(default_factory=lambda: (0.0, 180.0))
