# core/types.py
import math
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any

from core.config import (
    SweepSettings,
    BendSettings,
    RenderSettings,
    optionsConfig,
)

Point3 = Tuple[float, float, float]

CAP_PLACEMENTS = ("derived", "empirical")

@dataclass(frozen=True)
class BuildConfig:
    """
    Resolution knobs threaded through every builder.
    Set once before a build and never mutated.
    """
    step_inc: float = SweepSettings.step_inc
    curved_facets: int = BendSettings.curved_facets
    resolution: int = RenderSettings.resolution
    axis_clearance: float = SweepSettings.axis_clearance
    cap_placement: str = optionsConfig.cap_placement

    def __post_init__(self):
        if self.step_inc <= 0:
            raise ValueError(f"step_inc must be > 0 (got {self.step_inc})")
        if int(self.curved_facets) != self.curved_facets or self.curved_facets < 1:
            raise ValueError(f"curved_facets must be a positive integer (got {self.curved_facets})")
        if self.resolution < 3:
            raise ValueError(f"resolution must be at least 3 segments (got {self.resolution})")
        if self.axis_clearance < 0:
            raise ValueError(f"axis_clearance must be >= 0 (got {self.axis_clearance})")
        if self.cap_placement not in CAP_PLACEMENTS:
            raise ValueError(f"cap_placement must be one of {CAP_PLACEMENTS} (got {self.cap_placement!r})")

    @property
    def angular_tolerance(self) -> float:
        # radians per segment for tessellating spheres/cones
        return 2 * math.pi / self.resolution

    @classmethod
    def from_settings(cls,
                      sweep: SweepSettings,
                      bend: BendSettings,
                      render: RenderSettings,
                      options: optionsConfig) -> "BuildConfig":
        return cls(
            step_inc=sweep.step_inc,
            curved_facets=bend.curved_facets,
            resolution=render.resolution,
            axis_clearance=sweep.axis_clearance,
            cap_placement=options.cap_placement,
        )

@dataclass
class SpiralParams:
    phase: float
    length: float
    outer_radius: float
    inner_radius: float
    color_height: float

    @property
    def thickness(self) -> float:
        return self.outer_radius - self.inner_radius

    @property
    def number_of_half_turns(self) -> float:
        # +1 half turn so the flat trim has colour at both ends
        return self.length / self.color_height + 1

    @property
    def stripe_rate(self) -> float:
        """Degrees of rotation per mm of height."""
        return 180.0 / self.color_height

@dataclass
class SweepStep:
    t: float
    angle: float    # degrees
    height: float   # mm, bottom of the cross-section

@dataclass
class CurveGeometry:
    curve_radius: float
    outer_radius: float
    inner_radius: float
    color_height: float
    rad_angle: float = BendSettings.rad_angle

    @property
    def length(self) -> float:
        return self.rad_angle * self.curve_radius

    @property
    def adjusted_radius(self) -> float:
        # radius of the tube centreline about the bend axis
        return self.curve_radius - self.outer_radius

    @property
    def rad_angle_degrees(self) -> float:
        return math.degrees(self.rad_angle)

@dataclass
class CandyCaneParams:
    outer_radius: float
    inner_radius: float
    color_height: float
    straight_part_length: float
    curve_radius: float

@dataclass
class CapPlacement:
    offset: Point3
    rotations: List[Tuple[Point3, float]]   # (axis, degrees), applied in order

@dataclass
class Model3D:
    threeD_model: Any

@dataclass
class CaneHalf:
    phase: float
    color: str
    model3d: Model3D

@dataclass
class BuildReport:
    params: CandyCaneParams
    config: BuildConfig
    halves: List[CaneHalf]
    model3d: Optional[Model3D] = None
    assembly: Any = None
    timings: Dict[str, float] = field(default_factory=dict)
