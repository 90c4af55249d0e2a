# core/generate_geometry.py

import cadquery as cq

from pytictoc import TicToc
t = TicToc()

from core.types import BuildConfig, CandyCaneParams, CaneHalf, Model3D, BuildReport
from core.param_builder import build_cane_params
from builders.cane_build import build_candy_cane_half
from builders.build_modules.sweep_helpers import calculate_step_count
from builders.build_modules.general_helpers import union_all

from io_modules.progress_bar import start_progress_bar, stop_progress_bar

# -----------------------------
# Configuration Parameters
# -----------------------------

from core.config import (
    optionsConfig,
    SweepSettings,
    BendSettings,
    RenderSettings,
    ColorSettings,
)

options = optionsConfig()
sweep = SweepSettings()
bend = BendSettings()
render = RenderSettings()
colors = ColorSettings()

# rough OCC cost of one lofted section or one bend slab (seconds)
SECONDS_PER_PRIMITIVE = 0.004

def default_build_config() -> BuildConfig:
    return BuildConfig.from_settings(sweep, bend, render, options)

def estimate_primitive_count(params: CandyCaneParams, config: BuildConfig) -> int:
    """
    Sections lofted plus slabs bent for one half cane:
    O(half_turns / step_inc) per spiral and O(facets) for the bend.
    """
    def sections(length):
        return calculate_step_count(length / params.color_height + 1, config.step_inc) + 1

    hook_length = bend.rad_angle * params.curve_radius
    return (
        sections(params.straight_part_length)
        + 2 * sections(params.outer_radius)        # bottom cap and hook cap
        + sections(hook_length)
        + config.curved_facets
    )

def generate_candy_cane(params: CandyCaneParams, config: BuildConfig | None = None) -> BuildReport:
    """
    Both colour halves of the cane, half turn (180 deg) apart so each
    stripe fills the gaps of the other, tagged with their colours.
    """
    config = config or default_build_config()
    params = build_cane_params(params.outer_radius, params.inner_radius, params.color_height,
                               params.straight_part_length, params.curve_radius)

    primitives = estimate_primitive_count(params, config) * len(colors.phases)
    ct_estimate = primitives * SECONDS_PER_PRIMITIVE

    print("Beginning Build")
    print(f"Primitives per build: {primitives}")
    print(f"Estimated build time: {ct_estimate:.2f} seconds")

    timings = {}
    halves = []
    if options.show_progress_flag:
        start_progress_bar(ct_estimate)
    try:
        for phase, color in zip(colors.phases, (colors.first_color, colors.second_color)):
            t.tic()
            model = build_candy_cane_half(
                phase,
                params.outer_radius,
                params.inner_radius,
                params.color_height,
                params.straight_part_length,
                params.curve_radius,
                config,
            )
            timings[f"half_{color}"] = t.tocvalue()
            halves.append(CaneHalf(phase=phase, color=color, model3d=Model3D(threeD_model=model)))
    finally:
        if options.show_progress_flag:
            stop_progress_bar()

    assembly = cq.Assembly(name="candy_cane")
    for half in halves:
        assembly.add(half.model3d.threeD_model, name=f"stripe_{half.color}", color=cq.Color(half.color))

    model3d = None
    if options.union_halves_flag:
        t.tic()
        model3d = Model3D(threeD_model=union_all(h.model3d.threeD_model for h in halves))
        timings["union"] = t.tocvalue()

    timings["total"] = sum(timings.values())
    print(f"Total build time: {timings['total']:.2f} seconds")

    return BuildReport(
        params=params,
        config=config,
        halves=halves,
        model3d=model3d,
        assembly=assembly,
        timings=timings,
    )

def tessellation_size(model: cq.Workplane, config: BuildConfig) -> tuple[int, int]:
    """(vertices, triangles) of the model at the configured resolution."""
    n_vertices, n_triangles = 0, 0
    for solid in model.solids().vals():
        vertices, triangles = solid.tessellate(render.linear_tolerance, config.angular_tolerance)
        n_vertices += len(vertices)
        n_triangles += len(triangles)
    return n_vertices, n_triangles
