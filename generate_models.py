# main.py
from __future__ import annotations
from typing import Any, Dict, Optional

from core.types import BuildConfig, BuildReport
from core.generate_geometry import generate_candy_cane, default_build_config, tessellation_size
from core.param_builder import build_params_from_row
from builders.build_modules.general_helpers import bounding_box

from base_params import CaneDefaults

defaults = CaneDefaults()

def generate_prototype(overrides: Optional[Dict[str, Any]] = None,
                       config: Optional[BuildConfig] = None) -> BuildReport:
    """Build the full two-colour cane from the defaults plus any overrides."""
    params = build_params_from_row(overrides or {}, defaults)
    config = config or default_build_config()

    print("Preparing build")
    print(f"  outer/inner radius: {params.outer_radius}/{params.inner_radius} mm, "
          f"stripe height: {params.color_height} mm")
    print(f"  shaft: {params.straight_part_length} mm, hook radius: {params.curve_radius} mm")
    print(f"  step_inc: {config.step_inc}, curved_facets: {config.curved_facets}, "
          f"resolution: {config.resolution}, cap placement: {config.cap_placement}")

    report = generate_candy_cane(params, config)

    if report.model3d is not None:
        bb = bounding_box(report.model3d.threeD_model)
        print(f"Bounding box: x {bb.xmin:.1f}..{bb.xmax:.1f}, "
              f"y {bb.ymin:.1f}..{bb.ymax:.1f}, z {bb.zmin:.1f}..{bb.zmax:.1f}")
        n_vertices, n_triangles = tessellation_size(report.model3d.threeD_model, config)
        print(f"Tessellation at {config.resolution} segments: {n_vertices} vertices, {n_triangles} triangles")

    return report

def main():
    generate_prototype()

if __name__ == "__main__":
    main()
