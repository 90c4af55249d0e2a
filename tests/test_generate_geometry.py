import pytest

import core.generate_geometry as gg
import generate_models
from core.types import BuildConfig, BuildReport, CandyCaneParams
import builders.build_modules.general_helpers as helpers

CONFIG = BuildConfig(step_inc=0.1, curved_facets=16)
SMALL = CandyCaneParams(outer_radius=5, inner_radius=2.5, color_height=6,
                        straight_part_length=30, curve_radius=20)


@pytest.fixture(autouse=True)
def no_progress_bar(monkeypatch):
    monkeypatch.setattr(gg.options, "show_progress_flag", False)


@pytest.fixture(scope="module")
def report():
    gg.options.show_progress_flag = False
    try:
        return gg.generate_candy_cane(SMALL, CONFIG)
    finally:
        gg.options.show_progress_flag = True


def test_primitive_estimate():
    # shaft 61 sections, caps 2 * 20, hook 151, 16 slabs
    assert gg.estimate_primitive_count(SMALL, CONFIG) == 268


def test_primitive_estimate_grows_with_resolution():
    fine = BuildConfig(step_inc=0.05, curved_facets=16)
    assert gg.estimate_primitive_count(SMALL, fine) > gg.estimate_primitive_count(SMALL, CONFIG)


def test_default_build_config_follows_settings():
    config = gg.default_build_config()
    assert config.step_inc == gg.sweep.step_inc
    assert config.curved_facets == gg.bend.curved_facets
    assert config.resolution == gg.render.resolution
    assert config.cap_placement == gg.options.cap_placement


def test_report_has_two_coloured_halves(report):
    assert [h.color for h in report.halves] == ["red", "white"]
    assert [h.phase for h in report.halves] == [0.0, 180.0]
    for half in report.halves:
        assert not helpers.is_empty(half.model3d.threeD_model)


def test_report_assembly_and_union(report):
    names = {child.name for child in report.assembly.children}
    assert names == {"stripe_red", "stripe_white"}
    assert report.model3d is not None
    bb = helpers.bounding_box(report.model3d.threeD_model)
    assert bb.zmin == pytest.approx(-5, abs=0.5)
    assert bb.zmax == pytest.approx(50, abs=1.0)


def test_report_timings(report):
    assert set(report.timings) == {"half_red", "half_white", "union", "total"}
    assert report.timings["total"] >= report.timings["half_red"]


def test_each_point_has_one_colour(report, stripe, polar):
    red, white = (h.model3d.threeD_model for h in report.halves)
    checked = 0
    for theta in range(0, 360, 45):
        for z in (4, 16, 27):
            if stripe(theta, z, 0, 6) is None:
                continue
            point = polar(3.75, theta, z)
            assert helpers.contains_point(red, point) != helpers.contains_point(white, point), (theta, z)
            checked += 1
    assert checked >= 12


def test_invalid_params_rejected():
    bad = CandyCaneParams(outer_radius=5, inner_radius=6, color_height=6,
                          straight_part_length=30, curve_radius=20)
    with pytest.raises(ValueError, match="inner_radius"):
        gg.generate_candy_cane(bad, CONFIG)


def test_tessellation_size(report):
    n_vertices, n_triangles = gg.tessellation_size(report.halves[0].model3d.threeD_model, CONFIG)
    assert n_vertices > 0
    assert n_triangles > 0


def test_generate_prototype_applies_overrides(monkeypatch, capsys):
    captured = {}

    def fake_generate(params, config):
        captured["params"] = params
        captured["config"] = config
        return BuildReport(params=params, config=config, halves=[])

    monkeypatch.setattr(generate_models, "generate_candy_cane", fake_generate)
    report = generate_models.generate_prototype({"straight_part_length": 120}, CONFIG)

    assert report.model3d is None
    assert captured["config"] is CONFIG
    params = captured["params"]
    assert params.straight_part_length == 120
    assert params.outer_radius == 15
    assert params.curve_radius == 60
    assert "shaft: 120.0 mm" in capsys.readouterr().out
