"""Tests for render settings, the scene catalogue and the command line."""

import random

import pytest
from PIL import Image

from pathtracer.config import DEFAULT_QUALITY, QUALITY_LEVELS, RenderSettings
from pathtracer.geometry.hittable import Hittable
from pathtracer.main import main, parse_args, settings_from_args
from pathtracer.scenes import SCENES, Scene, build_scene


@pytest.fixture
def texture_file(tmp_path):
    path = tmp_path / "earth.png"
    Image.new("RGB", (8, 4), (20, 80, 200)).save(path)
    return str(path)


class TestRenderSettings:
    """Tests for the render configuration."""

    def test_defaults(self):
        settings = RenderSettings()
        assert settings.samples_per_pixel == QUALITY_LEVELS[DEFAULT_QUALITY]["samples"]
        assert settings.max_depth == QUALITY_LEVELS[DEFAULT_QUALITY]["bounces"]
        assert settings.image_height == 225

    def test_image_height_never_zero(self):
        assert RenderSettings(image_width=1, aspect_ratio=16 / 9).image_height == 1

    @pytest.mark.parametrize("quality", list(QUALITY_LEVELS))
    def test_for_quality(self, quality):
        settings = RenderSettings.for_quality(quality)
        assert settings.samples_per_pixel == QUALITY_LEVELS[quality]["samples"]
        assert settings.max_depth == QUALITY_LEVELS[quality]["bounces"]

    def test_unknown_quality(self):
        with pytest.raises(ValueError):
            RenderSettings.for_quality("ultra")

    def test_overrides_ignore_none(self):
        settings = RenderSettings().with_overrides(image_width=64, seed=None)
        assert settings.image_width == 64
        assert settings.seed is None

    @pytest.mark.parametrize("field", ["image_width", "aspect_ratio", "samples_per_pixel",
                                       "max_depth", "workers"])
    def test_validate_rejects_non_positive(self, field):
        with pytest.raises(ValueError):
            RenderSettings().with_overrides(**{field: 0}).validate()

    def test_validate_missing_texture(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RenderSettings(texture_path=str(tmp_path / "nope.png")).validate()


class TestScenes:
    """Tests for the demo scene catalogue."""

    @pytest.mark.parametrize("name", [n for n in SCENES if n != "earth"])
    def test_build_without_texture(self, name):
        scene = build_scene(name)
        assert isinstance(scene, Scene)
        assert len(scene.objects) > 0
        world = scene.build_world(random.Random(1))
        assert isinstance(world, Hittable)
        assert world.bounding_box(scene.time0, scene.time1) is not None
        camera = scene.make_camera(16 / 9)
        assert camera.get_ray(0.5, 0.5, random.Random(1)).direction.length() > 0

    def test_earth_needs_texture(self):
        with pytest.raises(ValueError):
            build_scene("earth")

    def test_earth_with_texture(self, texture_file):
        scene = build_scene("earth", texture_file)
        assert len(scene.objects) == 1

    def test_cube_scene_with_missing_texture(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_scene("cube_scene", str(tmp_path / "missing.png"))

    def test_unknown_scene(self):
        with pytest.raises(ValueError):
            build_scene("teapot")

    def test_random_scene_layout_is_fixed(self):
        first = build_scene("random_scene")
        second = build_scene("random_scene")
        assert len(first.objects) == len(second.objects)
        assert [o.radius for o in first.objects] == [o.radius for o in second.objects]

    def test_lights_are_scene_objects(self):
        for name in ("simple_light", "cornell_box"):
            scene = build_scene(name)
            assert len(scene.lights) == 1
            assert all(light in scene.objects.objects for light in scene.lights)


class TestCommandLine:
    """Tests for argument parsing and the main entry point."""

    def test_parse_args_overrides_quality(self):
        args = parse_args(["--scene", "two_spheres", "--quality", "interactive",
                           "--samples", "7", "--width", "32"])
        settings = settings_from_args(args)
        assert settings.scene == "two_spheres"
        assert settings.samples_per_pixel == 7
        assert settings.max_depth == QUALITY_LEVELS["interactive"]["bounces"]
        assert settings.image_width == 32

    def test_unknown_scene_is_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            parse_args(["--scene", "teapot"])

    def test_renders_to_file(self, tmp_path):
        output = tmp_path / "out.png"
        code = main(["--scene", "two_spheres", "--width", "8", "--aspect-ratio", "2",
                     "--samples", "1", "--max-depth", "2", "--workers", "2",
                     "--seed", "3", "-o", str(output)])
        assert code == 0
        with Image.open(output) as img:
            assert img.size == (8, 4)
            assert img.mode == "RGB"

    def test_invalid_settings_exit_code(self, tmp_path):
        code = main(["--scene", "two_spheres", "--samples", "0",
                     "-o", str(tmp_path / "out.png")])
        assert code == 1
        assert not (tmp_path / "out.png").exists()

    def test_missing_texture_exit_code(self, tmp_path):
        code = main(["--scene", "earth", "--width", "4", "--samples", "1",
                     "-o", str(tmp_path / "out.png")])
        assert code == 1
