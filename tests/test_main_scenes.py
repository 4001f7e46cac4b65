"""Tests for the demo scenes and the command-line entry point."""

import random

import pytest
from PIL import Image

from lumen.core.errors import ConfigError
from lumen.geometry import BVHNode, HittableList
from lumen.main import main, parse_args, settings_from_args
from lumen.scenes import SCENES, build_scene


class TestScenes:
    """Tests for the scene builders."""

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_builds_with_and_without_bvh(self, name):
        """Every scene builds and yields a BVH or its flat list."""
        scene = build_scene(name, 1.5, random.Random(0))
        assert len(scene.objects) > 0
        assert scene.camera.aspect == 1.5
        assert isinstance(scene.world(True, random.Random(0)), BVHNode)
        assert isinstance(scene.world(False), HittableList)

    def test_unknown_scene(self):
        """Unknown names raise ConfigError listing the choices."""
        with pytest.raises(ConfigError, match="two_spheres"):
            build_scene("teapot", 1.0)

    def test_random_spheres_reproducible(self):
        """The same seed gives the same layout."""
        a = build_scene("random_spheres", 1.5, random.Random(4))
        b = build_scene("random_spheres", 1.5, random.Random(4))
        assert len(a.objects) == len(b.objects)
        boxes_a = [o.bounding_box(0.0, 1.0).minimum for o in a.objects]
        boxes_b = [o.bounding_box(0.0, 1.0).minimum for o in b.objects]
        assert boxes_a == boxes_b

    def test_random_spheres_has_motion(self):
        """The shutter is open so moving spheres blur."""
        scene = build_scene("random_spheres", 1.5, random.Random(0))
        assert (scene.time0, scene.time1) == (0.0, 1.0)
        assert (scene.camera.time0, scene.camera.time1) == (0.0, 1.0)


class TestCommandLine:
    """Tests for argument handling and the main entry point."""

    def test_list_scenes(self, capsys):
        """--list-scenes prints every scene name."""
        assert main(["--list-scenes"]) == 0
        out = capsys.readouterr().out.split()
        assert out == sorted(SCENES)

    def test_arguments_override_settings(self):
        """Explicit options beat the quality preset."""
        args = parse_args(["--quality", "preview", "--samples", "3", "--no-bvh", "--no-clamp"])
        settings = settings_from_args(args)
        assert settings.width == 200
        assert settings.samples == 3
        assert settings.use_bvh is False
        assert settings.clamp is False

    def test_config_file(self, tmp_path):
        """A settings file supplies defaults for the options."""
        config = tmp_path / "render.json"
        config.write_text('{"scene": "cornell_box", "width": 10, "height": 10}')
        settings = settings_from_args(parse_args(["--config", str(config), "--width", "12"]))
        assert settings.scene == "cornell_box"
        assert (settings.width, settings.height) == (12, 10)

    def test_tiny_render_writes_png(self, tmp_path):
        """A tiny render ends with an image on disk."""
        output = tmp_path / "tiny.png"
        code = main(["--scene", "two_spheres", "--width", "8", "--height", "4",
                     "--samples", "1", "--max-depth", "3", "--output", str(output)])
        assert code == 0
        with Image.open(output) as img:
            assert img.size == (8, 4)

    def test_unclamped_ppm(self, tmp_path):
        """--no-clamp works with PPM output."""
        output = tmp_path / "tiny.ppm"
        code = main(["--width", "4", "--height", "2", "--samples", "1", "--no-clamp",
                     "--output", str(output)])
        assert code == 0
        assert output.read_text().startswith("P3\n4 2\n255\n")

    def test_unclamped_png_fails(self, tmp_path):
        """--no-clamp with PNG output is reported as an error."""
        code = main(["--width", "4", "--height", "2", "--samples", "1", "--no-clamp",
                     "--output", str(tmp_path / "x.png")])
        assert code == 1

    def test_invalid_width(self, tmp_path):
        """Invalid settings return a non-zero exit code."""
        assert main(["--width", "0", "--output", str(tmp_path / "x.png")]) == 1

    def test_missing_config(self, tmp_path):
        """A missing settings file is reported, not raised."""
        assert main(["--config", str(tmp_path / "none.json")]) == 1

    def test_mistyped_config(self, tmp_path):
        """A settings file with a string width exits with 1 before rendering."""
        config = tmp_path / "render.json"
        config.write_text('{"width": "8", "height": 4, "samples": 1}')
        output = tmp_path / "x.ppm"
        assert main(["--config", str(config), "--output", str(output)]) == 1
        assert not output.exists()
