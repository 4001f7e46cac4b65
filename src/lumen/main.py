# main.py
"""Render a demo scene to an image file.

Usage:
    lumen [options]
    python -m lumen [options]

Example:
    lumen --scene cornell_box --width 200 --height 200 --samples 64 --output cornell.png
"""
import argparse
import logging
import random
import sys
import time

from lumen.config import QUALITY_PRESETS, RenderSettings, load_settings
from lumen.core.errors import LumenError
from lumen.log import init_logger
from lumen.renderer.output import write_image
from lumen.renderer.raytracer import Renderer
from lumen.renderer.tone_mapping import to_rgb8
from lumen.scenes import SCENES, build_scene

logger = logging.getLogger("lumen.main")


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Offline Monte Carlo path tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--scene", choices=sorted(SCENES), help="Scene to render")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, help="Maximum bounces per path")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--workers", type=int, help="Worker processes")
    parser.add_argument("--quality", choices=list(QUALITY_PRESETS),
                        help="Size/sample preset, applied before other options")
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument("--output", help="Output path (.ppm or any Pillow format)")
    parser.add_argument("--no-bvh", action="store_true", help="Use a linear scan instead of a BVH")
    parser.add_argument("--no-clamp", action="store_true",
                        help="Do not clamp channels before quantizing (PPM only)")
    parser.add_argument("--list-scenes", action="store_true", help="List scenes and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    settings = load_settings(args.config) if args.config else RenderSettings()
    if args.quality:
        settings = settings.with_quality(args.quality)
    settings = settings.with_overrides(
        scene=args.scene,
        width=args.width,
        height=args.height,
        samples=args.samples,
        max_depth=args.max_depth,
        seed=args.seed,
        workers=args.workers,
        output=args.output,
        use_bvh=False if args.no_bvh else None,
        clamp=False if args.no_clamp else None,
    )
    return settings.validate()


def render(settings: RenderSettings):
    """Build, render and save the configured scene. Returns the 8-bit image."""
    rng = random.Random(settings.seed)
    scene = build_scene(settings.scene, settings.aspect, rng)
    world = scene.world(settings.use_bvh, rng)
    renderer = Renderer(
        settings.width,
        settings.height,
        samples=settings.samples,
        max_depth=settings.max_depth,
        background=scene.background,
        seed=settings.seed,
        workers=settings.workers,
        progress_interval=max(1, settings.height // 10),
    )
    linear = renderer.render(world, scene.camera)
    pixels = to_rgb8(linear, settings.gamma, settings.clamp)
    write_image(pixels, settings.output)
    return pixels


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    init_logger(logging.DEBUG if args.verbose else logging.INFO)

    if args.list_scenes:
        for name in sorted(SCENES):
            print(name)
        return 0

    try:
        settings = settings_from_args(args)
        start = time.time()
        render(settings)
        logger.info("Total time: %.2fs", time.time() - start)
        return 0
    except (LumenError, OSError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
