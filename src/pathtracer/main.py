# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional
import numpy as np
from PIL import Image
from pathtracer.config import DEFAULT_QUALITY, QUALITY_LEVELS, RenderSettings
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.tone_mapping import gamma_tone_mapping
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a demo scene with a Monte-Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random_scene")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default=DEFAULT_QUALITY,
                        help="preset for samples per pixel and bounce depth")
    parser.add_argument("--width", type=int, dest="image_width", help="image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, dest="aspect_ratio")
    parser.add_argument("--samples", type=int, dest="samples_per_pixel",
                        help="samples per pixel (overrides --quality)")
    parser.add_argument("--max-depth", type=int, dest="max_depth",
                        help="maximum bounces per path (overrides --quality)")
    parser.add_argument("--workers", type=int, help="render threads (default: CPU count)")
    parser.add_argument("--seed", type=int, help="seed for reproducible renders")
    parser.add_argument("--texture", dest="texture_path", help="image file for textured scenes")
    parser.add_argument("--output", "-o", help="output image path (format from extension)")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)

def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    settings = RenderSettings.for_quality(args.quality)
    return settings.with_overrides(
        scene=args.scene,
        image_width=args.image_width,
        aspect_ratio=args.aspect_ratio,
        samples_per_pixel=args.samples_per_pixel,
        max_depth=args.max_depth,
        workers=args.workers,
        seed=args.seed,
        texture_path=args.texture_path,
        output=args.output,
    ).validate()

def render(settings: RenderSettings) -> np.ndarray:
    """
    Build the scene, render it and return the 8-bit RGB image.
    """
    scene = build_scene(settings.scene, settings.texture_path)
    # The BVH axis choice gets its own stream so it does not shift the render samples.
    build_rng = random.Random(settings.seed) if settings.seed is not None else random.Random()
    world = scene.build_world(build_rng)
    camera = scene.make_camera(settings.aspect_ratio)

    renderer = Renderer(settings.image_width, settings.image_height,
                        samples_per_pixel=settings.samples_per_pixel,
                        max_depth=settings.max_depth,
                        workers=settings.workers,
                        seed=settings.seed)
    linear = renderer.render(camera, world, scene.lights, scene.background)
    return gamma_tone_mapping(linear)

def show_preview(frame: np.ndarray, title: str):
    """Display the finished image until the window is closed or Escape is pressed."""
    import pygame

    pygame.init()
    try:
        height, width = frame.shape[:2]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(frame.transpose(1, 0, 2))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        settings = settings_from_args(args)
        logger.info("Render resolution: %dx%d", settings.image_width, settings.image_height)
        logger.info("Samples per pixel: %d, max bounces: %d",
                    settings.samples_per_pixel, settings.max_depth)
        frame = render(settings)
        Image.fromarray(frame).save(settings.output)
        logger.info("Wrote %s", settings.output)
    except (ValueError, OSError) as e:
        logger.error("%s", e)
        return 1

    if args.preview:
        show_preview(frame, f"pathtracer - {settings.scene}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
