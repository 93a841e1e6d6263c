# renderer/raytracer.py
import logging
import math
import os
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional
import numpy as np
from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.world import HittableList
from pathtracer.renderer.integrator import ray_color

logger = logging.getLogger(__name__)

MAX_BOUNCES = 50

class Renderer:
    """
    CPU path tracer driver. Each image row is an independent task on a
    thread pool; a task owns its random generator and writes only its own
    row of the output buffer, so the scene is shared read-only and no
    locking is needed.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 16,
                 max_depth: int = MAX_BOUNCES, workers: Optional[int] = None,
                 seed: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers or os.cpu_count() or 1
        self.seed = seed

    def row_rng(self, row: int) -> random.Random:
        """
        Generator for one row task. With a seed, every row gets a fixed
        stream, so the image does not depend on the number of workers.
        """
        if self.seed is None:
            return random.Random()
        return random.Random(f"{self.seed}:{row}")

    def render_pixel(self, camera: Camera, world: Hittable, lights: Optional[HittableList],
                     background: Vector3, i: int, j: int, rng) -> Vector3:
        """
        Average radiance of pixel (i, j), with j counted from the bottom row.
        """
        total_r = total_g = total_b = 0.0
        for _ in range(self.samples_per_pixel):
            s = (i + rng.random()) / max(self.width - 1, 1)
            t = (j + rng.random()) / max(self.height - 1, 1)
            color = ray_color(camera.get_ray(s, t, rng), background, world,
                              lights, self.max_depth, rng)
            # Drop NaN components so one bad sample cannot poison the pixel.
            if not math.isnan(color.x):
                total_r += color.x
            if not math.isnan(color.y):
                total_g += color.y
            if not math.isnan(color.z):
                total_b += color.z
        n = self.samples_per_pixel
        return Vector3(total_r / n, total_g / n, total_b / n)

    def _render_row(self, camera: Camera, world: Hittable, lights: Optional[HittableList],
                    background: Vector3, j: int) -> List[Vector3]:
        rng = self.row_rng(j)
        row = [self.render_pixel(camera, world, lights, background, i, j, rng)
               for i in range(self.width)]
        logger.debug("Row %d done", j)
        return row

    def render(self, camera: Camera, world: Hittable, lights: Optional[HittableList] = None,
               background: Optional[Vector3] = None) -> np.ndarray:
        """
        Render the full image.

        Args:
            lights: emitters to sample directly; every member must support
                light sampling (spheres, boxes and instances of them).
            background: radiance of rays that escape the scene, black if None.

        Returns:
            (height, width, 3) float64 array of linear radiance, top row first.

        Raises:
            ValueError: if `lights` holds an object that cannot be sampled.
        """
        if background is None:
            background = Vector3(0.0, 0.0, 0.0)
        if lights is not None and len(lights) > 0 and not lights.is_samplable():
            unsupported = [type(obj).__name__ for obj in lights if not obj.is_samplable()]
            raise ValueError(f"Lights cannot be sampled directly: {', '.join(unsupported)}")

        logger.info("Rendering %dx%d, %d spp, max depth %d on %d workers",
                    self.width, self.height, self.samples_per_pixel,
                    self.max_depth, self.workers)
        start = time.perf_counter()
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)

        rows = range(self.height)
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            results = executor.map(
                lambda j: self._render_row(camera, world, lights, background, j), rows)
            for j, row in zip(rows, results):
                # Row j is counted from the bottom of the image.
                image[self.height - 1 - j] = [tuple(c) for c in row]

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image
