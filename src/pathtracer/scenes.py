# scenes.py
import logging
import math
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional
from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.sphere import Sphere, MovingSphere
from pathtracer.geometry.cube import Cube
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.geometry.transform import Rotate, Translate
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.textures import NormalTexture, UVTexture
from pathtracer.materials.texture_loader import load_texture
from pathtracer.materials.presets import (ColorPresets, DielectricPresets, LightPresets,
                                          MetalPresets, TexturePresets)

logger = logging.getLogger(__name__)

@dataclass
class Scene:
    """
    A demo scene: the objects to render, the subset of emitters worth
    sampling directly, the background color and where the camera looks from.
    """
    objects: HittableList
    lights: HittableList = field(default_factory=HittableList)
    background: Vector3 = field(default_factory=lambda: ColorPresets.SKY)
    lookfrom: Vector3 = field(default_factory=lambda: Vector3(13, 2, 3))
    lookat: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    vup: Vector3 = field(default_factory=lambda: Vector3(0, 1, 0))
    vfov: float = 20.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    time0: float = 0.0
    time1: float = 0.0

    def make_camera(self, aspect_ratio: float) -> Camera:
        return Camera(self.lookfrom, self.lookat, self.vup, self.vfov, aspect_ratio,
                      aperture=self.aperture, focus_dist=self.focus_dist,
                      time0=self.time0, time1=self.time1)

    def build_world(self, rng) -> Hittable:
        """BVH over the scene objects for the camera's shutter interval."""
        world = self.objects.build_bvh(self.time0, self.time1, rng)
        if hasattr(world, "count_nodes"):
            logger.info("BVH built over %d objects: %d nodes, depth %d",
                        len(self.objects), world.count_nodes(), world.depth())
        return world

def random_scene(texture_path: Optional[str] = None) -> Scene:
    # Fixed layout seed; independent of the render seed.
    rng = random.Random(5)
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse, bouncing during the shutter interval
                albedo = Vector3.random(rng) * Vector3.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = Vector3.random(rng, 0.5, 1.0)
                world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0, 0.5))))
            else:
                # glass
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    return Scene(world, aperture=0.1, time0=0.0, time1=1.0)

def two_spheres(texture_path: Optional[str] = None) -> Scene:
    checker = TexturePresets.checkerboard()
    world = HittableList([
        Sphere(Vector3(0, -10, 0), 10, Lambertian(checker)),
        Sphere(Vector3(0, 10, 0), 10, Lambertian(checker)),
    ])
    return Scene(world)

def small_scene(texture_path: Optional[str] = None) -> Scene:
    glass = DielectricPresets.glass()
    world = HittableList([
        Sphere(Vector3(0.0, -100.5, -1.0), 100.0, ColorPresets.matte(ColorPresets.YELLOW)),
        Sphere(Vector3(0.0, 0.0, -1.0), 0.5, ColorPresets.matte(ColorPresets.BLUE)),
        # Hollow glass bubble: the negative radius flips the inner normals.
        Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, glass),
        Sphere(Vector3(-1.0, 0.0, -1.0), -0.4, glass),
        Sphere(Vector3(1.0, 0.0, -1.0), 0.5, MetalPresets.brushed_metal()),
    ])
    return Scene(world, lookfrom=Vector3(-2, 2, 1), lookat=Vector3(0, 0, -1),
                 focus_dist=(Vector3(-2, 2, 1) - Vector3(0, 0, -1)).length())

def earth(texture_path: Optional[str] = None) -> Scene:
    if texture_path is None:
        raise ValueError("The 'earth' scene needs an image texture (texture_path)")
    globe = Sphere(Vector3(0, 0, 0), 2.0, Lambertian(load_texture(texture_path)))
    return Scene(HittableList([globe]))

def simple_light(texture_path: Optional[str] = None) -> Scene:
    light = Sphere(Vector3(0, 2, 3), 1.0, LightPresets.daylight(4.0))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.YELLOW)),
        ConstantMedium(Sphere(Vector3(0, 2, 0), 2.0, ColorPresets.matte(ColorPresets.RED)),
                       0.91, ColorPresets.BLACK),
        light,
        Rotate(Cube(Vector3(0, 1, -1.7), Vector3(4, 2, -1.6), Lambertian(NormalTexture())),
               math.radians(5.0), Vector3(0, 0, 1)),
        Sphere(Vector3(2, 0.3, 1), 0.2, DielectricPresets.glass()),
    ])
    return Scene(world, lights=HittableList([light]), background=ColorPresets.BLACK,
                 lookfrom=Vector3(26, 3, 6), lookat=Vector3(0, 2, 0))

def cube_scene(texture_path: Optional[str] = None) -> Scene:
    texture = load_texture(texture_path) if texture_path is not None else UVTexture()
    cube = Rotate(Cube(Vector3(-1, -1, -1), Vector3(1, 1, 1), Lambertian(texture)),
                  math.radians(-45.0), Vector3(0, 0, 1))
    return Scene(HittableList([cube]))

def cornell_box(texture_path: Optional[str] = None) -> Scene:
    red = ColorPresets.matte(ColorPresets.RED)
    white = ColorPresets.matte(ColorPresets.WHITE)
    green = ColorPresets.matte(ColorPresets.GREEN)
    # Slightly below the ceiling so its downward face is visible and emits.
    light = Cube(Vector3(213, 553, 227), Vector3(343, 554, 332), LightPresets.daylight(15.0))

    world = HittableList([
        Cube(Vector3(555, 0, 0), Vector3(556, 555, 555), green),
        Cube(Vector3(-1, 0, 0), Vector3(0, 555, 555), red),
        Cube(Vector3(0, -1, 0), Vector3(555, 0, 555), white),
        Cube(Vector3(0, 555, 0), Vector3(555, 556, 555), white),
        Cube(Vector3(0, 0, 555), Vector3(555, 555, 556), white),
        light,
    ])

    tall_box = Cube(Vector3(0, 0, 0), Vector3(165, 330, 165), MetalPresets.aluminum())
    world.add(Translate(Rotate(tall_box, math.radians(15.0), Vector3(0, 1, 0)),
                        Vector3(265, 0, 295)))

    short_box = Cube(Vector3(0, 0, 0), Vector3(165, 165, 165), white)
    smoke = Translate(Rotate(short_box, math.radians(-18.0), Vector3(0, 1, 0)),
                      Vector3(130, 0, 65))
    world.add(ConstantMedium(smoke, 0.01, ColorPresets.WHITE))

    world.add(Sphere(Vector3(420, 60, 120), 60, DielectricPresets.glass()))

    return Scene(world, lights=HittableList([light]), background=ColorPresets.BLACK,
                 lookfrom=Vector3(278, 278, -800), lookat=Vector3(278, 278, 0), vfov=40.0)

SCENES: Dict[str, Callable[[Optional[str]], Scene]] = {
    "random_scene": random_scene,
    "two_spheres": two_spheres,
    "small_scene": small_scene,
    "earth": earth,
    "simple_light": simple_light,
    "cube_scene": cube_scene,
    "cornell_box": cornell_box,
}

def build_scene(name: str, texture_path: Optional[str] = None) -> Scene:
    """
    Construct a named demo scene. Asset failures (missing or unreadable
    textures) surface here, before any rendering starts.
    """
    if name not in SCENES:
        raise ValueError(f"Unknown scene '{name}', expected one of: {', '.join(SCENES)}")
    logger.info("=== Creating scene '%s' ===", name)
    scene = SCENES[name](texture_path)
    logger.info("Scene has %d objects and %d lights", len(scene.objects), len(scene.lights))
    return scene
