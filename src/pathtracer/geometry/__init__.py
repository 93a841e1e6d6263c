"""Ray-intersectable scene geometry: primitives, transforms, aggregates and the BVH."""
