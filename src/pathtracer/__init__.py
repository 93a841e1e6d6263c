"""Monte-Carlo path tracer: BVH-accelerated geometry, importance-sampled materials, threaded rendering."""

__version__ = "0.1.0"
