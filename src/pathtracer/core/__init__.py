"""Vector math, rays, bounding boxes and sampling distributions."""
