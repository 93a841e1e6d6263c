"""Surface and volume materials with their textures."""
