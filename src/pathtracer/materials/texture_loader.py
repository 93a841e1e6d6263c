# materials/texture_loader.py
import logging
import os
from PIL import UnidentifiedImageError
from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture, with error handling and automatic format conversion.

    Texture assets are resolved while the scene is built, so a failure here
    aborts the run before any rendering starts.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image format is unsupported
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        texture = ImageTexture.from_file(image_path)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    logger.info("Loaded texture %s (%dx%d)", image_path, texture.width, texture.height)
    return texture
