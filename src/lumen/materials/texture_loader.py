# materials/texture_loader.py
import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from lumen.core.errors import TextureError
from lumen.materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture, converting it to RGB.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        TextureError: If the file is not a readable image
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.asarray(img, dtype=np.float64) / 255.0
    except (UnidentifiedImageError, OSError) as e:
        raise TextureError(f"Error loading texture {image_path}: {e}") from e

    logger.info("Loaded texture %s with size %dx%d", image_path, data.shape[1], data.shape[0])
    return ImageTexture(data)


def create_image_material(image_path: str, material_class, **material_params):
    """
    Wraps the image at image_path in an ImageTexture and passes it as the
    albedo of material_class; any keyword (fuzz for Metal) is forwarded.
    """
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
