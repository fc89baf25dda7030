"""Texture lookup for the Sun surface. Textures are optional image files under resources/textures/."""

import logging
from pathlib import Path

import numpy as np
from matplotlib import image as mpimg

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).parent.parent.parent.parent
TEXTURE_DIR = _ROOT / "resources" / "textures"
SUN_TEXTURE = "sun_diffuse.png"


def load_texture(name: str = SUN_TEXTURE, directory: Path | None = None) -> np.ndarray | None:
    """Read an equirectangular texture image by name.

    Args:
        name: File name inside the texture directory.
        directory: Override for resources/textures/.

    Returns:
        Image array (H×W or H×W×C), or None if the file does not exist.
    """
    path = (directory or TEXTURE_DIR) / name
    if not path.is_file():
        logger.info("Texture %s not found, using procedural shading", path)
        return None
    return mpimg.imread(path)


def texture_luminance(texture: np.ndarray) -> np.ndarray:
    """Collapse an image array to H×W luminance in [0, 1]."""
    arr = np.asarray(texture, dtype=float)
    if np.issubdtype(np.asarray(texture).dtype, np.integer):
        arr = arr / 255.0
    if arr.ndim == 2:
        return arr
    return 0.299 * arr[:, :, 0] + 0.587 * arr[:, :, 1] + 0.114 * arr[:, :, 2]
