from dataclasses import dataclass

import numpy as np
from PIL import Image

from glyphmosaic.colour import Colour
from glyphmosaic.errors import EmptyRegion


@dataclass(frozen=True)
class Region:
    x: int
    y: int
    width: int
    height: int

    def clip(self, width: int, height: int) -> "Region":
        """Clip to [0, width) x [0, height). Size never goes below zero."""
        x0 = min(max(self.x, 0), width)
        y0 = min(max(self.y, 0), height)
        x1 = min(max(self.x + self.width, x0), width)
        y1 = min(max(self.y + self.height, y0), height)
        return Region(x0, y0, x1 - x0, y1 - y0)

    @property
    def area(self) -> int:
        return self.width * self.height


def as_array(image: Image.Image | np.ndarray) -> np.ndarray:
    """Return an (height, width, 3) uint8 view of an RGB image."""
    if isinstance(image, np.ndarray):
        return image
    if image.mode != "RGB":
        image = image.convert("RGB")
    return np.asarray(image, dtype=np.uint8)


def average_colour(image: Image.Image | np.ndarray, region: Region) -> Colour:
    """Per-channel mean of the pixels in ``region``, truncated towards zero.

    The region is clipped to the image first, so cells hanging off the right or
    bottom edge only sample the pixels that exist.
    """
    arr = as_array(image)
    height, width = arr.shape[:2]
    clipped = region.clip(width, height)
    if clipped.area == 0:
        raise EmptyRegion(f"Region {region} has no pixels inside a {width}x{height} image")

    cell = arr[clipped.y : clipped.y + clipped.height, clipped.x : clipped.x + clipped.width, :3]
    sums = cell.reshape(-1, 3).sum(axis=0, dtype=np.uint64)
    means = sums // np.uint64(clipped.area)
    return (int(means[0]), int(means[1]), int(means[2]))
