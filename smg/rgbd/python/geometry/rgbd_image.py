import logging
import numpy as np
import open3d as o3d

from typing import Optional

from smg.rgbd.python.geometry.geometry_2d import Geometry2D, GeometryType
from smg.rgbd.python.geometry.image import Image


logger = logging.getLogger(__name__)


class RGBDImage(Geometry2D):
    """
    A pair of registered colour and depth images, viewed from the same view and of the same resolution.

    .. note::
        The resolutions of the two images are not checked. If you have images of different resolutions,
        you should register them before putting them into an RGB-D image.
    """

    # CONSTRUCTOR

    def __init__(self, color: Optional[Image] = None, depth: Optional[Image] = None):
        """
        Construct an RGB-D image.

        .. note::
            The images are copied, so the RGB-D image exclusively owns its colour and depth images.

        :param color:   The optional colour image (if None, the colour image will be empty).
        :param depth:   The optional depth image (if None, the depth image will be empty).
        """
        super().__init__(GeometryType.RGBD_IMAGE)

        self.color: Image = color.clone() if color is not None else Image()
        self.depth: Image = depth.clone() if depth is not None else Image()

        if not self.are_aligned():
            logger.debug(f"Colour and depth images have different resolutions: {self.color} vs. {self.depth}")

    # SPECIAL METHODS

    def __str__(self) -> str:
        return self.to_string()

    # PUBLIC STATIC METHODS

    @staticmethod
    def from_legacy_rgbd_image(legacy_rgbd_image: o3d.geometry.RGBDImage) -> "RGBDImage":
        """
        Make an RGB-D image from a legacy Open3D RGB-D image.

        :param legacy_rgbd_image:   The legacy Open3D RGB-D image.
        :return:                    The RGB-D image.
        """
        return RGBDImage(
            Image.from_legacy_image(legacy_rgbd_image.color), Image.from_legacy_image(legacy_rgbd_image.depth)
        )

    # PUBLIC METHODS

    def are_aligned(self) -> bool:
        """
        Check whether the colour and depth images have the same resolution.

        :return:    True, if the colour and depth images have the same resolution, or False otherwise.
        """
        return self.color.get_rows() == self.depth.get_rows() and self.color.get_cols() == self.depth.get_cols()

    def clear(self) -> "RGBDImage":
        """
        Clear both the colour and depth images.

        :return:    The RGB-D image itself.
        """
        self.color.clear()
        self.depth.clear()
        return self

    def get_max_bound(self) -> np.ndarray:
        """
        Get the maximum 2D coordinates of the RGB-D image.

        .. note::
            The bound is that of the colour and depth images laid out side by side, so its x coordinate is the
            sum of the column counts of the two images. Only the colour image's row count is used.

        :return:    The maximum 2D coordinates, as a (color cols + depth cols, color rows) array.
        """
        return np.array(
            [self.color.get_cols() + self.depth.get_cols(), self.color.get_rows()], dtype=np.int64
        )

    def get_min_bound(self) -> np.ndarray:
        """
        Get the minimum 2D coordinates of the RGB-D image.

        :return:    The minimum 2D coordinates (always (0, 0)).
        """
        return np.zeros(2, dtype=np.int64)

    def is_empty(self) -> bool:
        """
        Check whether the RGB-D image is empty.

        :return:    True, if both the colour and depth images are empty, or False otherwise.
        """
        return self.color.is_empty() and self.depth.is_empty()

    def to_legacy_rgbd_image(self) -> o3d.geometry.RGBDImage:
        """
        Convert the RGB-D image to a legacy Open3D RGB-D image.

        :return:                The legacy Open3D RGB-D image.
        :raises RuntimeError:   If either image cannot be converted to a legacy image.
        """
        legacy_rgbd_image: o3d.geometry.RGBDImage = o3d.geometry.RGBDImage()
        legacy_rgbd_image.color = self.color.to_legacy_image()
        legacy_rgbd_image.depth = self.depth.to_legacy_image()
        return legacy_rgbd_image

    def to_string(self) -> str:
        """
        Make a text description of the RGB-D image.

        :return:    The text description.
        """
        return "RGBD Image pair [{}]\nColor [{}]\nDepth [{}]".format(
            "Aligned" if self.are_aligned() else "Not Aligned",
            RGBDImage.__describe(self.color), RGBDImage.__describe(self.depth)
        )

    # PRIVATE STATIC METHODS

    @staticmethod
    def __describe(image: Image) -> str:
        return f"size=({image.get_cols()},{image.get_rows()}), channels={image.get_channels()}, " \
               f"format={image.get_dtype()}"
