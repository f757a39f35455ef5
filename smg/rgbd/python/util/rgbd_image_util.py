import cv2
import logging
import numpy as np

from smg.rgbd.python.geometry.image import Image
from smg.rgbd.python.geometry.rgbd_image import RGBDImage


logger = logging.getLogger(__name__)


class RGBDImageUtil:
    """Utility functions related to RGB-D images."""

    # PUBLIC STATIC METHODS

    @staticmethod
    def load_rgbd_image(colour_file: str, depth_file: str, *, depth_scale_factor: float = 1000.0) -> RGBDImage:
        """
        Load an RGB-D image from a colour image file and a depth image file.

        .. note::
            The colour image is loaded in BGR order, as OpenCV does. A 16-bit depth image is assumed to store
            depths in units of 1 / depth_scale_factor metres, and is converted to a floating-point image in metres.

        :param colour_file:         The colour image file.
        :param depth_file:          The depth image file.
        :param depth_scale_factor:  The factor by which to divide any 16-bit depths to convert them to metres.
        :return:                    The RGB-D image.
        :raises RuntimeError:       If either file cannot be read.
        """
        colour_image: np.ndarray = cv2.imread(colour_file, cv2.IMREAD_COLOR)
        if colour_image is None:
            raise RuntimeError(f"Cannot read colour image from '{colour_file}'")

        depth_image: np.ndarray = cv2.imread(depth_file, cv2.IMREAD_UNCHANGED)
        if depth_image is None:
            raise RuntimeError(f"Cannot read depth image from '{depth_file}'")

        if depth_image.dtype == np.uint16:
            depth_image = depth_image.astype(np.float32) / depth_scale_factor
        else:
            depth_image = depth_image.astype(np.float32)

        logger.debug(f"Loaded RGB-D image from '{colour_file}' and '{depth_file}'")
        return RGBDImage(Image(colour_image), Image(depth_image))

    @staticmethod
    def make_side_by_side_image(rgbd_image: RGBDImage) -> np.ndarray:
        """
        Render an RGB-D image as a single image, with the colour image on the left and the depth image on the right.

        .. note::
            The size of the rendered image is that given by the RGB-D image's maximum bound. In particular, its
            height is that of the colour image, so any depth rows beyond it are cropped.

        :param rgbd_image:  The RGB-D image.
        :return:            The rendered image, as an 8-bit BGR image.
        """
        width, height = (int(x) for x in rgbd_image.get_max_bound())
        canvas: np.ndarray = np.zeros((height, width, 3), dtype=np.uint8)

        colour_cols: int = rgbd_image.color.get_cols()
        if not rgbd_image.color.is_empty():
            canvas[:, :colour_cols] = RGBDImageUtil.__to_bgr8(rgbd_image.color.as_array())

        if not rgbd_image.depth.is_empty():
            depth_vis: np.ndarray = RGBDImageUtil.__to_bgr8(rgbd_image.depth.as_array()[:, :, :1])
            rows: int = min(height, depth_vis.shape[0])
            canvas[:rows, colour_cols:] = depth_vis[:rows]

        return canvas

    # PRIVATE STATIC METHODS

    @staticmethod
    def __to_bgr8(data: np.ndarray) -> np.ndarray:
        """
        Convert the specified non-empty image data to an 8-bit, 3-channel image for display.

        :param data:    The image data, as a (rows, cols, channels) array.
        :return:        The 8-bit, 3-channel image.
        """
        if data.dtype != np.uint8:
            # Normalise the values into [0,255], treating the largest finite value as the maximum.
            values: np.ndarray = np.nan_to_num(data.astype(np.float32), nan=0.0, posinf=0.0, neginf=0.0)
            max_value: float = float(values.max())
            if max_value > 0.0:
                values = values * (255.0 / max_value)
            data = np.clip(values, 0.0, 255.0).astype(np.uint8)

        channels: int = data.shape[2]
        if channels == 1:
            return np.repeat(data, 3, axis=2)
        elif channels == 2:
            return np.concatenate([data, data[:, :, :1]], axis=2)
        else:
            return data[:, :, :3]
