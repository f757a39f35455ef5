import logging
import numpy as np
import open3d as o3d

from typing import Optional

from smg.rgbd.python.geometry.geometry_2d import Geometry2D, GeometryType


logger = logging.getLogger(__name__)


class Image(Geometry2D):
    """An image buffer, stored as a (rows, cols, channels) numpy array."""

    # CONSTANTS

    # The pixel formats and channel counts that can be represented by a legacy Open3D image.
    LEGACY_DTYPES = (np.dtype(np.uint8), np.dtype(np.uint16), np.dtype(np.float32))
    LEGACY_CHANNELS = (1, 3, 4)

    # CONSTRUCTOR

    def __init__(self, data: Optional[np.ndarray] = None):
        """
        Construct an image.

        .. note::
            If no data is specified, the image will be empty. A 2D array is treated as a single-channel image.
            The data is copied, so the image never aliases the caller's array.

        :param data:        The optional image data, as a (rows, cols) or (rows, cols, channels) array.
        :raises ValueError: If the data is not a 2D or 3D array.
        """
        super().__init__(GeometryType.IMAGE)

        self.__data: np.ndarray = Image.__make_empty_data()
        if data is not None:
            if data.ndim == 2:
                data = data[:, :, np.newaxis]
            elif data.ndim != 3:
                raise ValueError(f"Cannot make an image from an array with shape {data.shape}")

            self.__data = np.array(data, order="C", copy=True)

    # SPECIAL METHODS

    def __str__(self) -> str:
        return self.to_string()

    # PUBLIC STATIC METHODS

    @staticmethod
    def from_legacy_image(legacy_image: o3d.geometry.Image) -> "Image":
        """
        Make an image from a legacy Open3D image.

        :param legacy_image:    The legacy Open3D image.
        :return:                The image.
        """
        if legacy_image.is_empty():
            return Image()
        return Image(np.asarray(legacy_image))

    # PUBLIC METHODS

    def as_array(self) -> np.ndarray:
        """
        Get the image data.

        :return:    The (rows, cols, channels) array that stores the image data.
        """
        return self.__data

    def clear(self) -> "Image":
        """
        Clear the image.

        :return:    The image itself.
        """
        self.__data = Image.__make_empty_data()
        return self

    def clone(self) -> "Image":
        """
        Make a deep copy of the image.

        :return:    The copy.
        """
        return Image(self.__data)

    def get_channels(self) -> int:
        return self.__data.shape[2]

    def get_cols(self) -> int:
        return self.__data.shape[1]

    def get_dtype(self) -> np.dtype:
        return self.__data.dtype

    def get_max_bound(self) -> np.ndarray:
        """
        Get the maximum 2D coordinates of the image.

        :return:    The maximum 2D coordinates of the image, as a (cols, rows) array.
        """
        return np.array([self.get_cols(), self.get_rows()], dtype=np.int64)

    def get_min_bound(self) -> np.ndarray:
        """
        Get the minimum 2D coordinates of the image.

        :return:    The minimum 2D coordinates of the image (always (0, 0)).
        """
        return np.zeros(2, dtype=np.int64)

    def get_rows(self) -> int:
        return self.__data.shape[0]

    def is_empty(self) -> bool:
        """
        Check whether the image is empty.

        :return:    True, if the image contains no pixel data, or False otherwise.
        """
        return self.get_rows() * self.get_cols() * self.get_channels() == 0

    def to_legacy_image(self) -> o3d.geometry.Image:
        """
        Convert the image to a legacy Open3D image.

        :return:                The legacy Open3D image.
        :raises RuntimeError:   If the image's pixel format or channel count cannot be represented as a legacy image.
        """
        if self.is_empty():
            return o3d.geometry.Image()

        if self.get_dtype() not in Image.LEGACY_DTYPES:
            raise RuntimeError(f"Cannot convert an image with format {self.get_dtype()} to a legacy image")
        if self.get_channels() not in Image.LEGACY_CHANNELS:
            raise RuntimeError(f"Cannot convert an image with {self.get_channels()} channels to a legacy image")

        # Legacy single-channel images are 2D.
        data: np.ndarray = self.__data[:, :, 0] if self.get_channels() == 1 else self.__data
        logger.debug(f"Converting {self} to a legacy image")
        return o3d.geometry.Image(np.ascontiguousarray(data))

    def to_string(self) -> str:
        """
        Make a text description of the image.

        :return:    The text description.
        """
        return f"Image[size=({self.get_cols()},{self.get_rows()}), channels={self.get_channels()}, " \
               f"format={self.get_dtype()}]"

    # PRIVATE STATIC METHODS

    @staticmethod
    def __make_empty_data() -> np.ndarray:
        return np.zeros((0, 0, 1), dtype=np.float32)
