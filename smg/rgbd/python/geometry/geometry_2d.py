import numpy as np

from abc import ABC, abstractmethod
from enum import Enum


class GeometryType(Enum):
    """The types of geometry that can be represented."""

    UNSPECIFIED = 0
    IMAGE = 1
    RGBD_IMAGE = 2


class Geometry2D(ABC):
    """A 2D geometry that can be cleared, checked for emptiness and bounded."""

    # CONSTRUCTOR

    def __init__(self, geometry_type: GeometryType = GeometryType.UNSPECIFIED):
        """
        Construct a 2D geometry.

        :param geometry_type:   The type of the geometry.
        """
        self.__geometry_type: GeometryType = geometry_type

    # PUBLIC ABSTRACT METHODS

    @abstractmethod
    def clear(self) -> "Geometry2D":
        """
        Clear any data stored in the geometry.

        :return:    The geometry itself, to allow calls to be chained.
        """
        pass

    @abstractmethod
    def get_max_bound(self) -> np.ndarray:
        """
        Get the maximum 2D coordinates of the geometry.

        :return:    The maximum 2D coordinates of the geometry, as an int64 array of shape (2,).
        """
        pass

    @abstractmethod
    def get_min_bound(self) -> np.ndarray:
        """
        Get the minimum 2D coordinates of the geometry.

        :return:    The minimum 2D coordinates of the geometry, as an int64 array of shape (2,).
        """
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """
        Check whether the geometry is empty.

        :return:    True, if the geometry is empty, or False otherwise.
        """
        pass

    # PUBLIC METHODS

    def dimension(self) -> int:
        """
        Get the dimension of the geometry.

        :return:    The dimension of the geometry (always 2).
        """
        return 2

    def get_geometry_type(self) -> GeometryType:
        """
        Get the type of the geometry.

        :return:    The type of the geometry.
        """
        return self.__geometry_type
