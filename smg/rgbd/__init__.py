from .python.geometry.geometry_2d import Geometry2D, GeometryType
from .python.geometry.image import Image
from .python.geometry.rgbd_image import RGBDImage

from .python.util.rgbd_image_util import RGBDImageUtil
