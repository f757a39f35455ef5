import logging
import matplotlib.pyplot as plt
import numpy as np
import open3d as o3d

from argparse import ArgumentParser

from smg.rgbd import RGBDImage, RGBDImageUtil


def main():
    # Parse any command-line arguments.
    parser = ArgumentParser()
    parser.add_argument("--colour_file", "-c", type=str, required=True, help="the colour image file")
    parser.add_argument("--depth_file", "-d", type=str, required=True, help="the depth image file")
    parser.add_argument(
        "--depth_scale_factor", type=float, default=1000.0,
        help="the factor by which to divide 16-bit depths to convert them to metres"
    )
    parser.add_argument("--no_display", action="store_true", help="don't show the RGB-D image")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    args: dict = vars(parser.parse_args())

    logging.basicConfig(
        level=logging.DEBUG if args["verbose"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logger: logging.Logger = logging.getLogger("show_rgbd_image")

    rgbd_image: RGBDImage = RGBDImageUtil.load_rgbd_image(
        args["colour_file"], args["depth_file"], depth_scale_factor=args["depth_scale_factor"]
    )

    logger.info(f"\n{rgbd_image}")
    logger.info(f"Bounds: {rgbd_image.get_min_bound()} -> {rgbd_image.get_max_bound()}")

    # Check that the images survive a trip through the legacy Open3D format.
    legacy_rgbd_image: o3d.geometry.RGBDImage = rgbd_image.to_legacy_rgbd_image()
    logger.info(f"Legacy depth range: {np.asarray(legacy_rgbd_image.depth).min()} "
                f"-> {np.asarray(legacy_rgbd_image.depth).max()}")

    if not args["no_display"]:
        side_by_side_image: np.ndarray = RGBDImageUtil.make_side_by_side_image(rgbd_image)
        plt.imshow(side_by_side_image[:, :, [2, 1, 0]])
        plt.draw()
        plt.waitforbuttonpress()


if __name__ == "__main__":
    main()
