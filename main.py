import argparse
import logging
import math
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Polygon, Rectangle
import config
from utils.utils_vector import Vector2D
from utils.utils_shape import Shape2D
from utils.utils_transform import vectors_to_array, rotation_path


logger = logging.getLogger(__name__)


def draw_scene(shapes: list[Shape2D], path: np.ndarray = None, path_vector: Vector2D = None):
    """使用 Matplotlib 將形狀（本地與世界空間）及旋轉軌跡畫出來"""
    fig, ax = plt.subplots(figsize=config.FIGURE_SIZE)

    all_points = []

    for shape in shapes:
        local_coords = vectors_to_array(shape.local_vertices)
        world_coords = vectors_to_array(shape.world_vertices)
        all_points.extend([local_coords, world_coords])

        # 1.繪製本地形狀 (灰色虛線)
        if len(local_coords):
            ax.add_patch(Polygon(local_coords, closed=True, facecolor='none', edgecolor='gray',
                                 linestyle='--', linewidth=1.5, label=f'{shape.name} Local'))

        # 2.繪製變換後的形狀
        if len(world_coords):
            ax.add_patch(Polygon(world_coords, closed=True, facecolor='lightblue', edgecolor='blue',
                                 linewidth=2, label=f'{shape.name} World'))

        # 3.繪製邊界框 (紅色虛線)
        b_min, b_max = shape.bounds
        ax.add_patch(Rectangle((b_min.x, b_min.y), b_max.x - b_min.x, b_max.y - b_min.y,
                               facecolor='none', edgecolor='red', linestyle='--', linewidth=1.5,
                               label=f'{shape.name} Bounds'))

    # 4.旋轉軌跡
    if path is not None and len(path):
        all_points.append(path)
        ax.plot(path[:, 0], path[:, 1], color='green', linewidth=1, label='Rotation Path')
        if path_vector is not None:
            ax.plot([0, path_vector.x], [0, path_vector.y], color='green', marker='o', label=f'v = {path_vector}')

    # 根據所有點的範圍自動設定視窗邊界
    points = np.vstack(all_points) if all_points else np.empty((0, 2))
    if len(points):
        margin = config.PLOT_MARGIN
        ax.set_xlim(points[:, 0].min() - margin, points[:, 0].max() + margin)
        ax.set_ylim(points[:, 1].min() - margin, points[:, 1].max() + margin)

    ax.set_aspect('equal', adjustable='box')
    ax.grid(True)
    plt.legend()
    plt.show()


def run_demo(angle_rad: float, scale_x: float, scale_y: float, delta_x: float, delta_y: float,
             steps: int) -> dict:
    """計算示範用的向量結果，回傳供繪圖使用的資料"""
    a = Vector2D(*config.SAMPLE_A)
    b = Vector2D(*config.SAMPLE_B)

    logger.info("magnitude of a %s", a.magnitude())
    logger.info("a + b = %s", a.add(b))
    logger.info("a . b = %s", a.dot(b))
    logger.info("a scaled by 2 = %s", a.scale(2))
    logger.info("a rotated by 90 deg = %s", a.rotate(math.pi / 2))

    transformed = a.rotate_scale_translate(angle_rad, scale_x, scale_y, delta_x, delta_y)
    logger.info("a rotate-scale-translate = %s", transformed)

    shape = Shape2D(config.SHAPE_NAME, [Vector2D(x, y) for x, y in config.SHAPE_VERTICES])
    shape.update_transform(angle_rad, scale_x, scale_y, Vector2D(delta_x, delta_y))
    logger.info("%s | centroid: %s", shape, shape.centroid())

    path = rotation_path(a, steps)
    logger.debug("rotation path of a: %d points", len(path))

    return {"shapes": [shape], "path": path, "path_vector": a, "transformed": transformed}


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Vector2D rotate / scale / translate demo")
    parser.add_argument("--angle", type=float, default=config.ANGLE_DEG, help="rotation angle in degrees")
    parser.add_argument("--scale-x", type=float, default=config.SCALE_X)
    parser.add_argument("--scale-y", type=float, default=config.SCALE_Y)
    parser.add_argument("--dx", type=float, default=config.DELTA_X)
    parser.add_argument("--dy", type=float, default=config.DELTA_Y)
    parser.add_argument("--steps", type=int, default=config.PATH_STEPS, help="points on the rotation path")
    parser.add_argument("--no-plot", action="store_true", help="skip the matplotlib window")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.steps < 1:
        parser.error(f"--steps must be at least 1, got {args.steps}")
    return args


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=config.LOG_FORMAT)

    results = run_demo(math.radians(args.angle), args.scale_x, args.scale_y, args.dx, args.dy, args.steps)

    if not args.no_plot:
        draw_scene(results["shapes"], results["path"], results["path_vector"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
