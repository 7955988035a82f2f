from utils.utils_vector import Vector2D
import numpy as np
import math


# ==============================================================================
# Vector2D <-> numpy 陣列
# ==============================================================================

def vectors_to_array(vectors: list[Vector2D]) -> np.ndarray:
    """將 Vector2D 列表轉成 (N, 2) 的 numpy 陣列"""
    if not vectors:
        return np.empty((0, 2), dtype=float)
    return np.array([(v.x, v.y) for v in vectors], dtype=float)

def array_to_vectors(points: np.ndarray) -> list[Vector2D]:
    """將 (N, 2) 的陣列轉回 Vector2D 列表"""
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"expected an array of shape (N, 2), got {points.shape}")
    return [Vector2D(px, py) for px, py in points]

# ==============================================================================
# 批次變換：與 Vector2D 的方法使用相同公式，逐列套用
# ==============================================================================

def _as_points(points) -> np.ndarray:
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"expected an array of shape (N, 2), got {points.shape}")
    return points

def rotate_array(points: np.ndarray, angle_rad: float) -> np.ndarray:
    """將所有點繞原點旋轉，回傳新陣列"""
    points = _as_points(points)
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    rotated = np.empty_like(points)
    rotated[:, 0] = points[:, 0] * cos_a - points[:, 1] * sin_a
    rotated[:, 1] = points[:, 0] * sin_a + points[:, 1] * cos_a
    return rotated

def rotate_scale_translate_array(points: np.ndarray, angle_rad: float, scale_x: float, scale_y: float,
                                 delta_x: float, delta_y: float) -> np.ndarray:
    """對所有點依序做 旋轉 -> 縮放 -> 平移"""
    result = rotate_array(points, angle_rad)
    result *= np.array([scale_x, scale_y])
    result += np.array([delta_x, delta_y])
    return result

def rotation_path(vector: Vector2D, num_steps: int) -> np.ndarray:
    """
    計算向量在 [0, 2π) 之間等間隔旋轉的軌跡
    :return: (num_steps, 2) 陣列，第 i 列為 vector.rotate(2π * i / num_steps)
    """
    if num_steps < 1:
        raise ValueError(f"num_steps must be at least 1, got {num_steps}")
    angles = np.linspace(0.0, 2 * math.pi, num_steps, endpoint=False)
    cos_a = np.cos(angles)
    sin_a = np.sin(angles)
    path = np.empty((num_steps, 2), dtype=float)
    path[:, 0] = vector.x * cos_a - vector.y * sin_a
    path[:, 1] = vector.x * sin_a + vector.y * cos_a
    return path
