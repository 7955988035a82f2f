from dataclasses import dataclass
import math


@dataclass(frozen=True, eq=False, repr=False)
class Vector2D:
    """
    不可變的 2D 向量，用於表示平面上的點或位移
    所有「修改」向量的操作都會回傳新的 Vector2D，原向量保持不變
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def add(self, other: 'Vector2D') -> 'Vector2D':
        """向量相加：(x1 + x2, y1 + y2)"""
        return Vector2D(self.x + other.x, self.y + other.y)

    def __add__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.add(other)

    def scale(self, x_factor: float, y_factor=None) -> 'Vector2D':
        """
        分別沿 x、y 方向縮放
        只給一個參數時為等比例縮放，等同 scale(factor, factor)
        """
        if y_factor is None:
            y_factor = x_factor
        return Vector2D(self.x * x_factor, self.y * y_factor)

    def rotate(self, angle_rad: float) -> 'Vector2D':
        """將向量繞原點旋轉指定角度（弧度）"""
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        new_x = self.x * cos_a - self.y * sin_a
        new_y = self.x * sin_a + self.y * cos_a
        return Vector2D(new_x, new_y)

    def rotate_scale_translate(self, angle_rad: float, scale_x: float, scale_y: float,
                               delta_x: float, delta_y: float) -> 'Vector2D':
        """
        依序進行 旋轉 -> 縮放 -> 平移
        :param angle_rad: 旋轉角度（弧度）
        :param scale_x: 水平縮放倍率
        :param scale_y: 垂直縮放倍率
        :param delta_x: 水平位移
        :param delta_y: 垂直位移
        """
        rotated = self.rotate(angle_rad)
        scaled = rotated.scale(scale_x, scale_y)
        return scaled.add(Vector2D(delta_x, delta_y))

    def dot(self, other: 'Vector2D') -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """向量長度 sqrt(x² + y²)，以 hypot 計算避免溢位與下溢"""
        return math.hypot(self.x, self.y)

    def __str__(self):
        return f"({self.x}, {self.y})"

    def __repr__(self):
        return f"Vector2D({self.x}, {self.y})"
