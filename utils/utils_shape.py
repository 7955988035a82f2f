from utils.utils_vector import Vector2D


class Shape2D:
    """
    一個由本地頂點定義的 2D 多邊形，並記錄目前的變換（旋轉、縮放、平移）
    """
    def __init__(self, name: str, local_vertices: list[Vector2D]):
        """
        :param name: 形狀名稱
        :param local_vertices: 定義形狀的本地空間頂點列表（圍繞原點(0,0)）
        """
        self.name = name

        # 原始形狀定義，不會改變
        self.local_vertices = list(local_vertices)

        # --- 變換資訊 (世界空間) ---
        self.position = Vector2D(0, 0)
        self.angle_rad = 0.0
        self.scale_x = 1.0
        self.scale_y = 1.0

        # --- 衍生數據 ---
        self.world_vertices: list[Vector2D] = []
        self.bounds: tuple[Vector2D, Vector2D] = None

        self.update_transform(self.angle_rad, self.scale_x, self.scale_y, self.position)

    def update_transform(self, angle_rad: float, scale_x: float, scale_y: float, position: Vector2D):
        """更新旋轉、縮放與位置，並重新計算世界頂點與邊界"""
        self.angle_rad = angle_rad
        self.scale_x = scale_x
        self.scale_y = scale_y
        self.position = position

        self.world_vertices = [
            v.rotate_scale_translate(angle_rad, scale_x, scale_y, position.x, position.y)
            for v in self.local_vertices
        ]

        if not self.world_vertices:
            self.bounds = (position, position)
        else:
            min_x = min(v.x for v in self.world_vertices)
            min_y = min(v.y for v in self.world_vertices)
            max_x = max(v.x for v in self.world_vertices)
            max_y = max(v.y for v in self.world_vertices)
            self.bounds = (Vector2D(min_x, min_y), Vector2D(max_x, max_y))

    def centroid(self) -> Vector2D:
        """世界頂點的平均值"""
        if not self.world_vertices:
            return self.position
        total = Vector2D(0, 0)
        for v in self.world_vertices:
            total = total + v
        return total.scale(1.0 / len(self.world_vertices))

    def __repr__(self):
        return f"Shape2D(name={self.name}, min={self.bounds[0]}, max={self.bounds[1]})"
