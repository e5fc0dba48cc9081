"""
碰撞檢測系統

所有座標皆以實體中心為準。
"""


class CollisionDetector:
    """碰撞檢測器"""

    @staticmethod
    def rects_intersect(a, b) -> bool:
        """
        檢測兩個軸對齊矩形是否重疊

        Args:
            a: 具有 x, y, width, height 的實體
            b: 具有 x, y, width, height 的實體

        Returns:
            兩軸皆重疊時為 True (邊緣相切不算)
        """
        return (abs(a.x - b.x) < (a.width + b.width) / 2 and
                abs(a.y - b.y) < (a.height + b.height) / 2)

    @staticmethod
    def circle_rect_intersect(circle, rect) -> bool:
        """
        檢測圓形與矩形是否重疊

        Args:
            circle: 具有 x, y, radius 的實體
            rect: 具有 x, y, width, height 的實體

        Returns:
            是否重疊 (相切算重疊)
        """
        dx = abs(circle.x - rect.x)
        dy = abs(circle.y - rect.y)
        half_w = rect.width / 2
        half_h = rect.height / 2

        if dx > half_w + circle.radius:
            return False
        if dy > half_h + circle.radius:
            return False
        if dx <= half_w or dy <= half_h:
            return True

        # 角落：圓心到矩形頂點的距離
        corner_distance_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
        return corner_distance_sq <= circle.radius ** 2
