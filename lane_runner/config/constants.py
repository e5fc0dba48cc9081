"""
常數定義
"""

# ────────────────── 畫布 ──────────────────
CANVAS_WIDTH = 360
CANVAS_HEIGHT = 640

# ────────────────── 車道 ──────────────────
BASE_LANE_COUNT = 3
ESCALATED_LANE_COUNT = 4
CAR_START_LANE = 1

# ────────────────── 實體尺寸 (像素) ──────────────────
CAR_WIDTH = 60
CAR_HEIGHT = 100
CAR_BOTTOM_OFFSET = 120     # 車輛中心距畫布底部
OBSTACLE_WIDTH = 80
OBSTACLE_HEIGHT = 80
COIN_DIAMETER = 40

# ────────────────── 速度與節奏 ──────────────────
BASE_SPEED = 3.0                    # 每幀像素
SPEED_INCREMENT = 0.5
SPEED_INTERVAL_MS = 5000
OBSTACLE_SPAWN_INTERVAL_MS = 1000
COIN_SPAWN_INTERVAL_MS = 700
REFERENCE_FRAME_MS = 1000.0 / 60.0  # 時間正規化時的基準幀長

# ────────────────── 難度升級 ──────────────────
OBSTACLES_PER_SPAWN = 1
ESCALATED_OBSTACLES_PER_SPAWN = 2
ESCALATION_SCORE = 60
COIN_VALUE = 1

# ────────────────── 渲染 ──────────────────
RENDER_FPS = 60
LANE_DIVIDER_WIDTH = 2
HUD_SCORE_Y = 40
GAME_OVER_OVERLAY_ALPHA = 150

FONT_FAMILY_PRIMARY = "arial"
FONT_SIZE_SMALL = 20
FONT_SIZE_MEDIUM = 28
FONT_SIZE_LARGE = 36

THEME_COLORS = {
    'background': (34, 34, 34),
    'lane_divider': (68, 68, 68),
    'car': (66, 135, 245),
    'coin': (249, 199, 79),
    'text_primary': (255, 255, 255),
    'text_secondary': (221, 221, 221),
    'text_warning': (255, 200, 0),
}

# 障礙物顏色 (僅供顯示)
OBSTACLE_PALETTE = [
    (239, 71, 111),
    (255, 140, 66),
    (155, 93, 229),
    (6, 214, 160),
]

# ────────────────── 特效 ──────────────────
CRASH_EFFECT_RADIUS_INIT = 10.0
CRASH_EFFECT_RADIUS_GROW = 4.0
CRASH_EFFECT_ALPHA_DECAY = 8.0
CRASH_EFFECT_COLOR = (255, 90, 90)
COIN_SPARKLE_COUNT = 6
COIN_SPARKLE_SPEED = 2.5
COIN_SPARKLE_LIFETIME = 20.0

# ────────────────── 持久化 ──────────────────
DEFAULT_HIGH_SCORE_PATH = "~/.lane_runner/highscore.json"
