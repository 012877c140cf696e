"""
どこで: `util.constants`。
何を: 表示面・カメラ・フレームレートの既定値。
なぜ: 設定ファイルが無い/不完全な場合でも同じ既定で起動できるようにするため。
"""

# 表示面（ピクセル）
APP_WIDTH = 640
APP_HEIGHT = 480

# フレームクロック
DEFAULT_FPS = 30

# 透視投影（度 / クリップ面）
FIELD_OF_VIEW_DEG = 45.0
Z_NEAR = 0.1
Z_FAR = 100.0

# 色（RGBA 0–1）
DEFAULT_BACKGROUND = (0.0, 0.0, 0.0, 1.0)
DEFAULT_QUAD_COLOR = (1.0, 1.0, 1.0, 1.0)

WINDOW_CAPTION = "Quadspin"
