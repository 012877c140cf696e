from __future__ import annotations

from api import run
from common.logging import setup_default_logging


def main() -> None:
    """640x480 のウィンドウでクアッドを 30 fps でアニメーションさせる。"""
    setup_default_logging()
    run()


if __name__ == "__main__":
    main()
