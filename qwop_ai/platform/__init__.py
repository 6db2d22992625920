"""
Platform layer: capability interface and the desktop implementation
DesktopEnvironment is imported from qwop_ai.platform.desktop on demand, since
its input libraries need a running display.
"""
from qwop_ai.platform.base import GameEnvironment, ScreenPoint, Rect

__all__ = ['GameEnvironment', 'ScreenPoint', 'Rect']
