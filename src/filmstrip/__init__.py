"""filmstrip：将页面加载过程的截图采样为等间距缩略图胶片条。"""

__version__ = "0.1.0"
