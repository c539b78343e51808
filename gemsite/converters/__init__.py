from .gemtext_converter import GemtextConverter

__all__ = ["GemtextConverter"]
