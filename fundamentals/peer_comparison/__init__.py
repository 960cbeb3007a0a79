from .sector_comparator import get_sector_comparison

__all__ = ['get_sector_comparison']
