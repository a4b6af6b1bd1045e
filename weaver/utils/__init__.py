from .parsers import map_parser

__all__ = ["map_parser"]
