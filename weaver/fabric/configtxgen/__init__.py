from .builder import ConfigtxgenCommandBuilder

__all__ = ["ConfigtxgenCommandBuilder"]
