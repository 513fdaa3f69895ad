"""Postprocess: metric histories and export."""

from pylandslide.postprocess.history import History

__all__ = ["History"]
