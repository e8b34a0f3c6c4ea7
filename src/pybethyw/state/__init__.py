"""State/store layer.

Holds the single in-memory registry every import is merged into.
"""

from pybethyw.state.store import AreaStore

__all__ = ["AreaStore"]
