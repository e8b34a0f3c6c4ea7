"""Data model: areas and their measures."""

from pybethyw.models._base import BethYwBaseModel, dump_json
from pybethyw.models.area import Area
from pybethyw.models.measure import Measure

__all__ = [
    "Area",
    "BethYwBaseModel",
    "Measure",
    "dump_json",
]
