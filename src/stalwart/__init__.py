"""Stalwart: view models whose computed properties wire their own change notifications."""

from importlib.metadata import version as _version

__version__ = _version("stalwart")

from stalwart.errors import StalwartError, CycleDetectedError, CascadeDepthError
from stalwart._tracking import EvaluationStack
from stalwart.graph import DependencyGraph
from stalwart.viewmodel import ViewModel
from stalwart.properties import StoredProperty, ComputedProperty, stored, computed
from stalwart.entity import EntityViewModel
# textual NOT auto-imported — opt-in only

__all__ = [
    "ViewModel",
    "EntityViewModel",
    "stored",
    "computed",
    "StoredProperty",
    "ComputedProperty",
    "DependencyGraph",
    "EvaluationStack",
    "StalwartError",
    "CycleDetectedError",
    "CascadeDepthError",
]
