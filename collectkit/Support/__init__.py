from .Arr import Arr
from .Collection import Collection, collect
from .Config import ConfigRepository, config, env
from .Data import Deferred, TargetKind, data_forget, data_get, data_has, data_set, value
from .Exceptions import CollectionException, InvalidOperatorException, OutOfRangeException
from .Json import serialize
from .Normalizer import get_arrayable_items, normalize_key, to_ordered_mapping

__all__ = [
    "Arr",
    "Collection",
    "collect",
    "ConfigRepository",
    "config",
    "env",
    "Deferred",
    "TargetKind",
    "data_get",
    "data_set",
    "data_has",
    "data_forget",
    "value",
    "CollectionException",
    "InvalidOperatorException",
    "OutOfRangeException",
    "serialize",
    "get_arrayable_items",
    "normalize_key",
    "to_ordered_mapping",
]
