from .days import build_days, day_id_from_bitmask, day_index_from_bitmask
from .directory import ReferenceDirectory
from .loader import DatasetError, LoadedData, load_dataset, parse_dataset

__all__ = [
    "build_days",
    "day_index_from_bitmask",
    "day_id_from_bitmask",
    "ReferenceDirectory",
    "DatasetError",
    "LoadedData",
    "load_dataset",
    "parse_dataset",
]
