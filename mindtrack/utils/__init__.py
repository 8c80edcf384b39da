from .logger import get_logger,DEBUG,INFO,WARNING,ERROR
from .lazy_singleton import LazySingleton
from .time_utils import to_db_time, from_db_time, to_local_naive, round_half_up

__all__ = [
    "get_logger",
    "LazySingleton",
    "to_db_time",
    "from_db_time",
    "to_local_naive",
    "round_half_up",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR"
]
