from .annotations import Annotations
from .clock import Clock, FixedClock, system_clock
from .config import Settings, configure_logging, default_clock
from .errors import ConfigurationError, InvalidAnnotationError, TodoTxtError
from .schema import TaskRecord
from .task import Task, sort_by_priority

__version__ = "0.1.0"

__all__ = [
    "Task",
    "sort_by_priority",
    "Annotations",
    "TaskRecord",
    "Clock",
    "FixedClock",
    "system_clock",
    "Settings",
    "configure_logging",
    "default_clock",
    "TodoTxtError",
    "InvalidAnnotationError",
    "ConfigurationError",
]
