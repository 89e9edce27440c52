# chronos/chronos_io/__init__.py
# I/O layer: shared console, JSON helpers & durable persistence

from .generics import ensure_parent, read_json_safe, write_json_safe
from .persistence import JsonFileGateway

__all__ = ["ensure_parent", "read_json_safe", "write_json_safe", "JsonFileGateway"]
