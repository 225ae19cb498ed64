from .id_allocator import IdAllocator
from .store import build_memory_store

__all__ = ["IdAllocator", "build_memory_store"]
