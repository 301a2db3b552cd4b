"""Classic operating-system algorithms: CPU scheduling, deadlock avoidance, memory allocation, page replacement, disk scheduling, readers-writers locking and small file tools."""

__version__ = "0.1.0"

__all__ = [
    "allocation",
    "banker",
    "commands",
    "disk",
    "paging",
    "readers_writers",
    "redirection",
    "scheduling",
]