from .store import FILE_MODE, ResultStore, expand_path

__all__ = [
    "FILE_MODE",
    "ResultStore",
    "expand_path",
]
