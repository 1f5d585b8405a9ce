from .storage import JournalStorage

__all__ = ["JournalStorage"]
