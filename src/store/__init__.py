from .client import StoreConfigError, StoreError, SupabaseClient

__all__ = ["SupabaseClient", "StoreError", "StoreConfigError"]
