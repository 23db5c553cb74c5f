"""Supabase backend access helpers."""

from .rest import (
    SupabaseConfig,
    SupabaseRestClient,
    SupabaseRestError,
    get_service_supabase_config,
    get_supabase_config,
)

__all__ = [
    "SupabaseConfig",
    "SupabaseRestClient",
    "SupabaseRestError",
    "get_service_supabase_config",
    "get_supabase_config",
]
