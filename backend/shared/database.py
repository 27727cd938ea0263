"""
Database client factory for Supabase.

Provides both service-role clients (for backend operations bypassing RLS)
and anon-key clients (for per-request auth exchanges such as establishing a
session from magic-link tokens).

Clients are created on demand; caching and lifecycle belong to the
ServiceContainer built by the application factory.
"""

from typing import Optional

from supabase import create_client, Client

from .config import Settings, get_settings


def create_service_client(settings: Optional[Settings] = None) -> Client:
    """
    Create a Supabase client with the service role (bypasses RLS).

    Use this for backend operations that need full database access,
    such as upserting authentication freshness rows.

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If the Supabase URL or service role key is missing
    """
    settings = settings or get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )


def create_anon_client(settings: Optional[Settings] = None) -> Client:
    """
    Create a Supabase client with the anon key.

    A fresh client is returned on every call because session exchanges
    mutate the client's auth state and must not leak between requests.

    Raises:
        RuntimeError: If the Supabase URL or anon key is missing
    """
    settings = settings or get_settings()
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_ANON_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
    )
