"""
Database client factory for Supabase.

Provides the service-role client used by repositories. The backend owns
its own credential store, so every query runs with the service role.
"""

from supabase import create_client, Client

from .config import Settings

# One client per (url, key) pair
_service_clients: dict[tuple[str, str], Client] = {}


def get_supabase_client(settings: Settings) -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Args:
        settings: Application settings holding the Supabase URL and key

    Returns:
        Supabase client configured with service role key
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )

    key = (settings.supabase_url, settings.supabase_service_role_key)
    if key not in _service_clients:
        _service_clients[key] = create_client(*key)

    return _service_clients[key]


def reset_client_cache() -> None:
    """
    Reset the cached database clients.

    Useful for testing or when configuration changes.
    """
    _service_clients.clear()
