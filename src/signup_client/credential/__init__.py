"""Bearer credential sources for the signup client.

The signup endpoint authenticates every request with an opaque bearer token.
Token acquisition is pluggable: a static value, an environment variable, or a
local token file written with owner-only permissions.
"""

from .provider import EnvTokenProvider, FileTokenProvider, StaticTokenProvider, TokenProvider, resolve_token_provider
from .store import StoredToken, TokenStore

__all__ = [
    "TokenProvider",
    "StaticTokenProvider",
    "EnvTokenProvider",
    "FileTokenProvider",
    "TokenStore",
    "StoredToken",
    "resolve_token_provider",
]
