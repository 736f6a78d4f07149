"""Utility functions for the Timeline application."""

from litestar.connection import ASGIConnection

# First path segments of every route the app serves
KNOWN_PREFIXES = ["/api", "/game-data", "/game", "/static"]


def get_base_path(request: ASGIConnection) -> str:
    """
    Extract the base path from the request (e.g., '/agenda' if app is served at /agenda).
    
    Uses the request's root_path if available (set by uvicorn --root-path option),
    otherwise extracts it from the URL path by finding the first known route prefix.
    """
    scope = getattr(request, "scope", None)
    if scope:
        root_path = scope.get("root_path", "")
        if root_path:
            return root_path
    
    path = request.url.path
    for prefix in KNOWN_PREFIXES:
        if prefix in path:
            return path[:path.index(prefix)]
    
    return ""
