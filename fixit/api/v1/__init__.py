"""api.v1 package.

Keep this file minimal to avoid circular imports.
Routers are imported directly where needed, e.g.:

    from fixit.api.v1 import repair_requests
    # or
    from fixit.api.v1.repair_requests import router
"""
