"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Every JSON router uses GuardedRoute as its route_class
    - Routes never contain business logic (delegate to services/ and seo/)
"""
