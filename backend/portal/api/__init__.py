"""API Layer — FastAPI routes, request guard and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All JSON endpoints return the {success, ...} envelope

Design Decisions:
    - Thin routes delegate to services
"""
