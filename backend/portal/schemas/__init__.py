"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Every request body and query model lives here
    - Required strings are stripped and rejected when blank
"""
