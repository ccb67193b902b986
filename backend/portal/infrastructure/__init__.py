"""Infrastructure Layer — database, session verification, provider clients, logging.

Invariants:
    - Every outbound call has a timeout and maps failures to core/errors.py types
    - No retries: a failed call surfaces as exactly one error
"""
