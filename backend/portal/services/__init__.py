"""Services Layer — store and provider operations invoked by API routes.

Invariants:
    - Each public function performs one store mutation or one provider call
    - Services raise PortalError subclasses; they never build HTTP responses
"""
