"""Pages — public route registry, Jinja2 rendering and presentational components.

Invariants:
    - Page definitions are declarative data; rendering never touches the database
"""
