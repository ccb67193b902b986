"""SEO Layer — page metadata and schema.org JSON-LD builders.

Invariants:
    - Every builder is pure: same input, same output, no IO
    - All builders read organization facts from one SiteConfig
"""
