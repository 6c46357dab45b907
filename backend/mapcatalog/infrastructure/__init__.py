"""Infrastructure Layer: adapters for catalog markup, map sources, and logging.

Invariants:
    - Adapters implement core protocols; core never imports from here
"""
