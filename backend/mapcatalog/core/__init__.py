"""Core Layer: pure catalog import logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Collaborators (document tree, map-source registry) reached only via catalog_protocols
    - The only mutation is id assignment on the caller's input tree

Design Decisions:
    - Functional core separated from imperative shell
"""
