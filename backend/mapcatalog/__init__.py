"""Map Catalog Package: catalog import engine and its HTTP shell.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
