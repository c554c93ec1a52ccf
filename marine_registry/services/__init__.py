"""Services Layer - the two stores, the imperative shell around core/.

Invariants:
    - Stores own all DB access; routes never build queries
    - Stores raise MarineRegistryError subclasses, never return error values
"""
