"""Marine Registry - taxonomy and marine species record service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
