"""
models/ - Domain Models
========================
Immutable records exchanged between the repositories and the handlers.
"""
