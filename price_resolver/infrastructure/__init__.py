"""Infrastructure Layer — IO adapters: database, repositories, logging.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - Never contains business rules (selection stays in core)
"""
