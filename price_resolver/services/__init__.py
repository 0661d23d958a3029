"""Services Layer — orchestration between core rules and IO boundaries.

Invariants:
    - Services depend on core Protocols, never on concrete infrastructure
    - Business rules stay in core; services only sequence IO and pure calls
"""
