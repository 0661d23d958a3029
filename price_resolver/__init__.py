"""Price Resolver Package — applicable-price lookup over prioritized, time-bounded price lists.

Invariants:
    - Package root contains no executable code beyond the version constant

Design Decisions:
    - Explicit imports only, no star exports
"""

__version__ = "1.0.0"
