"""Services Layer — orchestration that combines core logic with IO adapters.

Invariants:
    - Services own transactions; core modules stay pure
"""
