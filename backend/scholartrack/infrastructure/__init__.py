"""Infrastructure — IO adapters: database sessions, repositories, logging.

Invariants:
    - Everything that touches the network or the database lives here
    - Core modules never import from infrastructure
"""
