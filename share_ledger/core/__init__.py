"""
Core domain models, arithmetic primitives, and contracts.

This module contains the foundational building blocks of the ledger that are
independent of how the ledger is driven.
"""
