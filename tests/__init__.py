"""
Test suite for share_ledger

Contains:
- tests/unit/          : Unit tests for individual modules
"""
