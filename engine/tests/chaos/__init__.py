"""
Chaos/failure injection testing suite.

Tests asset service behavior under adverse ledger conditions:
- Tier 1: Data corruption (truncated or foreign values in the ledger)
- Tier 3: Store failures (reads, writes, deletes and scans failing)
"""
