"""
HR Kernel

Business logic for a small HR system over a relational store:
- Onboarding with atomic employee + audit log writes
- Tiered performance bonuses
- Streaming per-department performance reports
- Append-only salary change history
"""

__version__ = "0.1.0"
