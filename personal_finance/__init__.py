"""
Personal Finance - Source Package

A small console assistant for a single person tracking their money:
income, expenditure, SIPs and fixed deposits.

DESIGN PRINCIPLES:
1. The balance never drops below the minimum through spending or investing
2. Every check happens before any state changes
3. Records are immutable once written to the ledger
4. Every user action is auditable
"""

__version__ = "1.0.0"
__author__ = "Personal Finance Team"
