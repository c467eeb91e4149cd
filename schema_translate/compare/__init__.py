"""
Value comparison.

Modules:
- equality: structural equality of local and remote values for drift detection
"""
