"""
Schema translation.

Modules:
- naming: compliant field identifiers
- types: property type -> target primitive type
- modes: reconciliation of required/read-only/computed/default flags
- validation: deferred checks for conflicting flags
- schema: recursive translation into target schema nodes
"""
