"""
schema-translate: API resource schema translation and reconciliation.

Converts resolved, recursively nested API resource schema descriptions into
the node tree expected by a target configuration-schema type system.

Main features:
- Compliant field identifiers with explicit override passthrough
- Reconciliation of required/read-only/computed/default flags into one mode
- Deferred validation of conflicting flags
- Map vs. single element block representation for nested objects
- Structural equality of local and remote values for drift detection
- Provider documentation rendering from the same property model
"""
