"""
Domain layer for forward detection business logic.

This layer contains:
- Data models (type-safe structures)
- Pattern catalog (built-in definitions and their compiled, frozen form)
- Matching engine (match / split / replace modes)
- Parsing pipeline (normalization, body split, header and mailbox extraction)
"""
