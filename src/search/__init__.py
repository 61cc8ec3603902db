"""Flight search request validation.

The search layer trims and normalizes raw caller input, checks it against the business rules, and
keeps the last accepted request as a normalized `SearchState`.
"""
