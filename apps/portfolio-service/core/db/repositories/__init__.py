"""
Per-domain repository modules for database access.

`collections` covers the ordered, id-keyed tables generically; the other
modules hold operations specific to one table.
"""
