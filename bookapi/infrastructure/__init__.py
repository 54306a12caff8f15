"""
Infrastructure layer package.

Contains adapters implementing domain ports (database, in-memory).
"""
