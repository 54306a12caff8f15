"""
Application layer package.

Contains use cases that orchestrate domain ports.
Each use case performs exactly one repository call.
"""
