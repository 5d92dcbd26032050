"""
Services Package

Logic that is reused outside a single route handler:

- seeder.py: Reset the store to the demo catalog (startup and CLI)
- relations.py: Populate book -> author references
"""
