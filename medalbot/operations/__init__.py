"""
Operations Layer

This package composes services into the workflows behind bot commands.

Architecture:
- Database layer: Pure data access (IdentityStore over SQLAlchemy)
- Services layer: OpenDota access, aggregation, classification, roles
- Operations layer: Business logic composition and workflows
- Command layer: Discord integration and user interface

Each operations module focuses on a specific domain:
- LinkOperations: Steam ID linking and medal refresh for the steamid command
"""
