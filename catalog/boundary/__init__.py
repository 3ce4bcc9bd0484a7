"""
Boundary layer for external system integrations.

Handles all interactions with external systems (the course database).
Provides adapters and clients for infrastructure dependencies.
"""
