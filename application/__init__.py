"""
Application Layer for the exercise catalog service.

This package contains:
- ports/: Abstract interfaces for the upstream provider and catalog store
- use_cases/: Query routing and catalog import workflows
- exceptions.py: Errors shared by the application and infrastructure layers
"""
