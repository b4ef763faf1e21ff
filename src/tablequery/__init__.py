"""
tablequery - parameterized SQL helpers for simple table operations.

Builds and executes SELECT, INSERT, UPDATE and DELETE statements from plain
Python mappings on top of an injected SQLAlchemy connection or engine.
"""

__version__ = "0.1.0"
