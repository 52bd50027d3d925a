"""
Core domain models and text primitives.

This module contains self-contained, in-memory building blocks with no
dependency on I/O or external systems.
"""
