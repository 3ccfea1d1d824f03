"""
Routers module for the oracle program API

This module contains API route handlers.
"""

from oracle_program.routers import execute

__all__ = ["execute"]
