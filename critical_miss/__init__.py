"""
Critical Miss - a single-player narrative RPG campaign engine.

A character advances through an authored campaign by resolving skill checks
and turn-based fights, accumulating experience, resources and story state.
"""

__version__ = "0.1.0"
