"""
Domain model package
"""

from .game import Game

__all__ = [
    "Game",
]
