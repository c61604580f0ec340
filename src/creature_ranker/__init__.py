"""
Creature Ranker - fetch, classify and rank RPG creatures
"""

__version__ = "0.1.0"
