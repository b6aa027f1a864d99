"""
dropfour - Connect Four rules engine and AI opponent

This package provides the board, the win rules, a turn-based game session
and an AI engine with random, greedy and minimax strategies. Rendering and
input handling are left to whatever front end drives the session.
"""

# Version number
__version__ = '0.1.0'
