"""
dropfour/ai/__init__.py - AI opponent for dropfour

This package provides the move-selection engine, the minimax search it
uses for the hard difficulty and the static position evaluator.
"""

from dropfour.ai.engine import AiEngine
from dropfour.ai.evaluator import score_position
from dropfour.ai.minimax import MinimaxPlayer

__all__ = ['AiEngine', 'MinimaxPlayer', 'score_position']
