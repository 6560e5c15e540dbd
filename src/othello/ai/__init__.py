"""
Computer opponent for Othello.
"""

from .greedy import GreedyPlayer, capture_counts, play_greedy_game, select_move

__all__ = ['GreedyPlayer', 'capture_counts', 'play_greedy_game', 'select_move']
