from .board import Board, BoardSizeError, EMPTY, BLACK, WHITE, BOARD_SIZE, opponent

__all__ = ['Board', 'BoardSizeError', 'EMPTY', 'BLACK', 'WHITE', 'BOARD_SIZE', 'opponent']
