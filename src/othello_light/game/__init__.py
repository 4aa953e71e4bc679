from othello_light.game.game import Game
from othello_light.game.othello import Othello, InvalidMoveError, BLACK, WHITE, EMPTY, DIRECTIONS

__all__ = ['Game', 'Othello', 'InvalidMoveError', 'BLACK', 'WHITE', 'EMPTY', 'DIRECTIONS']
