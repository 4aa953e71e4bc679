from abc import ABC, abstractmethod


class Game(ABC):
    """
    Abstract Base Class for a two-player board game consumed by the search engine.
    """

    @abstractmethod
    def get_initial_state(self):
        """
        Returns the initial state of the game.
        """
        pass

    @abstractmethod
    def get_next_state(self, state, action, player):
        """
        Returns a new state with the action applied for player.
        The input state is never modified.
        """
        pass

    @abstractmethod
    def get_valid_moves(self, state, player):
        """
        Returns the legal actions for player, in a fixed deterministic order.
        """
        pass

    @abstractmethod
    def get_score(self, state):
        """
        Returns the disc count of each player.
        """
        pass

    @abstractmethod
    def is_game_over(self, state):
        """
        Returns True if neither player can move.
        """
        pass

    @abstractmethod
    def get_opponent(self, player):
        """
        Returns the opponent of the given player.
        """
        pass
