import numpy as np
from othello_light.config_othello import BOARD_CONFIG
from othello_light.game.game import Game


BOARD_SIZE = 8

EMPTY = 0
BLACK = 1
WHITE = -1

PLAYER_NAMES = {BLACK: 'black', WHITE: 'white'}

# Unit vectors used for line scanning (row delta, col delta)
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class InvalidMoveError(ValueError):
    """Raised when a move is applied to an occupied cell or captures nothing."""

    def __init__(self, move, player, reason):
        self.move = move
        self.player = player
        super().__init__(f"Invalid move {move} for {player_name(player)}: {reason}")


def player_name(player):
    if player not in PLAYER_NAMES:
        raise ValueError(f"Unknown player: {player!r} (expected {BLACK} or {WHITE})")
    return PLAYER_NAMES[player]


class Othello(Game):
    """
    Othello (Reversi) game implementation.

    Board: 8x8 int8 array, BLACK = 1, WHITE = -1, EMPTY = 0
    Actions: (row, col) tuples - a disc is placed and every sandwiched
             opponent run is flipped
    Black moves first from the standard four-disc center layout.

    All methods are pure: states passed in are never modified and every
    returned state is a fresh array owned by the caller.
    """

    def __init__(self):
        self.board_size = BOARD_SIZE
        self.symbols = BOARD_CONFIG['symbols']

    def __repr__(self):
        return f"Othello({self.board_size}x{self.board_size})"

    def get_initial_state(self):
        """
        Returns the opening position: White on (3,3) and (4,4), Black on (3,4) and (4,3).
        """
        state = np.zeros((self.board_size, self.board_size), dtype=np.int8)
        mid = self.board_size // 2
        state[mid - 1, mid - 1] = WHITE
        state[mid - 1, mid] = BLACK
        state[mid, mid - 1] = BLACK
        state[mid, mid] = WHITE
        return state

    def get_opponent(self, player):
        player_name(player)
        return -player

    def is_inside(self, row, col):
        return 0 <= row < self.board_size and 0 <= col < self.board_size

    def get_flips(self, state, player, row, col):
        """
        Discs captured if player places on (row, col).

        Total over all integer coordinates: an off-board or occupied target
        simply yields an empty set.

        Args:
            state: Board state (8, 8)
            player: BLACK or WHITE
            row, col: Target cell

        Returns:
            Set of (row, col) tuples that would flip to player
        """
        opponent = self.get_opponent(player)
        return self._scan_flips(np.asarray(state).tolist(), player, opponent, row, col)

    def _scan_flips(self, grid, player, opponent, row, col):
        # grid is a nested list; numpy scalar indexing is too slow for the search
        if not self.is_inside(row, col) or grid[row][col] != EMPTY:
            return set()

        flips = set()
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            run = []
            while self.is_inside(r, c) and grid[r][c] == opponent:
                run.append((int(r), int(c)))
                r += dr
                c += dc
            # Run only counts if it is closed by one of our own discs
            if run and self.is_inside(r, c) and grid[r][c] == player:
                flips.update(run)

        return flips

    def is_valid_move(self, state, player, row, col):
        return len(self.get_flips(state, player, row, col)) > 0

    def get_valid_moves(self, state, player):
        """
        Legal moves for player in row-major order.

        The order is relied on by the search engine: the first move found
        wins ties.

        Returns:
            List of (row, col) tuples, empty if player must pass
        """
        opponent = self.get_opponent(player)
        grid = np.asarray(state).tolist()
        return [
            (row, col)
            for row in range(self.board_size)
            for col in range(self.board_size)
            if self._scan_flips(grid, player, opponent, row, col)
        ]

    def get_next_state(self, state, action, player):
        """
        Place a disc for player and flip every captured run.

        Args:
            state: Current board state (8, 8)
            action: (row, col) target cell
            player: BLACK or WHITE

        Returns:
            New state with the move applied

        Raises:
            InvalidMoveError: if the cell is off-board, occupied or captures nothing
        """
        row, col = action
        if not self.is_inside(row, col):
            raise InvalidMoveError(action, player, "outside the board")
        if state[row, col] != EMPTY:
            raise InvalidMoveError(action, player, "cell is occupied")

        flips = self.get_flips(state, player, row, col)
        if not flips:
            raise InvalidMoveError(action, player, "no discs would be flipped")

        state = state.copy()
        state[row, col] = player
        for r, c in flips:
            state[r, c] = player
        return state

    def get_move_gains(self, state, player):
        """
        Immediate disc gain of every legal move.

        Returns:
            List of ((row, col), flips) pairs in row-major order
        """
        return [
            (move, len(self.get_flips(state, player, *move)))
            for move in self.get_valid_moves(state, player)
        ]

    def get_score(self, state):
        return {
            'black': int(np.count_nonzero(state == BLACK)),
            'white': int(np.count_nonzero(state == WHITE)),
        }

    def is_game_over(self, state):
        return not self.get_valid_moves(state, BLACK) and not self.get_valid_moves(state, WHITE)

    def get_winner(self, state):
        """
        Returns 'black', 'white' or 'draw' by disc count.
        """
        score = self.get_score(state)
        if score['black'] > score['white']:
            return 'black'
        if score['white'] > score['black']:
            return 'white'
        return 'draw'

    def to_string(self, state):
        """
        Text form of the board: one line per row, B = black, W = white, _ = empty.
        """
        return '\n'.join(
            ''.join(self.symbols[int(cell)] for cell in row)
            for row in state
        )

    def from_string(self, text):
        """
        Parse the text form produced by to_string.

        Raises:
            ValueError: on a wrong number of rows/columns or an unknown symbol
        """
        lookup = {symbol: value for value, symbol in self.symbols.items()}
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if len(rows) != self.board_size:
            raise ValueError(f"Expected {self.board_size} rows, got {len(rows)}")

        state = np.zeros((self.board_size, self.board_size), dtype=np.int8)
        for r, line in enumerate(rows):
            if len(line) != self.board_size:
                raise ValueError(f"Row {r} has {len(line)} cells, expected {self.board_size}")
            for c, symbol in enumerate(line):
                if symbol not in lookup:
                    raise ValueError(f"Unknown cell symbol {symbol!r} at ({r}, {c})")
                state[r, c] = lookup[symbol]
        return state
