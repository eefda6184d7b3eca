"""
Player entity - continuous pixel position with a collision radius
"""


class Player:
    """
    Player entity moving freely in pixel space
    """
    def __init__(self, x, y, radius):
        self.x = x
        self.y = y
        self.radius = radius
        self.moves = 0

    @property
    def position(self):
        return (self.x, self.y)

    def candidate_position(self, dx, dy, speed):
        """
        Position after one step along (dx, dy) at a fixed speed per axis.
        Diagonals combine both axis deltas, so they are not normalized.
        """
        return self.x + dx * speed, self.y + dy * speed

    def move_to(self, x, y):
        """Commit a new position"""
        if (x, y) != (self.x, self.y):
            self.x = x
            self.y = y
            self.moves += 1

    def reset(self, x, y):
        self.x = x
        self.y = y
        self.moves = 0

    def __repr__(self):
        return f"Player(x={self.x}, y={self.y}, r={self.radius})"
