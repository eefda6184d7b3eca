"""
Echo pulses - expanding rings that light up nearby walls and the exit
"""

from utils.helpers import clamp


class Pulse:
    """
    Single echo pulse
    """
    def __init__(self, x, y):
        """
        Args:
            x, y: Origin (player position at emission, pixels)
        """
        self.x = x
        self.y = y
        self.radius = 0
        self.alpha = 1.0
        self.alive = True

    def update(self, speed, max_radius):
        """Grow the ring and fade it linearly towards max_radius"""
        if not self.alive:
            return

        self.radius += speed
        # Clamped: the last step can overshoot max_radius
        self.alpha = clamp(1 - self.radius / max_radius, 0.0, 1.0)

        if self.radius >= max_radius:
            self.alive = False

    def to_dict(self):
        return {'x': self.x, 'y': self.y, 'radius': self.radius, 'alpha': self.alpha}

    def __repr__(self):
        return f"Pulse(x={self.x}, y={self.y}, radius={self.radius}, alpha={self.alpha:.3f})"


class PulseSystem:
    """
    Manages all live pulses
    """
    def __init__(self, speed, max_radius):
        self.speed = speed
        self.max_radius = max_radius
        self.pulses = []

    def create_pulse(self, x, y):
        """Emit a new pulse at (x, y)"""
        pulse = Pulse(x, y)
        self.pulses.append(pulse)
        return pulse

    def update(self):
        """Advance all pulses one tick and drop expired ones"""
        for pulse in self.pulses[:]:
            pulse.update(self.speed, self.max_radius)
            if not pulse.alive:
                self.pulses.remove(pulse)

    def clear(self):
        """Remove all pulses"""
        self.pulses.clear()

    def __iter__(self):
        return iter(self.pulses)

    def __len__(self):
        return len(self.pulses)
