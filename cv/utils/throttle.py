import time

class ScanThrottle:
    """Admit at most max_per_second decode attempts."""
    def __init__(self, max_per_second=5, clock=time.monotonic):
        self.interval = 1.0 / max_per_second if max_per_second > 0 else 0.0
        self.clock = clock
        self.last = None

    def ready(self):
        now = self.clock()
        if self.last is not None and (now - self.last) < self.interval:
            return False
        self.last = now
        return True

    def reset(self):
        self.last = None
