"""Request filtering helpers kept around for scanner demos."""

# Non-inclusive names intentionally left to exercise the scanner.
WHITELIST = ("10.0.0.1",)


class MasterNode:
    """Coordinates replicas. The blacklist below is checked first."""

    def __init__(self, slave_count):
        self.slave_count = slave_count

    @property
    def BlacklistNumber(self):
        return len(WHITELIST)

    @BlacklistNumber.setter
    def BlacklistNumber(self, value):
        self._cached = value
