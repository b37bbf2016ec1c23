"""Request filtering helpers that follow inclusive naming."""

ALLOWLIST = ("10.0.0.1",)


class PrimaryNode:
    """Coordinates replicas. The deny list below is checked first."""

    def __init__(self, replica_count):
        self.replica_count = replica_count

    @property
    def denylist_size(self):
        return len(ALLOWLIST)
