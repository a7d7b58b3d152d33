from .logic import initialize, step
from .state import GameState, Input, Snapshot, Status, snapshot

__all__ = ["GameState", "Input", "Snapshot", "Status", "initialize", "snapshot", "step"]
