from .invalidation_bus import InvalidationBus
from .policies import ReplacementPolicy, RoundRobinPolicy, LRUPolicy, make_policy

__all__ = ["InvalidationBus", "ReplacementPolicy", "RoundRobinPolicy", "LRUPolicy", "make_policy"]
