from abc import abstractmethod, ABC

from config import ROUND_ROBIN, LRU, VMConfigError


class ReplacementPolicy(ABC):
    """
    Abstract base class for replacement policies. A policy picks the slot to overwrite
    out of a fixed number of slots (frames of physical memory or TLB entries).
    """
    name = None

    def __init__(self, n_slots):
        self.n_slots = n_slots

    @abstractmethod
    def choose(self, last_used):
        pass


class RoundRobinPolicy(ReplacementPolicy):
    """
    Cyclic replacement, slots are handed out as 0, 1, ..., n - 1, 0, 1, ... no matter
    how or when they were used. This is not FIFO, load time is never looked at.
    """
    name = ROUND_ROBIN

    def __init__(self, n_slots):
        super().__init__(n_slots)
        self.cursor = 0

    def choose(self, last_used):
        """
        Advance the cursor and return the slot it just left
        :param last_used: list of access timestamps, ignored
        :return: int slot index
        """
        victim = self.cursor
        self.cursor = (self.cursor + 1) % self.n_slots
        return victim


class LRUPolicy(ReplacementPolicy):
    """
    Least recently used replacement
    """
    name = LRU

    def choose(self, last_used):
        """
        Find the slot with the oldest access timestamp
        :param last_used: list of access timestamps, one per slot
        :return: int slot index, the lowest index wins on a tie
        """
        # min keeps the first of equal keys
        return min(range(self.n_slots), key=last_used.__getitem__)


POLICIES = {
    ROUND_ROBIN: RoundRobinPolicy,
    LRU: LRUPolicy,
}


def make_policy(name, n_slots):
    """
    Build a replacement policy from its normalized name
    :param name: "round-robin" or "lru"
    :param n_slots: number of slots the policy chooses from
    :return: ReplacementPolicy
    """
    try:
        policy_cls = POLICIES[name]
    except KeyError:
        raise VMConfigError(f"Unknown replacement algorithm: {name!r}") from None
    return policy_cls(n_slots)
