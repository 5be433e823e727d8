# marks a slot that holds no translation, never equal to a real page or frame
INVALID = -1


class TranslationCache:
    """
    Fully associative translation lookaside buffer. Slot i maps virtual page i to frame i
    after construction. Entries carry no dirty state, that lives on the frame.

    A TLB can be larger than physical memory, slots past the last frame start out invalid.
    """
    name = "TLB"

    def __init__(self, n_entries, policy, n_frames=None):
        self.n_entries = n_entries
        self.policy = policy
        n_valid = n_entries if n_frames is None else min(n_entries, n_frames)
        self.frame = list(range(n_valid)) + [INVALID] * (n_entries - n_valid)
        self.vpn = list(range(n_valid)) + [INVALID] * (n_entries - n_valid)
        self.last_used = [0] * n_entries

    def lookup(self, vpn, timestamp):
        """
        Look up a virtual page and refresh the entry on a hit
        :param vpn: int virtual page number
        :param timestamp: int time of the access
        :return: int frame number, or None on a miss
        """
        for slot in range(self.n_entries):
            if self.vpn[slot] == vpn:
                self.last_used[slot] = timestamp
                return self.frame[slot]
        return None

    def insert(self, frame, vpn, timestamp):
        """
        Add a translation, overwriting the slot picked by the replacement policy
        :param frame: int frame number
        :param vpn: int virtual page number
        :param timestamp: int time of the access
        :return: int slot that was written, or None when the TLB has no entries
        """
        if self.n_entries == 0:
            return None
        slot = self.policy.choose(self.last_used)
        self.frame[slot] = frame
        self.vpn[slot] = vpn
        self.last_used[slot] = timestamp
        return slot

    def retarget(self, frame, vpn, timestamp):
        """
        Point the entry for a frame at the page that now lives there. The entry keeps its slot
        and its timestamp. Without such an entry a new one is inserted.
        :param frame: int frame that changed owner
        :param vpn: int virtual page now held by the frame
        :param timestamp: int time of the access, only used for a fresh insert
        :return: int slot holding the translation, or None when the TLB has no entries
        """
        for slot in range(self.n_entries):
            if self.frame[slot] == frame:
                self.vpn[slot] = vpn
                return slot
        return self.insert(frame, vpn, timestamp)

    def on_page_evicted(self, evicted_entry, timestamp):
        self.retarget(evicted_entry.frame, evicted_entry.new_vpn, timestamp)

    def entries(self):
        """
        Snapshot of the TLB contents
        :return: list of (frame, vpn, last_used) tuples in slot order
        """
        return list(zip(self.frame, self.vpn, self.last_used))
