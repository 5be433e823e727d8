from vm_sim.data_structures.access_results import EvictedPageTableEntry


class FrameTable:
    """
    Inverted page table, one entry per physical frame. Frame i starts out holding virtual page i.
    Entries live in three fixed-length lists indexed by frame number.
    """
    def __init__(self, n_physical_pages, policy):
        self.n_physical_pages = n_physical_pages
        self.policy = policy

        # page table state
        self.resident_vpn = list(range(n_physical_pages))
        self.last_used = [0] * n_physical_pages
        self.dirty = [False] * n_physical_pages

    def lookup(self, vpn):
        """
        Find the frame holding a virtual page
        :param vpn: int virtual page number
        :return: int frame number, or None if the page is not resident
        """
        for frame, resident in enumerate(self.resident_vpn):
            if resident == vpn:
                return frame
        return None

    def mark(self, frame, timestamp, is_write):
        """
        Record an access to a frame
        :param frame: int frame number
        :param timestamp: int time of the access
        :param is_write: bool, writes make the frame dirty
        :return: None
        """
        if is_write:
            self.dirty[frame] = True
        self.last_used[frame] = timestamp

    def choose_victim(self):
        return self.policy.choose(self.last_used)

    def replace(self, frame, vpn, timestamp):
        """
        Hand a frame over to a new virtual page. The caller is responsible for writing back the
        old content first if the returned entry is dirty.
        :param frame: int frame number
        :param vpn: int virtual page number that now owns the frame
        :param timestamp: int time of the access that caused the fault
        :return: EvictedPageTableEntry describing the previous owner
        """
        evicted = EvictedPageTableEntry(frame, self.resident_vpn[frame], vpn, dirty=self.dirty[frame])
        self.resident_vpn[frame] = vpn
        self.dirty[frame] = False
        self.last_used[frame] = timestamp
        return evicted
