import sys

from trace_parser import TraceParser, READ_INT, READ_FLOAT, WRITE_INT, WRITE_FLOAT
from vm_sim.data_structures.access_results import AccessLine, TranslationResult
from vm_sim.data_structures.frame_table import FrameTable
from vm_sim.data_structures.translation_cache import TranslationCache
from vm_sim.data_structures.word_store import WordStore, to_float32
from vm_sim.errors import AddressOutOfRangeError, FatalVMError
from vm_sim.protocols.invalidation_bus import InvalidationBus
from vm_sim.protocols.policies import make_policy


class VirtualMemorySimulator:
    """
    Simulates paged virtual memory with a TLB in front of the page table.

    Virtual memory is a sequence of 32-bit words split into pages. Only n_physical_pages of them
    are resident at a time, the rest live in a simulated backing store. Every access goes through
    the TLB, then the page table, and on a page fault a frame is chosen by the page replacement
    policy and written back to the backing store if it is dirty.
    """
    def __init__(self, config):
        self.config = config
        self.page_size = config.page_size
        self.n_virtual_pages = config.n_virtual_pages

        try:
            self.page_table = FrameTable(config.n_physical_pages,
                                         make_policy(config.page_policy, config.n_physical_pages))
            self.tlb = TranslationCache(config.n_tlb_entries, make_policy(config.tlb_policy, config.n_tlb_entries),
                                        n_frames=config.n_physical_pages)
        except (MemoryError, OverflowError) as exc:
            raise FatalVMError(
                f"Unable to allocate tables for {config.n_physical_pages} frames and {config.n_tlb_entries} TLB entries"
            ) from exc
        self.memory = WordStore("physical memory", config.n_physical_pages, config.page_size)
        self.disk = WordStore("backing store", config.n_virtual_pages, config.page_size)

        # the TLB follows frames that change owner
        self.invalidation_bus = InvalidationBus()
        self.invalidation_bus.register_listener(self.tlb)

        self.timestamp = 0
        self.page_faults = 0
        self.tlb_misses = 0
        self.disk_writes = 0
        self.reads = 0
        self.writes = 0

    def parse_address(self, address):
        """
        Split a virtual address into page number and offset
        :param address: int word address
        :return: int, int; the vpn and the page offset
        """
        if address < 0:
            raise AddressOutOfRangeError(address, self.n_virtual_pages, self.page_size)
        vpn, offset = divmod(address, self.page_size)
        if vpn >= self.n_virtual_pages:
            raise AddressOutOfRangeError(address, self.n_virtual_pages, self.page_size)
        return vpn, offset

    def build_physical_address(self, frame, offset):
        return frame * self.page_size + offset

    def _handle_page_fault(self, vpn):
        """
        Bring a page into memory, evicting whatever the replacement policy picks
        :param vpn: int virtual page number that faulted
        :return: EvictedPageTableEntry for the previous owner of the frame
        """
        self.page_faults += 1
        frame = self.page_table.choose_victim()
        old_vpn = self.page_table.resident_vpn[frame]
        # write back before the frame changes hands
        if self.page_table.dirty[frame]:
            self.disk_writes += 1
            self.disk.write_page(old_vpn, self.memory.read_page(frame))
        evicted = self.page_table.replace(frame, vpn, self.timestamp)
        self.memory.write_page(frame, self.disk.read_page(vpn))
        self.invalidation_bus.publish_page_evicted(evicted, self.timestamp)
        return evicted

    def translate(self, address, is_write=False):
        """
        Translate a virtual address to a physical word address
        :param address: int virtual word address
        :param is_write: bool, marks the page dirty
        :return: TranslationResult
        """
        vpn, offset = self.parse_address(address)
        self.timestamp += 1

        frame = self.tlb.lookup(vpn, self.timestamp)
        if frame is not None:
            self.page_table.mark(frame, self.timestamp, is_write)
            return TranslationResult(address, vpn, offset, frame, self.build_physical_address(frame, offset),
                                     tlb_hit=True, page_table_hit=True)

        self.tlb_misses += 1
        frame = self.page_table.lookup(vpn)
        if frame is not None:
            self.page_table.mark(frame, self.timestamp, is_write)
            self.tlb.insert(frame, vpn, self.timestamp)
            return TranslationResult(address, vpn, offset, frame, self.build_physical_address(frame, offset),
                                     tlb_hit=False, page_table_hit=True)

        evicted = self._handle_page_fault(vpn)
        frame = evicted.frame
        self.page_table.mark(frame, self.timestamp, is_write)
        return TranslationResult(address, vpn, offset, frame, self.build_physical_address(frame, offset),
                                 tlb_hit=False, page_table_hit=False, evicted_entry=evicted)

    def read_int(self, address):
        return self.access(READ_INT, address)

    def read_float(self, address):
        return self.access(READ_FLOAT, address)

    def write_int(self, address, value):
        self.access(WRITE_INT, address, value)

    def write_float(self, address, value):
        self.access(WRITE_FLOAT, address, value)

    def access(self, operation, address, value=None, line=None):
        """
        Run one trace operation
        :param operation: "R", "RF", "W" or "WF"
        :param address: int virtual word address
        :param value: value to store for writes
        :param line: AccessLine to fill in, optional
        :return: the value read or written
        """
        is_write = operation in (WRITE_INT, WRITE_FLOAT)
        if not is_write and operation not in (READ_INT, READ_FLOAT):
            raise ValueError(f"Unknown op: {operation}")
        if operation == WRITE_FLOAT:
            # convert first so a bad value leaves the simulation untouched
            value = to_float32(value)
        translation = self.translate(address, is_write=is_write)
        if is_write:
            self.writes += 1
        else:
            self.reads += 1
        physical_address = translation.physical_address
        if operation == READ_INT:
            value = self.memory.read_int(physical_address)
        elif operation == READ_FLOAT:
            value = self.memory.read_float(physical_address)
        elif operation == WRITE_INT:
            self.memory.write_int(physical_address, value)
        else:
            self.memory.write_float(physical_address, value)
        if line is not None:
            line.update(translation)
            line.value = value
        return value

    def simulate(self, trace, verbose=True):
        """
        Core simulator functionality, runs every operation of a trace file.
        :param trace: trace file path
        :param verbose: print one line per access
        :return: None
        """
        if verbose:
            print("Virtual  Op Virt.  Page TLB  PT   Frame      Value")
            print("Address     Page # Off  Res. Res. #     WB")
            print("-------- -- ------ ---- ---- ---- ----- ---- ----------")
        for trace_op in TraceParser(trace, addr_bits=32):
            line = AccessLine(trace_op.operation, trace_op.address)
            self.access(trace_op.operation, trace_op.address, trace_op.value, line)
            if verbose:
                print(line)
        if verbose:
            print("\nSimulation statistics\n")
        self.print_statistics()

    def get_stats(self):
        """
        Gathers and returns the simulation counters.
        :return: dict of stats
        """
        accesses = self.timestamp
        tlb_hits = accesses - self.tlb_misses
        stats = {
            "page faults": self.page_faults,
            "tlb misses": self.tlb_misses,
            "disk writes": self.disk_writes,
            "tlb hits": tlb_hits,
            "tlb hit rate": tlb_hits / accesses if accesses > 0 else 0,
            "page table hits": self.tlb_misses - self.page_faults,
            "accesses": accesses,
            "reads": self.reads,
            "writes": self.writes,
        }
        return stats

    def print_statistics(self, file=None):
        """
        Print the number of page faults, TLB misses and disk writes.
        :param file: stream to print to, defaults to stdout
        :return: None
        """
        out = file if file is not None else sys.stdout
        print(f"Number of page faults: {self.page_faults}", file=out)
        print(f"Number of TLB misses: {self.tlb_misses}", file=out)
        print(f"Number of disk writes: {self.disk_writes}", file=out)

    def cleanup(self):
        """
        Release the simulated memory. The simulator must not be used afterwards.
        :return: None
        """
        self.memory.release()
        self.disk.release()
        self.page_table = None
        self.tlb = None
        self.invalidation_bus = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.cleanup()
        return False
