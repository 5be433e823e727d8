import math

ROUND_ROBIN = "round-robin"
LRU = "lru"

# accepted spellings for the replacement algorithms, 0/1 match the classic handle api
POLICY_ALIASES = {
    "0": ROUND_ROBIN,
    "rr": ROUND_ROBIN,
    "round-robin": ROUND_ROBIN,
    "round robin": ROUND_ROBIN,
    "1": LRU,
    "lru": LRU,
}

MAX_ADDRESS_SPACE = 2 ** 32


class VMConfigError(ValueError):
    """
    The requested configuration violates one of the construction constraints.
    No simulator is created when this is raised.
    """


def is_power_of_two(n):
    """Check if a number is a power of two. uses bit operations."""
    return n > 0 and (n & (n - 1)) == 0

def safe_log_2(n):
    """Compute the base-2 logarithm of a number, ensuring the number is a power of two."""
    if not is_power_of_two(n):
        raise ValueError("Input must be a power of two.")
    return int(math.log2(n))

def bits_needed(n):
    """Number of bits needed to index n items, n does not have to be a power of two."""
    if n <= 1:
        return 0
    return (n - 1).bit_length()

def safe_policy(policy):
    """Normalize a replacement algorithm given as a name or as 0/1."""
    key = str(policy).strip().lower()
    if key not in POLICY_ALIASES:
        raise VMConfigError(f"Unknown replacement algorithm: {policy!r}. Use round-robin (0) or lru (1).")
    return POLICY_ALIASES[key]


class BitCounts:
    def __init__(self):
        self.vpn_bits = 0
        self.page_offset_bits = 0
        self.ppn_bits = 0
        self.tlb_index_bits = 0


class Config:
    """
    Fixed configuration of one virtual memory simulation.
    Validation happens on construction, a refused configuration raises VMConfigError.
    """
    def __init__(self,
                 n_virtual_pages,
                 n_physical_pages,
                 page_size,
                 n_tlb_entries,
                 page_policy=ROUND_ROBIN,
                 tlb_policy=ROUND_ROBIN):
        self.n_virtual_pages = n_virtual_pages
        self.n_physical_pages = n_physical_pages
        self.page_size = page_size
        self.n_tlb_entries = n_tlb_entries
        self.page_policy = safe_policy(page_policy)
        self.tlb_policy = safe_policy(tlb_policy)
        self.bits = BitCounts()
        self.validate()
        self.derive_bits()

    @classmethod
    def from_config_file(cls, filepath):
        with open(filepath) as infile:
            raw_lines = [ln.rstrip("\n") for ln in infile]

        section_headers = {
            "Virtual Memory configuration": "vm",
        }
        sections = {"vm": {}}

        current = None
        for ln in raw_lines:
            line = ln.strip()
            if not line or line.startswith("#"):
                continue

            if line in section_headers:
                current = section_headers[line]
                continue

            # Regular "Key: value" inside a section
            if ":" in line and current is not None:
                key, val = line.split(":", 1)
                sections[current][key.strip()] = val.strip()
                continue

        vm = sections["vm"]
        try:
            n_virtual_pages = int(vm.get("Number of virtual pages", 0))
            n_physical_pages = int(vm.get("Number of physical pages", 0))
            page_size = int(vm.get("Page size", 0))
            n_tlb_entries = int(vm.get("Number of TLB entries", 0))
        except ValueError as exc:
            raise VMConfigError(f"Invalid number in {filepath}: {exc}") from exc
        page_policy = vm.get("Page replacement", ROUND_ROBIN)
        tlb_policy = vm.get("TLB replacement", ROUND_ROBIN)

        return cls(
            n_virtual_pages=n_virtual_pages,
            n_physical_pages=n_physical_pages,
            page_size=page_size,
            n_tlb_entries=n_tlb_entries,
            page_policy=page_policy,
            tlb_policy=tlb_policy,
        )

    def _validate_pt(self):
        if self.n_physical_pages < 1:
            raise VMConfigError("Number of physical pages must be at least 1.")
        # physical memory has to be smaller than virtual memory
        if self.n_virtual_pages <= self.n_physical_pages:
            raise VMConfigError("Number of virtual pages must be larger than the number of physical pages.")
        if not is_power_of_two(self.page_size):
            raise VMConfigError("Page size must be a power of two.")
        # max reference address length is 32 bits
        if self.n_virtual_pages * self.page_size > MAX_ADDRESS_SPACE:
            raise VMConfigError("Maximum virtual address space exceeded (2^32).")

    def _validate_tlb(self):
        # a TLB larger than physical memory is allowed, it just never fills up
        if self.n_tlb_entries < 0:
            raise VMConfigError("Number of TLB entries cannot be negative.")

    def validate(self):
        self._validate_pt()
        self._validate_tlb()

    def derive_bits(self):
        self.bits.page_offset_bits = safe_log_2(self.page_size)
        self.bits.vpn_bits = bits_needed(self.n_virtual_pages)
        self.bits.ppn_bits = bits_needed(self.n_physical_pages)
        self.bits.tlb_index_bits = bits_needed(self.n_tlb_entries)

    @property
    def address_bits(self):
        return self.bits.vpn_bits + self.bits.page_offset_bits

    def __str__(self):
        print_str = ""
        print_str += f"Number of virtual pages is {self.n_virtual_pages}.\n"
        print_str += f"Number of physical pages is {self.n_physical_pages}.\n"
        print_str += f"Each page contains {self.page_size} words.\n"
        print_str += f"Number of bits used for the page number is {self.bits.vpn_bits}.\n"
        print_str += f"Number of bits used for the page offset is {self.bits.page_offset_bits}.\n"
        print_str += f"Number of bits in a virtual address is {self.address_bits}.\n"
        print_str += f"Number of bits used for the frame number is {self.bits.ppn_bits}.\n"
        print_str += f"Pages are replaced using {self.page_policy} replacement.\n\n"
        print_str += f"TLB contains {self.n_tlb_entries} entries.\n"
        print_str += f"Number of bits used for the TLB slot is {self.bits.tlb_index_bits}.\n"
        if self.n_tlb_entries > self.n_physical_pages:
            print_str += "Warning: the TLB has more entries than there are physical pages.\n"
        print_str += f"TLB entries are replaced using {self.tlb_policy} replacement.\n"
        return print_str
