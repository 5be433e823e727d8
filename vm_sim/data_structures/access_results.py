class EvictedPageTableEntry:
    """
    Represents a page that lost its frame on a page fault
    """
    def __init__(self, frame, vpn, new_vpn, dirty=False):
        self.frame = frame
        self.vpn = vpn
        self.new_vpn = new_vpn
        self.dirty = dirty


class TranslationResult:
    """
    Represents the result of translating one virtual address
    """
    def __init__(self, address, vpn, offset, frame, physical_address, tlb_hit, page_table_hit,
                 evicted_entry=None):
        self.address = address
        self.vpn = vpn
        self.offset = offset
        self.frame = frame
        self.physical_address = physical_address
        self.tlb_hit = tlb_hit
        self.page_table_hit = page_table_hit
        self.evicted_entry = evicted_entry

    @property
    def page_fault(self):
        return not self.tlb_hit and not self.page_table_hit

    @property
    def wrote_back(self):
        return self.evicted_entry is not None and self.evicted_entry.dirty


class AccessLine:
    """
    Class to encapsulate all the info about a single memory access for logging purposes
    """
    def __init__(self, operation, address):
        self.operation = operation
        self.address = int(address) & 0xFFFFFFFF
        self.vpn = None
        self.page_offset = None
        self.tlb_result = None
        self.page_table_result = None
        self.frame = None
        self.wrote_back = None
        self.value = None

    def update(self, translation_result):
        """
        Copy the interesting parts of a TranslationResult onto the line
        :param translation_result: TranslationResult
        :return: None
        """
        self.vpn = translation_result.vpn
        self.page_offset = translation_result.offset
        self.tlb_result = translation_result.tlb_hit
        # page table is only consulted on a TLB miss
        self.page_table_result = None if translation_result.tlb_hit else translation_result.page_table_hit
        self.frame = translation_result.frame
        self.wrote_back = translation_result.wrote_back

    @staticmethod
    def _format_numeric(value, width, zero_pad=False):
        """
        Helper to format numeric values as hex strings, with options for width and zero-padding
        :param value: int or None
        :param width: int
        :param zero_pad: bool
        :return: formatted string
        """
        if value is None:
            return " " * width
        if zero_pad:
            return f"{value:0{width}x}"
        return f"{value:>{width}x}"

    @staticmethod
    def _format_hit_miss(value, width):
        """
        Helper to format hit/miss values as 'hit' or 'miss', or spaces if None
        :param value: bool or None
        :param width: int
        :return: formatted string
        """
        return (" " * width) if value is None else f"{'hit' if value else 'miss':>{width}s}"

    @staticmethod
    def _format_value(value):
        if value is None:
            return ""
        if isinstance(value, float):
            return f"{value:g}"
        return str(value)

    def __str__(self):
        # address is always printed as 8-hex, zero-padded
        addr = self._format_numeric(self.address, 8, zero_pad=True)
        op = f"{self.operation:<2s}"
        vpn = self._format_numeric(self.vpn, 6)
        page_off = self._format_numeric(self.page_offset, 4)
        tlb_res = self._format_hit_miss(self.tlb_result, 4)
        pt_res = self._format_hit_miss(self.page_table_result, 4)
        frame = self._format_numeric(self.frame, 5)
        wb = "  wb" if self.wrote_back else "    "
        return " ".join([addr, op, vpn, page_off, tlb_res, pt_res, frame, wb, self._format_value(self.value)])
