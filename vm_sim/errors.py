from config import VMConfigError


class FatalVMError(Exception):
    """
    Unrecoverable simulation error. The simulator never exits on its own,
    the caller decides whether to abort (the command line runner does).
    """


class AddressOutOfRangeError(FatalVMError):
    def __init__(self, address, n_virtual_pages, page_size):
        self.address = address
        super().__init__(
            f"Address {address:#x} is out of range for a virtual memory of "
            f"{n_virtual_pages} pages of {page_size} words."
            if address >= 0 else
            f"Address {address} is out of range (addresses are unsigned)."
        )
