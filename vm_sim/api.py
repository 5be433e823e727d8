"""
Handle based interface to the simulator.

create_vm returns an opaque handle (the simulator object) or None when the
requested sizes break one of the construction rules. Every other function takes
that handle. Out of range addresses raise FatalVMError, it is up to the caller
to turn that into a process exit.
"""
from config import Config, VMConfigError
from vm_sim.simulator import VirtualMemorySimulator

ROUND_ROBIN_REPLACEMENT = 0
LRU_REPLACEMENT = 1


def create_vm(size_vm, size_pm, page_size, size_tlb, page_repl_alg=ROUND_ROBIN_REPLACEMENT,
              tlb_repl_alg=ROUND_ROBIN_REPLACEMENT):
    """
    Create a virtual memory simulation
    :param size_vm: size of the virtual memory in pages
    :param size_pm: size of the physical memory in pages
    :param page_size: size of a page in words
    :param size_tlb: number of TLB entries
    :param page_repl_alg: 0 (round robin) or 1 (LRU), names are accepted too
    :param tlb_repl_alg: 0 (round robin) or 1 (LRU), names are accepted too
    :return: simulator handle, or None if the configuration is refused
    """
    try:
        config = Config(size_vm, size_pm, page_size, size_tlb, page_repl_alg, tlb_repl_alg)
    except VMConfigError:
        return None
    return VirtualMemorySimulator(config)


def read_int(handle, address):
    return handle.read_int(address)


def read_float(handle, address):
    return handle.read_float(address)


def write_int(handle, address, value):
    handle.write_int(address, value)


def write_float(handle, address, value):
    handle.write_float(address, value)


def print_statistics(handle, file=None):
    handle.print_statistics(file=file)


def cleanup_vm(handle):
    handle.cleanup()
