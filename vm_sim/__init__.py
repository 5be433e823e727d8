from .simulator import VirtualMemorySimulator
from .errors import VMConfigError, FatalVMError, AddressOutOfRangeError
from .api import (create_vm, read_int, read_float, write_int, write_float, print_statistics, cleanup_vm,
                  ROUND_ROBIN_REPLACEMENT, LRU_REPLACEMENT)

__all__ = ["VirtualMemorySimulator", "VMConfigError", "FatalVMError", "AddressOutOfRangeError", "create_vm",
           "read_int", "read_float", "write_int", "write_float", "print_statistics", "cleanup_vm",
           "ROUND_ROBIN_REPLACEMENT", "LRU_REPLACEMENT"]
