import io

import pytest

import vm_sim
from vm_sim import (AddressOutOfRangeError, LRU_REPLACEMENT, ROUND_ROBIN_REPLACEMENT, cleanup_vm, create_vm,
                    print_statistics, read_float, read_int, write_float, write_int)


class TestCreate:
    @pytest.mark.parametrize("args", [
        (4, 4, 4, 2, 0, 0),
        (4, 8, 4, 2, 0, 0),
        (8, 2, 3, 2, 0, 0),
        (8, 2, 0, 2, 0, 0),
        (2 ** 21, 2, 2 ** 12, 2, 0, 0),
        (8, 2, 4, 2, 2, 0),
        (8, 2, 4, 2, 0, 7),
    ])
    def test_refused(self, args):
        assert create_vm(*args) is None

    def test_created(self):
        handle = create_vm(8, 2, 4, 2, ROUND_ROBIN_REPLACEMENT, LRU_REPLACEMENT)
        assert isinstance(handle, vm_sim.VirtualMemorySimulator)
        assert handle.config.page_policy == "round-robin"
        assert handle.config.tlb_policy == "lru"
        cleanup_vm(handle)

    def test_tlb_larger_than_memory_is_allowed(self):
        handle = create_vm(8, 2, 4, 16, 0, 0)
        assert handle is not None
        cleanup_vm(handle)

    def test_allocation_failure_is_fatal_not_refused(self):
        with pytest.raises(vm_sim.FatalVMError):
            create_vm(8, 2, 4, 10 ** 15, 0, 0)

    def test_policy_names(self):
        handle = create_vm(8, 2, 4, 2, "lru", "round-robin")
        assert handle.config.page_policy == "lru"
        cleanup_vm(handle)


class TestAccessors:
    def test_scenario(self):
        handle = create_vm(8, 2, 4, 2, 0, 0)
        write_int(handle, 0, 42)
        write_int(handle, 16, 7)
        assert read_int(handle, 0) == 42
        out = io.StringIO()
        print_statistics(handle, file=out)
        assert out.getvalue().splitlines() == [
            "Number of page faults: 2",
            "Number of TLB misses: 2",
            "Number of disk writes: 1",
        ]
        cleanup_vm(handle)

    def test_float(self):
        handle = create_vm(8, 2, 4, 2, 1, 1)
        write_float(handle, 20, 0.5)
        assert read_float(handle, 20) == 0.5
        cleanup_vm(handle)

    def test_out_of_range_is_fatal(self):
        handle = create_vm(8, 2, 4, 2, 0, 0)
        with pytest.raises(AddressOutOfRangeError):
            read_int(handle, 32)
        with pytest.raises(AddressOutOfRangeError):
            write_float(handle, 32, 1.0)
        cleanup_vm(handle)
