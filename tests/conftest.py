import pytest

from config import Config
from vm_sim import VirtualMemorySimulator


@pytest.fixture
def make_vm():
    """Build a simulator and release it when the test is done."""
    created = []

    def _make(n_virtual_pages=8, n_physical_pages=2, page_size=4, n_tlb_entries=2,
              page_policy="round-robin", tlb_policy="round-robin"):
        config = Config(n_virtual_pages, n_physical_pages, page_size, n_tlb_entries, page_policy, tlb_policy)
        vm = VirtualMemorySimulator(config)
        created.append(vm)
        return vm

    yield _make
    for vm in created:
        if vm.tlb is not None:
            vm.cleanup()
