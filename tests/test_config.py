import pytest

from config import Config, VMConfigError, bits_needed, is_power_of_two, safe_log_2, safe_policy


class TestHelpers:
    def test_is_power_of_two(self):
        assert [n for n in range(-2, 17) if is_power_of_two(n)] == [1, 2, 4, 8, 16]

    def test_safe_log_2(self):
        assert safe_log_2(1) == 0
        assert safe_log_2(4096) == 12
        with pytest.raises(ValueError):
            safe_log_2(12)

    def test_bits_needed(self):
        assert bits_needed(1) == 0
        assert bits_needed(2) == 1
        assert bits_needed(5) == 3
        assert bits_needed(8) == 3

    @pytest.mark.parametrize("raw, expected", [
        (0, "round-robin"), ("0", "round-robin"), ("RR", "round-robin"), ("Round-Robin", "round-robin"),
        (1, "lru"), ("LRU", "lru"), (" lru ", "lru"),
    ])
    def test_safe_policy_aliases(self, raw, expected):
        assert safe_policy(raw) == expected

    def test_safe_policy_unknown(self):
        with pytest.raises(VMConfigError):
            safe_policy("fifo")


class TestValidation:
    def test_valid_config_derives_bits(self):
        config = Config(8, 2, 4, 2)
        assert config.bits.page_offset_bits == 2
        assert config.bits.vpn_bits == 3
        assert config.bits.ppn_bits == 1
        assert config.address_bits == 5
        assert config.page_policy == "round-robin"
        assert config.tlb_policy == "round-robin"

    @pytest.mark.parametrize("n_virtual, n_physical", [(8, 8), (4, 8)])
    def test_virtual_must_exceed_physical(self, n_virtual, n_physical):
        with pytest.raises(VMConfigError):
            Config(n_virtual, n_physical, 4, 2)

    @pytest.mark.parametrize("page_size", [0, 3, 6, 100, -4])
    def test_page_size_power_of_two(self, page_size):
        with pytest.raises(VMConfigError):
            Config(8, 2, page_size, 2)

    def test_address_space_limit(self):
        # exactly 2^32 words is allowed
        Config(2 ** 20, 2, 2 ** 12, 2)
        with pytest.raises(VMConfigError):
            Config(2 ** 21, 2, 2 ** 12, 2)

    def test_oversized_tlb_is_accepted(self):
        config = Config(8, 2, 4, 16)
        assert config.n_tlb_entries == 16
        assert "Warning" in str(config)

    def test_zero_tlb_entries_accepted(self):
        assert Config(8, 2, 4, 0).n_tlb_entries == 0

    def test_negative_tlb_refused(self):
        with pytest.raises(VMConfigError):
            Config(8, 2, 4, -1)

    def test_no_physical_pages_refused(self):
        with pytest.raises(VMConfigError):
            Config(8, 0, 4, 0)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            Config(2, 4, 4, 1)


class TestConfigFile:
    def test_from_config_file(self, tmp_path):
        path = tmp_path / "vm.config"
        path.write_text(
            "Virtual Memory configuration\n"
            "Number of virtual pages: 64\n"
            "Number of physical pages: 16\n"
            "Page size: 256\n"
            "Number of TLB entries: 8\n"
            "\n"
            "# comment lines are ignored\n"
            "Page replacement: lru\n"
            "TLB replacement: round-robin\n"
        )
        config = Config.from_config_file(str(path))
        assert config.n_virtual_pages == 64
        assert config.n_physical_pages == 16
        assert config.page_size == 256
        assert config.n_tlb_entries == 8
        assert config.page_policy == "lru"
        assert config.tlb_policy == "round-robin"

    def test_policies_default_to_round_robin(self, tmp_path):
        path = tmp_path / "vm.config"
        path.write_text(
            "Virtual Memory configuration\n"
            "Number of virtual pages: 8\n"
            "Number of physical pages: 2\n"
            "Page size: 4\n"
            "Number of TLB entries: 2\n"
        )
        config = Config.from_config_file(str(path))
        assert config.page_policy == "round-robin"
        assert config.tlb_policy == "round-robin"

    def test_bad_number(self, tmp_path):
        path = tmp_path / "vm.config"
        path.write_text("Virtual Memory configuration\nNumber of virtual pages: lots\n")
        with pytest.raises(VMConfigError):
            Config.from_config_file(str(path))

    def test_invalid_sizes_refused(self, tmp_path):
        path = tmp_path / "vm.config"
        path.write_text(
            "Virtual Memory configuration\n"
            "Number of virtual pages: 2\n"
            "Number of physical pages: 2\n"
            "Page size: 4\n"
            "Number of TLB entries: 2\n"
        )
        with pytest.raises(VMConfigError):
            Config.from_config_file(str(path))

    def test_str_mentions_sizes(self):
        text = str(Config(8, 2, 4, 2, "lru", "rr"))
        assert "Number of virtual pages is 8." in text
        assert "Each page contains 4 words." in text
        assert "Pages are replaced using lru replacement." in text
        assert "Number of bits in a virtual address is 5." in text
        assert "Number of bits used for the TLB slot is 1." in text
        assert "Warning" not in text
