import pytest

from gpiosim.utils.consts import ConstUtils, deposit_bit, extract_bit


class TestConstUtils:
    def test_masks(self):
        assert ConstUtils.MASK_8_BITS == 0xFF
        assert ConstUtils.MASK_32_BITS == 0xFFFFFFFF

    def test_set_geometry(self):
        assert (
            ConstUtils.BITS_PER_GROUP * ConstUtils.GROUPS_PER_SET
            == ConstUtils.GPIOS_PER_SET
        )
        assert ConstUtils.REGISTER_SIZE == 4


class TestBitHelpers:
    @pytest.mark.parametrize("bit, expected", [(0, 1), (1, 0), (31, 1)])
    def test_extract_bit(self, bit, expected):
        assert extract_bit(0x80000001, bit) == expected

    def test_deposit_bit_sets_and_clears(self):
        assert deposit_bit(0x0, 8, 1) == 0x100
        assert deposit_bit(0x1FF, 8, 0) == 0xFF

    def test_deposit_bit_treats_any_truthy_level_as_high(self):
        assert deposit_bit(0, 3, 0x8) == 0x8

    def test_deposit_bit_stays_32_bit(self):
        assert deposit_bit(0xFFFFFFFF, 31, 0) == 0x7FFFFFFF
        assert deposit_bit(0x7FFFFFFF, 31, 1) == 0xFFFFFFFF
