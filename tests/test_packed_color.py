import pytest

from okcolor import PackedColor


class TestEncode:
	def test_layout(self):
		assert PackedColor.encode(1.0, 0.0, 0.0, 0.0) == 0x000000FF
		assert PackedColor.encode(0.0, 255/256, 0.0, 0.0) == 0x0000FF00
		assert PackedColor.encode(0.0, 0.0, 255/256, 0.0) == 0x00FF0000
		assert PackedColor.encode(0.0, 0.0, 0.0, 1.0) == 0xFF000000

	def test_neutral_is_exact(self):
		packed = PackedColor.encode(0.3, 0.5, 0.5)
		assert PackedColor.aByte(packed) == 128
		assert PackedColor.bByte(packed) == 128
		assert PackedColor.decodeA(packed) == 0.5
		assert PackedColor.decodeB(packed) == 0.5

	def test_clamps_each_channel(self):
		packed = PackedColor.encode(2.0, -1.0, 5.0, 1.5)
		assert PackedColor.lightnessByte(packed) == 255
		assert PackedColor.aByte(packed) == 0
		assert PackedColor.bByte(packed) == 255
		assert PackedColor.alphaByte(packed) == 255

	def test_fits_32_bits(self):
		packed = PackedColor.encode(1.0, 1.0, 1.0, 1.0)
		assert 0 <= packed < 2**32


class TestDecode:
	@pytest.mark.parametrize("byte", [0, 1, 17, 127, 128, 200, 254, 255])
	def test_bit_exact_per_channel(self, byte):
		for shift in (0, 8, 16, 24):
			packed = byte << shift | 0x80 << ((shift + 8) % 32)
			assert PackedColor.encode(*PackedColor.channels(packed)) == packed

	def test_bit_exact_sample(self):
		for packed in range(0, 2**32, 0x01F3A7C5):
			L = PackedColor.decodeL(packed)
			A = PackedColor.decodeA(packed)
			B = PackedColor.decodeB(packed)
			alpha = PackedColor.decodeAlpha(packed)
			assert PackedColor.encode(L, A, B, alpha) == packed

	def test_ranges(self):
		packed = 0xFFFFFFFF
		assert PackedColor.decodeL(packed) == 1.0
		assert PackedColor.decodeA(packed) == 255/256
		assert PackedColor.decodeAlpha(packed) == 1.0


class TestAlpha:
	def test_opaque_threshold(self):
		assert PackedColor.isOpaque(0x80 << 24)
		assert not PackedColor.isOpaque(0x7F << 24)

	def test_with_alpha_keeps_color(self):
		packed = PackedColor.encode(0.4, 0.45, 0.6, 1.0)
		faded = PackedColor.withAlpha(packed, 0.0)
		assert PackedColor.alphaByte(faded) == 0
		assert faded & 0x00FFFFFF == packed & 0x00FFFFFF
