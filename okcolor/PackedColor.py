"""Packed Oklab color: L, A, B, alpha quantized into one 32-bit int"""

#Layout, low to high bits: L, A, B, alpha. 8 bits each
#A and B are Oklab a,b offset by +0.5 so that 0.5 is neutral gray


class PackedColor:
	L_SHIFT = 0
	A_SHIFT = 8
	B_SHIFT = 16
	ALPHA_SHIFT = 24
	BYTE_MASK = 0xFF

	L_SCALE = 255.0 #L and alpha decode as byte/255
	AB_SCALE = 256.0 #A and B decode as byte/256, byte 128 is exactly 0.5
	ALPHA_SCALE = 255.0

	OPAQUE_THRESHOLD = 128 #alpha bytes below this count as fully transparent

	NEUTRAL_AB = 0.5
	TRANSPARENT = 0x00000000

	@staticmethod
	def _quantize(value, scale):
		q = int(round(value * scale))
		return 0 if q < 0 else (255 if q > 255 else q)

	@staticmethod
	def encode(L, A, B, alpha=1.0):
		"""int encode(float L, float A, float B, float alpha = 1.0)"""
		l_byte = PackedColor._quantize(L, PackedColor.L_SCALE)
		a_byte = PackedColor._quantize(A, PackedColor.AB_SCALE)
		b_byte = PackedColor._quantize(B, PackedColor.AB_SCALE)
		alpha_byte = PackedColor._quantize(alpha, PackedColor.ALPHA_SCALE)
		return (
			alpha_byte << PackedColor.ALPHA_SHIFT |
			b_byte << PackedColor.B_SHIFT |
			a_byte << PackedColor.A_SHIFT |
			l_byte << PackedColor.L_SHIFT
		)

	### Channel bytes ###

	@staticmethod
	def lightnessByte(packed):
		return (packed >> PackedColor.L_SHIFT) & PackedColor.BYTE_MASK

	@staticmethod
	def aByte(packed):
		return (packed >> PackedColor.A_SHIFT) & PackedColor.BYTE_MASK

	@staticmethod
	def bByte(packed):
		return (packed >> PackedColor.B_SHIFT) & PackedColor.BYTE_MASK

	@staticmethod
	def alphaByte(packed):
		return (packed >> PackedColor.ALPHA_SHIFT) & PackedColor.BYTE_MASK

	### Decoded channels ###

	@staticmethod
	def decodeL(packed):
		"""float decodeL(int packed) -> [0,1]"""
		return PackedColor.lightnessByte(packed) / PackedColor.L_SCALE

	@staticmethod
	def decodeA(packed):
		"""float decodeA(int packed) -> [0,255/256]"""
		return PackedColor.aByte(packed) / PackedColor.AB_SCALE

	@staticmethod
	def decodeB(packed):
		return PackedColor.bByte(packed) / PackedColor.AB_SCALE

	@staticmethod
	def decodeAlpha(packed):
		return PackedColor.alphaByte(packed) / PackedColor.ALPHA_SCALE

	@staticmethod
	def channels(packed):
		"""(float L, float A, float B, float alpha) channels(int packed)"""
		return (
			PackedColor.decodeL(packed),
			PackedColor.decodeA(packed),
			PackedColor.decodeB(packed),
			PackedColor.decodeAlpha(packed),
		)

	@staticmethod
	def isOpaque(packed):
		return PackedColor.alphaByte(packed) >= PackedColor.OPAQUE_THRESHOLD

	@staticmethod
	def withAlpha(packed, alpha):
		alpha_byte = PackedColor._quantize(alpha, PackedColor.ALPHA_SCALE)
		rest = packed & ~(PackedColor.BYTE_MASK << PackedColor.ALPHA_SHIFT) & 0xFFFFFFFF
		return rest | alpha_byte << PackedColor.ALPHA_SHIFT
