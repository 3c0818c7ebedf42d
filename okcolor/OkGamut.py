"""Gamut limiting and saturation maximizing of packed Oklab colors"""

import math

from .PackedColor import PackedColor
from .GamutTable import GamutTable
from .OkLab import OkLab


class OkGamut:
	ACHROMATIC_CHROMA = 1e-9
	FIT_ATTEMPTS = 16
	EXACT_EPS = 1e-7
	CLIP_EPS = 1e-6 #linear, well under a thousandth of an 8-bit sRGB step
	AB_STEP = 1.0 / PackedColor.AB_SCALE

	### Hue and chroma of A,B channels ###

	@staticmethod
	def hue(A, B):
		"""float hue(float A, float B) -> [0,1)"""
		h = math.atan2(B - PackedColor.NEUTRAL_AB, A - PackedColor.NEUTRAL_AB) / (2.0*math.pi)
		h = h % 1.0
		return 0.0 if h >= 1.0 else h

	@staticmethod
	def chroma(A, B):
		return math.hypot(A - PackedColor.NEUTRAL_AB, B - PackedColor.NEUTRAL_AB)

	@staticmethod
	def _quantizeL(L):
		"""Clamp and snap to the L byte grid, table rows line up with decoded lightness"""
		L = 0.0 if L < 0.0 else (1.0 if L > 1.0 else L)
		return round(L * PackedColor.L_SCALE) / PackedColor.L_SCALE

	@staticmethod
	def _clipFree(packed):
		"""bool _clipFree(int packed) decoded color lands in the sRGB cube within half an A/B quantum"""
		L, A, B, _ = PackedColor.channels(packed)
		c = OkGamut.chroma(A, B)
		scale = max(0.0, c - 0.5*OkGamut.AB_STEP) / c if c > 0.0 else 0.0
		return OkGamut.inGamutExact(
			L,
			PackedColor.NEUTRAL_AB + (A - PackedColor.NEUTRAL_AB) * scale,
			PackedColor.NEUTRAL_AB + (B - PackedColor.NEUTRAL_AB) * scale,
			OkGamut.CLIP_EPS
		)

	@staticmethod
	def _packAlongHue(L, hue, chroma, alpha):
		return PackedColor.encode(
			L,
			PackedColor.NEUTRAL_AB + math.cos(2.0*math.pi*hue) * chroma,
			PackedColor.NEUTRAL_AB + math.sin(2.0*math.pi*hue) * chroma,
			alpha
		)

	@staticmethod
	def _packInside(L, hue, chroma, alpha):
		"""Pack on the hue ray, one quantum further in each time the decoded color would clip"""
		for k in range(OkGamut.FIT_ATTEMPTS):
			packed = OkGamut._packAlongHue(L, hue, max(0.0, chroma - k*OkGamut.AB_STEP), alpha)
			if OkGamut._clipFree(packed):
				return packed
		return PackedColor.encode(L, PackedColor.NEUTRAL_AB, PackedColor.NEUTRAL_AB, alpha)

	@staticmethod
	def _boundary(L, hue, table):
		return table.getBoundaryChroma(GamutTable.lightnessIndex(L), GamutTable.hueIndex(hue))


	### Limiter ###

	@staticmethod
	def limitToGamut(L, A, B, alpha=1.0, table: GamutTable = None):
		"""
			int limitToGamut(float L, float A, float B, float alpha = 1.0, GamutTable table = None)
			Keeps lightness and hue. A color that already displays without clipping is only packed,
			anything else has its chroma pulled in to the table boundary.
		"""
		table = GamutTable.shared() if table is None else table
		L = OkGamut._quantizeL(L)

		packed = PackedColor.encode(L, A, B, alpha)
		if OkGamut._clipFree(packed):
			return packed

		c = OkGamut.chroma(A, B)
		if c <= OkGamut.ACHROMATIC_CHROMA:
			return PackedColor.encode(L, PackedColor.NEUTRAL_AB, PackedColor.NEUTRAL_AB, alpha)
		h = OkGamut.hue(A, B)
		return OkGamut._packInside(L, h, min(c, OkGamut._boundary(L, h, table)), alpha)

	@staticmethod
	def limitPacked(packed, table: GamutTable = None):
		L, A, B, alpha = PackedColor.channels(packed)
		return OkGamut.limitToGamut(L, A, B, alpha, table)


	### Maximizer ###

	@staticmethod
	def maximizeSaturation(L, A, B, alpha=1.0, table: GamutTable = None):
		"""
			int maximizeSaturation(float L, float A, float B, float alpha = 1.0, GamutTable table = None)
			Same lightness and hue, chroma pushed out to the table boundary. Grays stay gray.
		"""
		table = GamutTable.shared() if table is None else table
		L = OkGamut._quantizeL(L)

		c = OkGamut.chroma(A, B)
		if c <= OkGamut.ACHROMATIC_CHROMA:
			return PackedColor.encode(L, PackedColor.NEUTRAL_AB, PackedColor.NEUTRAL_AB, alpha)
		h = OkGamut.hue(A, B)
		boundary = OkGamut._boundary(L, h, table)

		packed = OkGamut._packInside(L, h, boundary, alpha)
		if boundary > 0.0 and packed == OkGamut._packAlongHue(L, h, boundary, alpha):
			#table entries are rounded to whole quanta, the edge can sit one further out
			further = OkGamut._packAlongHue(L, h, boundary + OkGamut.AB_STEP, alpha)
			if OkGamut._clipFree(further):
				return further
		return packed

	@staticmethod
	def maximizePacked(packed, table: GamutTable = None):
		L, A, B, alpha = PackedColor.channels(packed)
		return OkGamut.maximizeSaturation(L, A, B, alpha, table)


	### Gamut tests ###

	@staticmethod
	def inGamut(packed):
		"""bool inGamut(int packed) True for anything limitToGamut leaves alone"""
		return OkGamut._clipFree(packed)

	@staticmethod
	def withinBoundary(packed, table: GamutTable = None):
		"""bool withinBoundary(int packed) chroma no larger than the table entry of its cell"""
		table = GamutTable.shared() if table is None else table
		L, A, B, _ = PackedColor.channels(packed)
		return OkGamut.chroma(A, B) <= OkGamut._boundary(L, OkGamut.hue(A, B), table)

	@staticmethod
	def inGamutExact(L, A, B, eps=EXACT_EPS):
		"""bool inGamutExact(float L, float A, float B) linear RGB inside [0,1]"""
		lin = OkLab.labToLinear(L, A - PackedColor.NEUTRAL_AB, B - PackedColor.NEUTRAL_AB)
		return all(-eps <= c <= 1.0 + eps for c in lin)
