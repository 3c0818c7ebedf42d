"""Namespace for color tools built on the packed Oklab engine"""

import os
import math
import numpy as np

from .PackedColor import PackedColor
from .OkLab import OkLab
from .GamutTable import GamutTable
from .OkGamut import OkGamut
from .ArrayRandom import ArrayRandom

#Read and edit packed colors. Every edit lands back in gamut
class OkTools:
	### Constants ###
	OKLAB_BOX_MIN = np.array( [ 0.        , -0.23388757, -0.31152815] ) # OkLab bounding box of sRGB
	OKLAB_BOX_MAX = np.array( [0.99999999, 0.27456629, 0.19856975] )
	OKLAB_GAMUT_VOLUME = 0.05356533 # (oklab gamut) / (srgb gamut)

	AB_MAX = 255.0 / PackedColor.AB_SCALE
	RANDOM_EDIT_TRIES = 50


	### Channel properties ###

	@staticmethod
	def hue(packed):
		"""float hue(int packed) -> [0,1)"""
		return OkGamut.hue(PackedColor.decodeA(packed), PackedColor.decodeB(packed))

	@staticmethod
	def chroma(packed):
		return OkGamut.chroma(PackedColor.decodeA(packed), PackedColor.decodeB(packed))

	@staticmethod
	def chromaLimit(hue, lightness, table: GamutTable = None):
		"""float chromaLimit(float hue, float lightness) max displayable chroma"""
		table = GamutTable.shared() if table is None else table
		return table.chromaLimit(hue, lightness)

	@staticmethod
	def saturation(packed, table: GamutTable = None):
		"""float saturation(int packed) chroma relative to the gamut boundary, 0 for black and white"""
		limit = OkTools.chromaLimit(OkTools.hue(packed), PackedColor.decodeL(packed), table)
		if limit <= 0.0:
			return 0.0
		return min(1.0, OkTools.chroma(packed) / limit)


	### Constructors ###

	@staticmethod
	def oklabByHCL(hue, chroma, lightness, alpha=1.0, table: GamutTable = None):
		"""int oklabByHCL(float hue[0,1), float chroma, float lightness, float alpha = 1.0)"""
		A = PackedColor.NEUTRAL_AB + math.cos(2.0*math.pi*hue) * chroma
		B = PackedColor.NEUTRAL_AB + math.sin(2.0*math.pi*hue) * chroma
		return OkGamut.limitToGamut(lightness, A, B, alpha, table)

	@staticmethod
	def oklabByHSL(hue, saturation, lightness, alpha=1.0, table: GamutTable = None):
		"""int oklabByHSL(float hue[0,1), float saturation[0,1], float lightness, float alpha = 1.0)"""
		saturation = min(max(saturation, 0.0), 1.0)
		chroma = OkTools.chromaLimit(hue % 1.0, lightness, table) * saturation
		return OkTools.oklabByHCL(hue, chroma, lightness, alpha, table)


	### Edits ###

	@staticmethod
	def editOklab(packed, add_L=0.0, add_A=0.0, add_B=0.0, add_alpha=0.0, table: GamutTable = None):
		L, A, B, alpha = PackedColor.channels(packed)
		alpha = min(max(alpha + add_alpha, 0.0), 1.0)
		return OkGamut.limitToGamut(L + add_L, A + add_A, B + add_B, alpha, table)

	@staticmethod
	def lighten(packed, change, table: GamutTable = None):
		"""change[0,1] moves lightness that fraction of the way to white"""
		L, A, B, alpha = PackedColor.channels(packed)
		return OkGamut.limitToGamut(L + (1.0 - L) * change, A, B, alpha, table)

	@staticmethod
	def darken(packed, change, table: GamutTable = None):
		L, A, B, alpha = PackedColor.channels(packed)
		return OkGamut.limitToGamut(L * (1.0 - change), A, B, alpha, table)

	@staticmethod
	def raiseA(packed, change, table: GamutTable = None):
		"""change[0,1] moves A that fraction of the way to its top, toward red and magenta"""
		L, A, B, alpha = PackedColor.channels(packed)
		return OkGamut.limitToGamut(L, A + (OkTools.AB_MAX - A) * change, B, alpha, table)

	@staticmethod
	def lowerA(packed, change, table: GamutTable = None):
		"""change[0,1] moves A toward 0, toward green"""
		L, A, B, alpha = PackedColor.channels(packed)
		return OkGamut.limitToGamut(L, A * (1.0 - change), B, alpha, table)

	@staticmethod
	def raiseB(packed, change, table: GamutTable = None):
		"""toward yellow"""
		L, A, B, alpha = PackedColor.channels(packed)
		return OkGamut.limitToGamut(L, A, B + (OkTools.AB_MAX - B) * change, alpha, table)

	@staticmethod
	def lowerB(packed, change, table: GamutTable = None):
		"""toward blue"""
		L, A, B, alpha = PackedColor.channels(packed)
		return OkGamut.limitToGamut(L, A, B * (1.0 - change), alpha, table)

	@staticmethod
	def _scaleChroma(packed, fac, table: GamutTable = None):
		L, A, B, alpha = PackedColor.channels(packed)
		fac = max(0.0, fac)
		return OkGamut.limitToGamut(
			L,
			PackedColor.NEUTRAL_AB + (A - PackedColor.NEUTRAL_AB) * fac,
			PackedColor.NEUTRAL_AB + (B - PackedColor.NEUTRAL_AB) * fac,
			alpha,
			table
		)

	@staticmethod
	def dullen(packed, change, table: GamutTable = None):
		return OkTools._scaleChroma(packed, 1.0 - change, table)

	@staticmethod
	def enrich(packed, change, table: GamutTable = None):
		return OkTools._scaleChroma(packed, 1.0 + change, table)

	@staticmethod
	def fade(packed, change):
		return PackedColor.withAlpha(packed, PackedColor.decodeAlpha(packed) * (1.0 - change))

	@staticmethod
	def blot(packed, change):
		alpha = PackedColor.decodeAlpha(packed)
		return PackedColor.withAlpha(packed, alpha + (1.0 - alpha) * change)

	@staticmethod
	def mix(packed_list, weights=None, table: GamutTable = None):
		"""int mix(int[] packed_list, float[] weights = None) average in Oklab"""
		if len(packed_list) == 0:
			return PackedColor.TRANSPARENT
		channels = np.array([PackedColor.channels(p) for p in packed_list])
		L, A, B, alpha = np.average(channels, axis=0, weights=weights)
		return OkGamut.limitToGamut(float(L), float(A), float(B), float(alpha), table)

	@staticmethod
	def randomColor(rand: ArrayRandom, alpha=1.0, batch=64, table: GamutTable = None):
		"""int randomColor(ArrayRandom rand) uniform over the displayable Oklab volume"""
		while True:
			lab_list = rand.uniform(OkTools.OKLAB_BOX_MIN, OkTools.OKLAB_BOX_MAX, (batch, 3))
			in_gamut = OkTools.inOklabGamut(lab_list)
			if np.any(in_gamut):
				L, a, b = lab_list[np.argmax(in_gamut)]
				return OkGamut.limitToGamut(
					float(L), float(a) + PackedColor.NEUTRAL_AB, float(b) + PackedColor.NEUTRAL_AB, alpha, table
				)

	@staticmethod
	def randomEdit(packed, seed, variance, table: GamutTable = None):
		"""
			int randomEdit(int packed, int seed, float variance)
			Random nearby color within variance in L, half that in A and B. Same seed, same edit.
			Returns packed as is when no displayable candidate turns up.
		"""
		L, A, B, alpha = PackedColor.channels(packed)
		offsets = ArrayRandom(seed).uniform(-variance, variance, (OkTools.RANDOM_EDIT_TRIES, 3))
		in_ball = np.sum(offsets * offsets, axis=1) <= variance * variance
		lab_list = np.array([L, A - PackedColor.NEUTRAL_AB, B - PackedColor.NEUTRAL_AB]) + offsets * [1.0, 0.5, 0.5]
		valid = in_ball & OkTools.inOklabGamut(lab_list)
		if not np.any(valid):
			return packed
		L, a, b = lab_list[np.argmax(valid)]
		return OkGamut.limitToGamut(
			float(L), float(a) + PackedColor.NEUTRAL_AB, float(b) + PackedColor.NEUTRAL_AB, alpha, table
		)


	### Lightness contrast ###

	@staticmethod
	def inverseLightness(packed, contrast, table: GamutTable = None):
		"""int inverseLightness(int packed, int contrast) light over a dark contrast color, dark over a light one"""
		L, A, B, alpha = PackedColor.channels(packed)
		if PackedColor.decodeL(contrast) < 0.5:
			L = 140.0/255.0 + L * 0.45
		else:
			L = 127.0/255.0 - L * 0.45
		return OkGamut.limitToGamut(L, A, B, alpha, table)

	@staticmethod
	def differentiateLightness(packed, contrast, table: GamutTable = None):
		"""int differentiateLightness(int packed, int contrast) halfway to the lightness opposite contrast's"""
		_, A, B, alpha = PackedColor.channels(packed)
		opposite = (PackedColor.lightnessByte(contrast) + 128) & PackedColor.BYTE_MASK
		l_byte = (opposite + PackedColor.lightnessByte(packed)) >> 1
		return OkGamut.limitToGamut(l_byte / PackedColor.L_SCALE, A, B, alpha, table)

	@staticmethod
	def offsetLightness(packed, table: GamutTable = None):
		return OkTools.differentiateLightness(packed, packed, table)


	### Color lists ###

	@staticmethod
	def inOklabGamut(lab_list, eps = 1e-12, axis=-1):
		"""bool[] inOklabGamut(float[][3] lab_list, float eps = 1e-12)"""
		lin_list = OkLab.oklabToLinear(lab_list)
		return ((lin_list >= -eps) & (lin_list <= 1.0+eps)).all(axis=axis)

	@staticmethod
	def packedToLab(packed_list):
		"""float[][3] packedToLab(int[] packed_list) real Oklab, a/b centered on 0"""
		lab = np.array([PackedColor.channels(p)[:3] for p in packed_list], dtype=float).reshape(-1, 3)
		lab[:, 1:] -= PackedColor.NEUTRAL_AB
		return lab

	@staticmethod
	def isOkSrgbGray(lab_list, threshold = 1.0/255.0):
		"""bool[] isOkSrgbGray(float[][3] lab_list, float threshold = 1.0/255.0)"""
		rgb_list = OkLab.oklabToSrgb(lab_list)
		return (
			(abs(rgb_list[:,0]-rgb_list[:,1]) < threshold) &
			(abs(rgb_list[:,1]-rgb_list[:,2]) < threshold)
		)

	@staticmethod
	def approxOkGap(point_count: int):
		return (OkTools.OKLAB_GAMUT_VOLUME/max(1,point_count))**(1.0/3.0)


	### Misc tools ###

	@staticmethod
	def rgba8888ToHex(rgba):
		"""char* rgba8888ToHex(int 0xRRGGBBAA)"""
		return "#{:08x}".format(int(rgba) & 0xFFFFFFFF)

	@staticmethod
	def canWrite(file):
		"""bool canWrite(char* file) prints the reason when the answer is no"""
		if not file:
			print("Undefined file")
			return False
		base_dir = os.path.dirname(file) or "./"
		if not os.path.isdir(base_dir):
			print("Directory doesn't exist " + base_dir)
			return False
		if os.path.exists(file):
			if not os.access(file, os.W_OK):
				print("Can't access file " + file)
				return False
		elif not os.access(base_dir, os.W_OK):
			print("Can't create file " + file)
			return False
		return True

	@staticmethod
	def canRead(file):
		if not file or not os.path.isfile(file):
			print("File doesn't exist " + str(file))
			return False
		if not os.access(file, os.R_OK):
			print("Can't access file " + file)
			return False
		return True
