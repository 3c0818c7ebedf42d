"""sRGB <-> Oklab conversion, vectorized and packed"""

import math
import numpy as np

from .PackedColor import PackedColor


class OkLab:
	"""
		Forward matrices are the published Oklab constants. Inverses are derived here
		so every consumer, shader source included, reads the same numbers.
	"""

	### Constants ###
	RGB_TO_LMS = np.array([
		[0.4122214708, 0.5363325363, 0.0514459929],
		[0.2119034982, 0.6806995451, 0.1073969566],
		[0.0883024619, 0.2817188376, 0.6299787005],
	])
	LMS_TO_OKLAB = np.array([
		[0.2104542553,  0.7936177850, -0.0040720468],
		[1.9779984951, -2.4285922050,  0.4505937099],
		[0.0259040371,  0.7827717662, -0.8086757660],
	])
	LMS_TO_RGB = np.linalg.inv(RGB_TO_LMS)
	OKLAB_TO_LMS = np.linalg.inv(LMS_TO_OKLAB)

	#python float copies for the per-color path
	_M_RGB_LMS = tuple(map(tuple, RGB_TO_LMS.tolist()))
	_M_LMS_LAB = tuple(map(tuple, LMS_TO_OKLAB.tolist()))
	_M_LMS_RGB = tuple(map(tuple, LMS_TO_RGB.tolist()))
	_M_LAB_LMS = tuple(map(tuple, OKLAB_TO_LMS.tolist()))

	SRGB_CUTOFF = 0.04045
	LINEAR_CUTOFF = 0.0031308


	### Transfer functions (precise) ###

	@staticmethod
	def srgbToLinear(srgb: np.ndarray):
		"""float[...,3] srgbToLinear(float[...,3] srgb)"""
		srgb = np.asarray(srgb, dtype=float)
		cutoff = srgb <= OkLab.SRGB_CUTOFF
		higher = ((np.maximum(srgb, 0.0) + 0.055) / 1.055) ** 2.4
		lower = srgb / 12.92
		return np.where(cutoff, lower, higher)

	@staticmethod
	def linearToSrgb(lin: np.ndarray):
		"""float[...,3] linearToSrgb(float[...,3] lin)"""
		lin = np.maximum(np.asarray(lin, dtype=float), 0.0)
		cutoff = lin <= OkLab.LINEAR_CUTOFF
		higher = 1.055 * np.power(lin, 1/2.4) - 0.055
		lower = lin * 12.92
		return np.where(cutoff, lower, higher)

	#Square and sqrt stand-ins for the transfer curve. Shader use only
	@staticmethod
	def approxSrgbToLinear(srgb: np.ndarray):
		srgb = np.asarray(srgb, dtype=float)
		return srgb * srgb

	@staticmethod
	def approxLinearToSrgb(lin: np.ndarray):
		return np.sqrt(np.maximum(np.asarray(lin, dtype=float), 0.0))


	### Vectorized conversion ###

	@staticmethod
	def linearToOklab(lin: np.ndarray):
		"""float[...,3] linearToOklab(float[...,3] lin)"""
		lms = np.asarray(lin, dtype=float) @ OkLab.RGB_TO_LMS.T
		lms_ = np.cbrt(lms)
		return lms_ @ OkLab.LMS_TO_OKLAB.T

	@staticmethod
	def oklabToLinear(lab: np.ndarray):
		"""float[...,3] oklabToLinear(float[...,3] lab)"""
		lms_ = np.asarray(lab, dtype=float) @ OkLab.OKLAB_TO_LMS.T
		lms = lms_ ** 3
		return lms @ OkLab.LMS_TO_RGB.T

	@staticmethod
	def srgbToOklab(srgb: np.ndarray):
		return OkLab.linearToOklab(OkLab.srgbToLinear(srgb))

	@staticmethod
	def oklabToSrgb(lab: np.ndarray):
		return OkLab.linearToSrgb(OkLab.oklabToLinear(lab))


	### Per-color conversion ###

	@staticmethod
	def _scalarToLinear(c):
		if c <= OkLab.SRGB_CUTOFF:
			return c / 12.92
		return ((c + 0.055) / 1.055) ** 2.4

	@staticmethod
	def _scalarToSrgb(c):
		if c <= OkLab.LINEAR_CUTOFF:
			return c * 12.92
		return 1.055 * c ** (1/2.4) - 0.055

	@staticmethod
	def _cbrt(x):
		return math.copysign(abs(x) ** (1.0/3.0), x)

	@staticmethod
	def _mul(m, x, y, z):
		return (
			m[0][0]*x + m[0][1]*y + m[0][2]*z,
			m[1][0]*x + m[1][1]*y + m[1][2]*z,
			m[2][0]*x + m[2][1]*y + m[2][2]*z,
		)

	@staticmethod
	def linearToLab(r, g, b):
		"""(float L, float a, float b) linearToLab(float r, float g, float b)"""
		l, m, s = OkLab._mul(OkLab._M_RGB_LMS, r, g, b)
		return OkLab._mul(OkLab._M_LMS_LAB, OkLab._cbrt(l), OkLab._cbrt(m), OkLab._cbrt(s))

	@staticmethod
	def labToLinear(L, a, b):
		"""(float r, float g, float b) labToLinear(float L, float a, float b)"""
		l_, m_, s_ = OkLab._mul(OkLab._M_LAB_LMS, L, a, b)
		return OkLab._mul(OkLab._M_LMS_RGB, l_*l_*l_, m_*m_*m_, s_*s_*s_)

	@staticmethod
	def fromRGBA(r, g, b, alpha=1.0):
		"""int fromRGBA(float r, float g, float b, float alpha = 1.0) r,g,b are gamma encoded [0,1]"""
		r = min(max(r, 0.0), 1.0)
		g = min(max(g, 0.0), 1.0)
		b = min(max(b, 0.0), 1.0)
		lab = OkLab.linearToLab(OkLab._scalarToLinear(r), OkLab._scalarToLinear(g), OkLab._scalarToLinear(b))
		return PackedColor.encode(
			lab[0],
			lab[1] + PackedColor.NEUTRAL_AB,
			lab[2] + PackedColor.NEUTRAL_AB,
			alpha
		)

	@staticmethod
	def toLinear(packed):
		"""Unclamped linear RGB of a packed color"""
		L, A, B, _ = PackedColor.channels(packed)
		return OkLab.labToLinear(L, A - PackedColor.NEUTRAL_AB, B - PackedColor.NEUTRAL_AB)

	@staticmethod
	def toRGBA(packed):
		"""(float r, float g, float b, float alpha) toRGBA(int packed) gamma encoded, clamped per channel"""
		lin = OkLab.toLinear(packed)
		r, g, b = (min(max(OkLab._scalarToSrgb(min(max(c, 0.0), 1.0)), 0.0), 1.0) for c in lin)
		return r, g, b, PackedColor.decodeAlpha(packed)


	### RGBA8888 bridge ###

	@staticmethod
	def fromRGBA8888(rgba):
		"""int fromRGBA8888(int 0xRRGGBBAA)"""
		return OkLab.fromRGBA(
			((rgba >> 24) & 0xFF) / 255.0,
			((rgba >> 16) & 0xFF) / 255.0,
			((rgba >> 8) & 0xFF) / 255.0,
			(rgba & 0xFF) / 255.0,
		)

	@staticmethod
	def toRGBA8888(packed):
		"""int 0xRRGGBBAA toRGBA8888(int packed)"""
		r, g, b, _ = OkLab.toRGBA(packed)
		return (
			int(round(r * 255.0)) << 24 |
			int(round(g * 255.0)) << 16 |
			int(round(b * 255.0)) << 8 |
			PackedColor.alphaByte(packed)
		)

	@staticmethod
	def rgba8888ToArray(rgba_list):
		"""uint8[n][4] rgba8888ToArray(int[] rgba_list)"""
		rgba = np.asarray(rgba_list, dtype=np.uint32).reshape(-1)
		shifts = np.array([24, 16, 8, 0], dtype=np.uint32)
		return ((rgba[:, None] >> shifts) & 0xFF).astype(np.uint8)
