"""Max in-gamut chroma per (lightness, hue) cell"""

import threading
import numpy as np
from numba import njit

from .OkLab import OkLab


@njit(fastmath=True)
def GamutTable_njitInGamut(L, a, b, lab_to_lms, lms_to_rgb):
	l_ = L + lab_to_lms[0, 1]*a + lab_to_lms[0, 2]*b
	m_ = L + lab_to_lms[1, 1]*a + lab_to_lms[1, 2]*b
	s_ = L + lab_to_lms[2, 1]*a + lab_to_lms[2, 2]*b
	l = l_*l_*l_
	m = m_*m_*m_
	s = s_*s_*s_
	for i in range(3):
		c = lms_to_rgb[i, 0]*l + lms_to_rgb[i, 1]*m + lms_to_rgb[i, 2]*s
		if c < 0.0 or c > 1.0:
			return False
	return True

@njit(fastmath=True)
def GamutTable_njitMaxChroma(L, hue, lab_to_lms, lms_to_rgb, iterations):
	cos_h = np.cos(2.0*np.pi*hue)
	sin_h = np.sin(2.0*np.pi*hue)
	lo = 0.0
	hi = 0.5 #beyond any sRGB chroma
	for _ in range(iterations):
		mid = 0.5*(lo + hi)
		if GamutTable_njitInGamut(L, cos_h*mid, sin_h*mid, lab_to_lms, lms_to_rgb):
			lo = mid
		else:
			hi = mid
	return lo

@njit(fastmath=True)
def GamutTable_njitBuild(data, lab_to_lms, lms_to_rgb, l_scale, chroma_scale, hue_samples, iterations):
	l_steps = data.shape[0]
	h_steps = data.shape[1]
	for j in range(1, l_steps - 1):
		#every packed color in row j decodes to exactly this lightness
		L = j / l_scale
		for i in range(h_steps):
			best = 1.0
			for hs in range(hue_samples):
				hue = (i + hs / (hue_samples - 1)) / h_steps
				c = GamutTable_njitMaxChroma(L, hue, lab_to_lms, lms_to_rgb, iterations)
				if c < best:
					best = c
			data[j, i] = min(255, int(best * chroma_scale + 0.5))
	#black and white rows stay 0
	return data


class GamutTable:
	L_STEPS = 256
	H_STEPS = 256
	L_INDEX_SCALE = 255.999
	L_BYTE_SCALE = 255.0
	CHROMA_SCALE = 256.0
	BUILD_HUE_SAMPLES = 3 #both cell edges and the center
	BUILD_ITERATIONS = 40

	_shared = None
	_lock = threading.Lock()

	def __init__(self, data: np.ndarray):
		data = np.asarray(data)
		if data.shape != (self.L_STEPS, self.H_STEPS) or data.dtype != np.uint8:
			raise ValueError(
				"Gamut table must be uint8 "+str((self.L_STEPS, self.H_STEPS))+
				", got "+str(data.dtype)+" "+str(data.shape)
			)
		self.data = data.copy()
		self.data.setflags(write=False)
		#python ints, per-color lookups stay out of numpy
		self._rows = self.data.tolist()

	@staticmethod
	def _unimodal(data):
		"""uint8[L][H] _unimodal(uint8[L][H] data) each hue column falls off on both sides of its peak"""
		for i in range(data.shape[1]):
			column = data[:, i]
			peak = int(np.argmax(column))
			column[:peak+1] = np.minimum.accumulate(column[:peak+1][::-1])[::-1]
			column[peak:] = np.minimum.accumulate(column[peak:])
		return data

	@staticmethod
	def build():
		"""GamutTable build() ~1s incl. jit"""
		data = np.zeros((GamutTable.L_STEPS, GamutTable.H_STEPS), dtype=np.uint8)
		GamutTable_njitBuild(
			data,
			np.ascontiguousarray(OkLab.OKLAB_TO_LMS),
			np.ascontiguousarray(OkLab.LMS_TO_RGB),
			GamutTable.L_BYTE_SCALE,
			GamutTable.CHROMA_SCALE,
			GamutTable.BUILD_HUE_SAMPLES,
			GamutTable.BUILD_ITERATIONS,
		)
		return GamutTable(GamutTable._unimodal(data))

	@staticmethod
	def load(path):
		data = np.load(path, allow_pickle=False)
		return GamutTable(data)

	def save(self, path):
		np.save(path, self.data)

	@staticmethod
	def shared():
		"""Process table, built on first use and never replaced"""
		if GamutTable._shared is None:
			with GamutTable._lock:
				if GamutTable._shared is None:
					GamutTable._shared = GamutTable.build()
		return GamutTable._shared


	### Lookup ###

	@staticmethod
	def lightnessIndex(L):
		L = 0.0 if L < 0.0 else (1.0 if L > 1.0 else L)
		return int(L * GamutTable.L_INDEX_SCALE)

	@staticmethod
	def hueIndex(hue):
		return int(hue * GamutTable.H_STEPS) % GamutTable.H_STEPS

	def getBoundaryChroma(self, lightness_index, hue_index):
		"""float getBoundaryChroma(int lightness_index, int hue_index)"""
		return self._rows[lightness_index][hue_index] / self.CHROMA_SCALE

	def chromaLimit(self, hue, lightness):
		"""float chromaLimit(float hue[0,1), float lightness)"""
		return self.getBoundaryChroma(GamutTable.lightnessIndex(lightness), GamutTable.hueIndex(hue))
