"""Gradients between packed Oklab colors, every step limited to the gamut"""

import numpy as np

from .PackedColor import PackedColor
from .GamutTable import GamutTable
from .OkGamut import OkGamut


def _powInOut(power):
	#ease in up to the midpoint, mirrored ease out after it
	def ease(t):
		t = np.asarray(t, dtype=float)
		return np.where(
			t <= 0.5,
			(2.0*t)**power * 0.5,
			1.0 - (2.0*(1.0 - t))**power * 0.5
		)
	return ease


class OkGradient:
	#t[0,1] -> eased t[0,1], all take scalars or arrays
	INTERPOLATIONS = {
		"linear": lambda t: t,
		"smooth": lambda t: t*t*(3.0 - 2.0*t),
		"smoother": lambda t: t*t*t*(t*(t*6.0 - 15.0) + 10.0),
		"pow2": _powInOut(2),
		"pow2In": lambda t: t*t,
		"pow2Out": lambda t: 1.0 - (1.0 - t)**2,
		"pow3": _powInOut(3),
		"pow3In": lambda t: t**3,
		"pow3Out": lambda t: 1.0 + (t - 1.0)**3,
		"sine": lambda t: (1.0 - np.cos(np.pi*t)) * 0.5,
		"sineIn": lambda t: 1.0 - np.cos(0.5*np.pi*t),
		"sineOut": lambda t: np.sin(0.5*np.pi*t),
		"circleIn": lambda t: 1.0 - np.sqrt(1.0 - t*t),
		"circleOut": lambda t: np.sqrt(1.0 - (t - 1.0)**2),
	}

	@staticmethod
	def interpolation(name):
		"""function interpolation(char* name) name or callable"""
		if callable(name):
			return name
		if name not in OkGradient.INTERPOLATIONS:
			raise ValueError("Unknown interpolation " + str(name) + ", options: " + ", ".join(OkGradient.INTERPOLATIONS))
		return OkGradient.INTERPOLATIONS[name]

	@staticmethod
	def lerp(start, end, t, table: GamutTable = None):
		"""int lerp(int start, int end, float t) channel-wise Oklab blend, then limited"""
		L, A, B, alpha = [
			s + (e - s) * t for s, e in zip(PackedColor.channels(start), PackedColor.channels(end))
		]
		return OkGamut.limitToGamut(L, A, B, alpha, table)

	@staticmethod
	def appendPartialGradient(colors, start, end, steps, interpolation="linear", table: GamutTable = None):
		"""
			int[] appendPartialGradient(int[] colors, int start, int end, int steps, char* interpolation = "linear")
			Appends steps colors going from start toward end. end itself is left out so gradients chain.
		"""
		if steps <= 0:
			return colors
		if steps == 1:
			colors.append(start)
			return colors
		ease = OkGradient.interpolation(interpolation)
		for t in ease(np.arange(steps) / steps):
			colors.append(OkGradient.lerp(start, end, float(t), table))
		return colors

	@staticmethod
	def appendGradient(colors, start, end, steps, interpolation="linear", table: GamutTable = None):
		"""int[] appendGradient(int[] colors, int start, int end, int steps) start and end both included"""
		if steps <= 0:
			return colors
		if steps == 1:
			colors.append(start)
			return colors
		OkGradient.appendPartialGradient(colors, start, end, steps - 1, interpolation, table)
		colors.append(end)
		return colors

	@staticmethod
	def makeGradient(start, end, steps, interpolation="linear", table: GamutTable = None):
		return OkGradient.appendGradient([], start, end, steps, interpolation, table)

	@staticmethod
	def appendGradientChain(colors, steps, chain, interpolation="linear", table: GamutTable = None):
		"""
			int[] appendGradientChain(int[] colors, int steps, int[] chain, char* interpolation = "linear")
			steps colors through every color of chain in order, eased over the whole run.
		"""
		if steps <= 0 or len(chain) == 0:
			return colors
		if steps == 1 or len(chain) == 1:
			colors.append(chain[0])
			return colors
		ease = OkGradient.interpolation(interpolation)
		splits = len(chain) - 1
		for t in ease(np.arange(steps - 1) / (steps - 1)):
			pos = min(max(float(t) * splits, 0.0), float(splits))
			idx = min(int(pos), splits - 1)
			colors.append(OkGradient.lerp(chain[idx], chain[idx + 1], pos - idx, table))
		colors.append(chain[-1])
		return colors
