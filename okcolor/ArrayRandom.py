import numpy as np
import time

#https://rosettacode.org/wiki/Pseudo-random_numbers/Splitmix64
class ArrayRandom:
	"""
		Splitmix64 vectorized pseudo number generator
		Same seed, same colors. If no seed is given, one is taken from the clock
	"""
	MASK = 2**64-1

	FLOAT_MASK = np.uint64(1023) << np.uint64(52)
	GOLDEN = np.uint64(0x9e3779b97f4a7c15)
	MIX1 = np.uint64(0xbf58476d1ce4e5b9)
	MIX2 = np.uint64(0x94d049bb133111eb)

	def __init__(self, seed = None):
		if seed is None:
			seed = time.perf_counter_ns()
		elif not isinstance(seed, (int, np.integer)) or isinstance(seed, bool):
			raise ValueError("seed must be an integer, got "+type(seed).__name__)
		self.seed = int(seed) & self.MASK #pass to a new instance to replay
		self._state = np.uint64(self.seed)

	def randomInt(self, shape: tuple):
		"""uint64[shape] randomInt(tuple shape)"""
		count = int(np.prod(shape, dtype=np.int64))
		with np.errstate(over='ignore'):
			out = np.arange(1, count+1, dtype=np.uint64) * self.GOLDEN + self._state

			out ^= out >> np.uint64(30)
			out *= self.MIX1
			out ^= out >> np.uint64(27)
			out *= self.MIX2
			out ^= out >> np.uint64(31)

			self._state = self._state + self.GOLDEN * np.uint64(count)
		return out.reshape(shape)

	def random(self, shape: tuple):
		"""float[shape] random(tuple shape) -> [0,1)"""
		bits = (self.randomInt(shape) >> np.uint64(12)) | self.FLOAT_MASK
		return bits.view(np.float64) - 1.0

	def uniform(self, low, high, shape: tuple):
		low = np.asarray(low, dtype=float)
		high = np.asarray(high, dtype=float)
		return low + (high - low) * self.random(shape)
