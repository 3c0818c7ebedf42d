import numpy as np
import pytest

from okcolor import ArrayRandom


class TestArrayRandom:
	def test_splitmix64_reference(self):
		#https://rosettacode.org/wiki/Pseudo-random_numbers/Splitmix64
		rand = ArrayRandom(1234567)
		expected = [
			6457827717110365317,
			3203168211198807973,
			9817491932198370423,
			4593380528125082431,
			16408922859458223821,
		]
		assert rand.randomInt((5,)).tolist() == expected

	def test_stream_continues(self):
		whole = ArrayRandom(99).randomInt((5,))
		rand = ArrayRandom(99)
		parts = np.concatenate([rand.randomInt((2,)), rand.randomInt((3,))])
		np.testing.assert_array_equal(parts, whole)

	def test_random_range(self):
		values = ArrayRandom(3).random((1000,))
		assert values.min() >= 0.0
		assert values.max() < 1.0
		assert 0.4 < values.mean() < 0.6

	def test_uniform_bounds(self):
		values = ArrayRandom(5).uniform([0.0, -1.0], [1.0, 1.0], (200, 2))
		assert values.shape == (200, 2)
		assert values[:, 1].min() >= -1.0
		assert values[:, 1].max() < 1.0

	def test_unseeded_keeps_seed(self):
		rand = ArrayRandom()
		replay = ArrayRandom(rand.seed)
		np.testing.assert_array_equal(rand.randomInt((4,)), replay.randomInt((4,)))

	@pytest.mark.parametrize("seed", ["7", 1.5, True])
	def test_bad_seed(self, seed):
		with pytest.raises(ValueError):
			ArrayRandom(seed)
