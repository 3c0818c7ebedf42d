import numpy as np
import pytest

from okcolor import OkGamut, OkGradient, OkLab, PackedColor, makeGradient


BLACK = PackedColor.encode(0.0, 0.5, 0.5)
WHITE = PackedColor.encode(1.0, 0.5, 0.5)

def lightnessBytes(colors):
	return [PackedColor.lightnessByte(c) for c in colors]


class TestInterpolations:
	@pytest.mark.parametrize("name", sorted(OkGradient.INTERPOLATIONS))
	def test_endpoints(self, name):
		ease = OkGradient.interpolation(name)
		assert float(ease(0.0)) == pytest.approx(0.0, abs=1e-12)
		assert float(ease(1.0)) == pytest.approx(1.0, abs=1e-12)

	@pytest.mark.parametrize("name", sorted(OkGradient.INTERPOLATIONS))
	def test_monotonic(self, name):
		t = np.linspace(0.0, 1.0, 101)
		assert np.all(np.diff(OkGradient.interpolation(name)(t)) >= -1e-12)

	def test_shapes(self):
		assert OkGradient.interpolation("pow2In")(0.5) == 0.25
		assert OkGradient.interpolation("pow2Out")(0.5) == 0.75
		assert OkGradient.interpolation("smooth")(0.5) == 0.5
		assert float(OkGradient.interpolation("pow3")(0.25)) == pytest.approx(0.0625)

	def test_unknown_name(self):
		with pytest.raises(ValueError):
			OkGradient.interpolation("bouncy")

	def test_callable_passes_through(self):
		ease = lambda t: t
		assert OkGradient.interpolation(ease) is ease


class TestGradient:
	def test_gray_ramp(self, table):
		assert lightnessBytes(makeGradient(BLACK, WHITE, 5)) == [0, 64, 128, 191, 255]

	def test_eased_ramp(self, table):
		assert lightnessBytes(makeGradient(BLACK, WHITE, 3, "pow2In")) == [0, 64, 255]

	def test_step_counts(self, table):
		assert makeGradient(BLACK, WHITE, 0) == []
		assert makeGradient(BLACK, WHITE, 1) == [BLACK]
		assert makeGradient(BLACK, WHITE, 2) == [BLACK, WHITE]

	def test_append_extends_given_list(self, table):
		colors = [WHITE]
		assert OkGradient.appendGradient(colors, BLACK, WHITE, 3) is colors
		assert len(colors) == 4

	def test_partial_leaves_end_out(self, table):
		colors = OkGradient.appendPartialGradient([], BLACK, WHITE, 4)
		assert lightnessBytes(colors) == [0, 64, 128, 191]

	def test_saturated_gradient_in_gamut(self, table):
		red = OkLab.fromRGBA8888(0xFF0000FF)
		green = OkLab.fromRGBA8888(0x00FF00FF)
		colors = makeGradient(red, green, 9, "smoother")
		assert len(colors) == 9
		assert colors[-1] == green
		assert all(OkGamut.inGamut(c) for c in colors)

	def test_alpha_blends(self, table):
		clear = PackedColor.withAlpha(WHITE, 0.0)
		colors = makeGradient(clear, WHITE, 3)
		assert [PackedColor.alphaByte(c) for c in colors] == [0, 128, 255]


class TestGradientChain:
	def test_through_every_color(self, table):
		colors = OkGradient.appendGradientChain([], 5, [BLACK, WHITE, BLACK])
		assert lightnessBytes(colors) == [0, 128, 255, 128, 0]

	def test_short_inputs(self, table):
		assert OkGradient.appendGradientChain([], 0, [BLACK, WHITE]) == []
		assert OkGradient.appendGradientChain([], 4, []) == []
		assert OkGradient.appendGradientChain([], 1, [WHITE, BLACK]) == [WHITE]
		assert OkGradient.appendGradientChain([], 3, [WHITE]) == [WHITE]
