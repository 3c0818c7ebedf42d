import math

from .PackedColor import PackedColor
from .GamutTable import GamutTable
from .OkGamut import OkGamut
from .OkTools import OkTools
from .ArrayRandom import ArrayRandom
from .ColorDescription import ColorDescription
from .PaletteAccumulator import PaletteAccumulator
from .PalettePreset import PalettePreset


### Palette generator ###

class PaletteGen:

	@staticmethod
	def grayscale(gray_count: int):
		"""int[] grayscale(int gray_count) packed grays, black to white"""
		if gray_count <= 0:
			return []
		if gray_count == 1:
			return [PackedColor.encode(0.5, 0.5, 0.5)]
		return [
			PackedColor.encode(i / (gray_count - 1), PackedColor.NEUTRAL_AB, PackedColor.NEUTRAL_AB)
			for i in range(gray_count)
		]

	@staticmethod
	def hueRamp(hue, preset: PalettePreset, table: GamutTable = None):
		"""int[] hueRamp(float hue, PalettePreset preset, GamutTable table = None) lightness steps of one hue"""
		steps = preset.lightness_steps
		ramp = []
		for i in range(steps):
			t = 0.5 if steps == 1 else i / (steps - 1)
			L = preset.min_lum + (preset.max_lum - preset.min_lum) * t
			if preset.chroma_mode == "max":
				#small chroma only carries the hue
				ramp.append(OkGamut.maximizeSaturation(
					L,
					PackedColor.NEUTRAL_AB + 0.01 * math.cos(2.0*math.pi*hue),
					PackedColor.NEUTRAL_AB + 0.01 * math.sin(2.0*math.pi*hue),
					table=table,
				))
			else:
				ramp.append(OkTools.oklabByHSL(hue, preset.saturation, L, table=table))
		return ramp

	@staticmethod
	def _populate(palette: PaletteAccumulator, preset: PalettePreset, table: GamutTable = None):
		gen_rand = ArrayRandom(preset.seed)
		if preset.logging:
			print("Using seed ", gen_rand.seed)

		if preset.reserve_transparent:
			palette.add(PaletteAccumulator.TRANSPARENT)

		for description in preset.base_colors:
			try:
				palette.addPacked(ColorDescription.parseDescription(description, table))
			except ValueError as e:
				print("Skipping base color: " + str(e))

		for packed in PaletteGen.grayscale(preset.gray_count):
			palette.addPacked(packed)

		for h in range(preset.hue_count):
			for packed in PaletteGen.hueRamp(h / preset.hue_count, preset, table):
				palette.addPacked(packed)

		for _ in range(preset.random_count):
			palette.addPacked(OkTools.randomColor(gen_rand, table=table))

		return palette

	@staticmethod
	def usePreset(preset: PalettePreset):
		"""PaletteAccumulator usePreset(PalettePreset preset) generate, sort and save"""
		if not preset.valid:
			print("Invalid preset, nothing generated")
			return None

		#a preset table serves this run only, the shared one is never replaced
		table = None
		if preset.gamut_table is not None:
			table = GamutTable.load(preset.gamut_table)

		palette = PaletteAccumulator(preset.palette_output)
		palette = PaletteGen._populate(palette, preset, table)
		palette.sortByHue(max(1, preset.hue_count))
		palette.saveImage(preset.palette_output)

		if preset.logging:
			palette.printGapStats(precision=4)
			palette.report()
			print("Generated " + str(len(palette)) + " colors to " + preset.palette_output)
		return palette
