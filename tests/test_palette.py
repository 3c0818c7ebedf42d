import numpy as np
from PIL import Image

import palette_generator
from okcolor import (
	GamutTable,
	OkGamut,
	OkLab,
	OkTools,
	PackedColor,
	PaletteAccumulator,
	PaletteGen,
	PalettePreset,
)


class TestAccumulator:
	def test_duplicate_reported_not_fatal(self, capsys):
		palette = PaletteAccumulator("test")
		assert palette.add(0xFF0000FF)
		assert not palette.add(0xFF0000FF)
		assert len(palette) == 1
		assert palette.duplicates == [0xFF0000FF]
		assert "duplicate" in capsys.readouterr().out
		assert palette.add(0x00FF00FF)
		assert palette.toList() == [0xFF0000FF, 0x00FF00FF]

	def test_transparent_collapses(self):
		palette = PaletteAccumulator()
		assert palette.add(0x12345600)
		assert not palette.add(0xFFFFFF7F)
		assert palette.add(0x00000080)
		assert palette.toList() == [0x00000000, 0x00000080]
		assert 0xABCDEF10 in palette

	def test_instances_are_independent(self):
		first = PaletteAccumulator()
		second = PaletteAccumulator()
		first.add(0x336699FF)
		assert second.add(0x336699FF)
		assert len(first.duplicates) == 0 and len(second.duplicates) == 0

	def test_add_packed(self):
		palette = PaletteAccumulator()
		palette.addPacked(OkLab.fromRGBA8888(0xFFFFFFFF))
		assert palette.toList() == [0xFFFFFFFF]

	def test_extend_counts_new(self):
		palette = PaletteAccumulator()
		assert palette.extend([0x111111FF, 0x222222FF, 0x111111FF]) == 2

	def test_sort_by_hue(self):
		palette = PaletteAccumulator()
		palette.extend([0xFFFFFFFF, 0x0000FFFF, 0x808080FF, 0xFF0000FF, 0x00000000, 0x000000FF])
		palette.sortByHue(12)
		assert palette.toList() == [0x00000000, 0x000000FF, 0x808080FF, 0xFFFFFFFF, 0xFF0000FF, 0x0000FFFF]

	def test_save_and_load(self, tmp_path):
		path = str(tmp_path / "pal.png")
		palette = PaletteAccumulator()
		palette.extend([0x00000000, 0xFF0000FF, 0x336699FF])
		palette.saveImage(path)

		img = Image.open(path)
		assert img.size == (3, 1)
		assert img.mode == "RGBA"
		assert np.asarray(img)[0].tolist() == [[0, 0, 0, 0], [255, 0, 0, 255], [0x33, 0x66, 0x99, 255]]
		assert PaletteAccumulator.load(path).toList() == palette.toList()

	def test_empty_save(self, tmp_path, capsys):
		assert PaletteAccumulator("empty").saveImage(str(tmp_path / "x.png")) is None
		assert "empty" in capsys.readouterr().out

	def test_gap_stats(self, capsys):
		palette = PaletteAccumulator()
		palette.extend([0x000000FF, 0x808080FF, 0xFFFFFFFF, 0xFF0000FF, 0xFF1000FF, 0x0000FFFF])
		palette.printGapStats()
		out = capsys.readouterr().out
		assert "Grayscale Closest pairs" in out
		assert "Chroma Closest pairs" in out
		assert "#ff0000ff" in out


class TestPreset:
	def test_sanitized(self, tmp_path, capsys):
		preset = PalettePreset(
			palette_output=str(tmp_path / "p.png"),
			min_lum=0.9, max_lum=0.1,
			chroma_mode="loud",
			saturation=3.0,
			lightness_steps=0,
		)
		assert (preset.min_lum, preset.max_lum) == (0.1, 0.9)
		assert preset.chroma_mode == "max"
		assert preset.saturation == 1.0
		assert preset.lightness_steps == 1
		assert preset.valid
		assert "invalid chroma_mode" in capsys.readouterr().out

	def test_invalid_output(self, tmp_path):
		preset = PalettePreset(palette_output=str(tmp_path / "nope" / "p.png"))
		assert not preset.valid
		assert PaletteGen.usePreset(preset) is None

	def test_missing_table(self, tmp_path):
		preset = PalettePreset(palette_output=str(tmp_path / "p.png"), gamut_table=str(tmp_path / "t.npy"))
		assert not preset.valid


class TestPaletteGen:
	def test_grayscale(self):
		grays = PaletteGen.grayscale(5)
		assert [PackedColor.lightnessByte(g) for g in grays] == [0, 64, 128, 191, 255]
		assert all(PackedColor.aByte(g) == 128 and PackedColor.bByte(g) == 128 for g in grays)
		assert PaletteGen.grayscale(0) == []

	def test_max_ramp_at_edge(self, table, tmp_path):
		preset = PalettePreset(palette_output=str(tmp_path / "p.png"), lightness_steps=4, min_lum=0.4, max_lum=0.7)
		for packed in PaletteGen.hueRamp(0.6, preset):
			assert OkGamut.limitPacked(packed) == packed
			assert OkTools.saturation(packed) > 0.7

	def test_limit_ramp_saturation(self, table, tmp_path):
		preset = PalettePreset(palette_output=str(tmp_path / "p.png"), chroma_mode="limit", saturation=0.5)
		for packed in PaletteGen.hueRamp(0.1, preset):
			assert 0.35 < OkTools.saturation(packed) < 0.65

	def test_use_preset(self, table, tmp_path):
		path = str(tmp_path / "pal.png")
		preset = PalettePreset(
			palette_output=path,
			base_colors=["light teal", "nothing here"],
			gray_count=4,
			hue_count=6,
			lightness_steps=3,
			random_count=3,
			seed=11,
		)
		palette = PaletteGen.usePreset(preset)
		colors = palette.toList()

		assert colors[0] == 0x00000000
		assert len(colors) == len(set(colors))
		assert len(colors) <= 1 + 1 + 4 + 6*3 + 3
		assert 0x000000FF in colors and 0xFFFFFFFF in colors
		assert Image.open(path).size == (len(colors), 1)

	def test_preset_table_leaves_shared_alone(self, table, tmp_path):
		table_path = str(tmp_path / "flat.npy")
		GamutTable(np.zeros((256, 256), dtype=np.uint8)).save(table_path)
		preset = PalettePreset(
			palette_output=str(tmp_path / "flat.png"),
			gamut_table=table_path,
			gray_count=0,
			hue_count=4,
			lightness_steps=3,
			random_count=0,
		)
		colors = PaletteGen.usePreset(preset).toList()

		assert GamutTable.shared() is table
		assert table.data.max() > 0
		#a table with no chroma anywhere only allows grays
		for rgba in colors:
			if rgba & 0xFF:
				assert (rgba >> 24) & 0xFF == (rgba >> 16) & 0xFF == (rgba >> 8) & 0xFF, hex(rgba)

	def test_seed_reproducible(self, table, tmp_path):
		def run(name):
			preset = PalettePreset(palette_output=str(tmp_path / name), gray_count=2, hue_count=0, random_count=5, seed=3)
			return PaletteGen.usePreset(preset).toList()
		assert run("a.png") == run("b.png")


class TestCli:
	def test_parser_builds_preset(self, tmp_path):
		out = str(tmp_path / "cli.png")
		preset = palette_generator.parser([
			"palette_generator.py",
			"-o", out,
			"-H", "4",
			"-l", "2",
			"-b", "dark red",
			"-b", "pale sky",
			"--chroma", "limit",
			"--seed", "5",
			"-T", "false",
		])
		assert preset.palette_output == out
		assert preset.hue_count == 4
		assert preset.lightness_steps == 2
		assert preset.base_colors == ["dark red", "pale sky"]
		assert preset.chroma_mode == "limit"
		assert preset.seed == 5
		assert preset.reserve_transparent == 0
		assert preset.valid
