#PalettePreset.py
from dataclasses import dataclass, field

from .OkTools import OkTools

### Palette generator ###
@dataclass
class PalettePreset:
	"""Preset for PaletteGen"""
	VALID_CHROMA_MODES: list[str] = field(default_factory=lambda: ["max", "limit"])
	DEFAULT_CHROMA_MODE: str = "max"

	#File i/o
	palette_output: str = "palette.png" # (mandatory) full output file path
	gamut_table: str = None # (optional) .npy gamut table, computed when unset
	base_colors: list[str] = field(default_factory=list) # (optional) color descriptions added first, "light dull teal"

	reserve_transparent: int = 1

	gray_count: int = 8			#Grayscale colors incl. black and white
	hue_count:  int = 12			#Hue ramps, also the sort bucket count
	lightness_steps: int = 5	#Colors per hue ramp
	min_lum: float = 0.2
	max_lum: float = 0.9

	#"max" pushes every ramp color to the gamut edge, "limit" uses saturation of the edge
	chroma_mode: str = "max"
	saturation: float = 0.75

	random_count: int = 0		#extra random in-gamut colors
	seed: int = None 				#None = random seed

	logging: bool = False #Disables stats and some printing

	valid: bool = False

	def __post_init__(self):

		#var sanity checks
		self.reserve_transparent = max(0, min(1, self.reserve_transparent) )
		self.gray_count = max(0, self.gray_count)
		self.hue_count = max(0, self.hue_count)
		self.lightness_steps = max(1, self.lightness_steps)
		self.random_count = max(0, self.random_count)
		self.saturation = max(0.0, min(1.0, self.saturation))

		self.min_lum = max(0.0, min(1.0, self.min_lum))
		self.max_lum = max(0.0, min(1.0, self.max_lum))
		if self.min_lum > self.max_lum:
			print("min_lum > max_lum, swapping")
			self.min_lum, self.max_lum = self.max_lum, self.min_lum

		mode = str(self.chroma_mode).lower()
		if mode not in self.VALID_CHROMA_MODES:
			print("invalid chroma_mode ", mode, ". Defaulting to ", self.DEFAULT_CHROMA_MODE)
			mode = self.DEFAULT_CHROMA_MODE
		self.chroma_mode = mode

		#file validity check
		self.valid = OkTools.canWrite(self.palette_output)
		if self.gamut_table is not None and not OkTools.canRead(self.gamut_table):
			self.valid = False
