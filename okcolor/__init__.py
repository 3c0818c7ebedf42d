"""
okcolor api
"""
#engine
from .PackedColor import PackedColor
from .OkLab import OkLab
from .GamutTable import GamutTable
from .OkGamut import OkGamut
from .OkTools import OkTools
from .OkGradient import OkGradient
from .ArrayRandom import ArrayRandom

#consumers
from .OkShader import OkShader
from .ColorDescription import ColorDescription
from .PaletteAccumulator import PaletteAccumulator
from .PalettePreset import PalettePreset
from .PaletteGen import PaletteGen

#packed color operations
encode = PackedColor.encode
decodeL = PackedColor.decodeL
decodeA = PackedColor.decodeA
decodeB = PackedColor.decodeB
decodeAlpha = PackedColor.decodeAlpha
fromRGBA8888 = OkLab.fromRGBA8888
toRGBA8888 = OkLab.toRGBA8888
limitToGamut = OkGamut.limitToGamut
maximizeSaturation = OkGamut.maximizeSaturation
makeGradient = OkGradient.makeGradient
parseDescription = ColorDescription.parseDescription

__all__ = [
	"ArrayRandom",
	"ColorDescription",
	"GamutTable",
	"OkGamut",
	"OkGradient",
	"OkLab",
	"OkShader",
	"OkTools",
	"PackedColor",
	"PaletteAccumulator",
	"PaletteGen",
	"PalettePreset",
	"decodeA",
	"decodeAlpha",
	"decodeB",
	"decodeL",
	"encode",
	"fromRGBA8888",
	"limitToGamut",
	"makeGradient",
	"maximizeSaturation",
	"parseDescription",
	"toRGBA8888",
]
