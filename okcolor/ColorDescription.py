"""Color descriptions like "lighter dull mint teal" resolved to packed Oklab colors"""

import re

from .OkLab import OkLab
from .GamutTable import GamutTable
from .OkGamut import OkGamut
from .OkTools import OkTools


class ColorDescription:
	#base colors as 0xRRGGBBAA
	RGBA8888 = {
		"transparent": 0x00000000,
		"black": 0x000000FF,
		"gray": 0x808080FF,
		"silver": 0xB6B6B6FF,
		"white": 0xFFFFFFFF,
		"red": 0xFF0000FF,
		"orange": 0xFF7F00FF,
		"yellow": 0xFFFF00FF,
		"green": 0x00FF00FF,
		"blue": 0x0000FFFF,
		"indigo": 0x520FE0FF,
		"violet": 0x9040EFFF,
		"purple": 0xC000FFFF,
		"brown": 0x8F573BFF,
		"pink": 0xFFA0E0FF,
		"magenta": 0xF500F5FF,
		"brick": 0xD5524AFF,
		"ember": 0xF55A32FF,
		"salmon": 0xFF6262FF,
		"chocolate": 0x683818FF,
		"tan": 0xD2B48CFF,
		"bronze": 0xCE8E31FF,
		"cinnamon": 0xD2691DFF,
		"apricot": 0xFFA828FF,
		"peach": 0xFFBF81FF,
		"pear": 0xD3E330FF,
		"saffron": 0xFFD510FF,
		"butter": 0xFFF288FF,
		"chartreuse": 0xC8FF41FF,
		"cactus": 0x30A000FF,
		"lime": 0x93D300FF,
		"olive": 0x818000FF,
		"fern": 0x4E7942FF,
		"moss": 0x204608FF,
		"celery": 0x7DFF73FF,
		"sage": 0xABE3C5FF,
		"jade": 0x3FBF3FFF,
		"cyan": 0x00FFFFFF,
		"mint": 0x7FFFD4FF,
		"teal": 0x007F7FFF,
		"turquoise": 0x2ED6C9FF,
		"sky": 0x10C0E0FF,
		"cobalt": 0x0046ABFF,
		"denim": 0x3088B8FF,
		"navy": 0x000080FF,
		"lavender": 0xB991FFFF,
		"plum": 0xBE0DC6FF,
		"mauve": 0xAB73ABFF,
		"rose": 0xE61E78FF,
		"raspberry": 0x911437FF,
	}
	ALIASES = {
		"grey": "gray",
		"gold": "saffron",
		"puce": "mauve",
		"sand": "tan",
		"skin": "peach",
		"coral": "salmon",
		"azure": "sky",
		"ocean": "teal",
		"sapphire": "cobalt",
	}
	NAMED = {name: OkLab.fromRGBA8888(rgba) for name, rgba in RGBA8888.items()}

	#adjective -> (lightness sign, saturation sign)
	ADJECTIVES = {
		"light": (1, 0),
		"dark": (-1, 0),
		"rich": (0, 1),
		"dull": (0, -1),
		"bright": (1, 1),
		"pale": (1, -1),
		"deep": (-1, 1),
		"weak": (-1, -1),
	}
	SUFFIX_LEVEL = {"": 1, "er": 2, "r": 2, "est": 3, "st": 3, "most": 4}
	LIGHTNESS_STEP = 0.15
	SATURATION_STEPS = (0.1, 0.15, 0.2, 0.25) #added up to the level

	_SPLIT = re.compile(r"[^a-zA-Z]+")

	@staticmethod
	def lookup(name):
		"""int|None lookup(char* name)"""
		name = name.lower()
		name = ColorDescription.ALIASES.get(name, name)
		return ColorDescription.NAMED.get(name)

	@staticmethod
	def _adjective(term):
		"""(int level, int l_sign, int s_sign) or None"""
		for base, (l_sign, s_sign) in ColorDescription.ADJECTIVES.items():
			if term.startswith(base):
				level = ColorDescription.SUFFIX_LEVEL.get(term[len(base):])
				if level is not None:
					return level, l_sign, s_sign
		return None

	@staticmethod
	def parseDescription(description, table: GamutTable = None):
		"""
			int parseDescription(char* description, GamutTable table = None)
			Color names are mixed in Oklab, repeats weigh more. Adjectives light, dark, rich, dull,
			bright, pale, deep, weak take -er, -est, -most for a stronger effect.
		"""
		lightness = 0.0
		saturation = 0.0
		mixing = []
		for term in ColorDescription._SPLIT.split(description.lower()):
			if not term:
				continue
			color = ColorDescription.lookup(term)
			if color is not None:
				mixing.append(color)
				continue
			adjective = ColorDescription._adjective(term)
			if adjective is None:
				print("Unknown color word " + term)
				continue
			level, l_sign, s_sign = adjective
			lightness += l_sign * ColorDescription.LIGHTNESS_STEP * level
			saturation += s_sign * sum(ColorDescription.SATURATION_STEPS[:level])

		if not mixing:
			raise ValueError("No color name in description '" + description + "'")

		result = OkTools.mix(mixing, table=table)
		if lightness > 0:
			result = OkTools.lighten(result, min(lightness, 1.0), table)
		elif lightness < 0:
			result = OkTools.darken(result, min(-lightness, 1.0), table)

		if saturation > 0:
			result = OkTools.enrich(result, saturation, table)
		elif saturation < 0:
			result = OkTools.dullen(result, min(-saturation, 1.0), table)
		return OkGamut.limitPacked(result, table)
