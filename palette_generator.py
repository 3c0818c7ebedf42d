#CC0 Kaelygon 2025
"""
Generate a palette of gamut-safe Oklab hue ramps and grays
"""

import sys
import argparse

from okcolor import PalettePreset, PaletteGen


def _strToBool(s):
	return True if str(s).lower() in ["true", "1"] else False

def parser(argv):
	parser = argparse.ArgumentParser(prog=argv[0], description="Generate a palette of gamut-safe Oklab colors")

	parser.add_argument(
		'-o', '--output', type=str,
		default="./palette.png",
		help="Output .png path"
	)
	parser.add_argument(
		'-t', '--gamut-table', type=str,
		default=None,
		help="Precomputed gamut table .npy, see tools/generate_gamut_table.py"
	)
	parser.add_argument(
		'-b', '--base', type=str, action='append',
		default=None,
		help="Color description added first, e.g. \"light dull teal\". Repeatable"
	)
	parser.add_argument(
		'-g', '--gray-count', type=int,
		default=8,
		help="Grayscale colors incl. black and white"
	)
	parser.add_argument(
		'-H', '--hue-count', type=int,
		default=12,
		help="Number of hue ramps"
	)
	parser.add_argument(
		'-l', '--lightness-steps', type=int,
		default=5,
		help="Colors per hue ramp"
	)
	parser.add_argument(
		'--min-lum', type=float,
		default=0.2,
	)
	parser.add_argument(
		'--max-lum', type=float,
		default=0.9,
	)
	parser.add_argument(
		'-c', '--chroma', type=str,
		default="max",
		help="Options: max, limit"
	)
	parser.add_argument(
		'-s', '--saturation', type=float,
		default=0.75,
		help="Saturation relative to gamut edge for --chroma limit"
	)
	parser.add_argument(
		'-r', '--random-count', type=int,
		default=0,
		help="Extra random in-gamut colors"
	)
	parser.add_argument(
		'--seed', type=int,
		default=None,
	)
	parser.add_argument(
		'-T', '--transparent', type=str,
		default="True",
		help="Reserve first color for transparency"
	)
	parser.add_argument(
		'-S', '--stats', type=str,
		default="False",
		dest='logging',
		help="Print gap stats"
	)

	arg_list = parser.parse_args(argv[1:])

	return PalettePreset(
		palette_output		= arg_list.output,
		gamut_table			= arg_list.gamut_table,
		base_colors			= arg_list.base or [],
		reserve_transparent	= int(_strToBool(arg_list.transparent)),
		gray_count			= arg_list.gray_count,
		hue_count			= arg_list.hue_count,
		lightness_steps		= arg_list.lightness_steps,
		min_lum				= arg_list.min_lum,
		max_lum				= arg_list.max_lum,
		chroma_mode			= arg_list.chroma,
		saturation			= arg_list.saturation,
		random_count		= arg_list.random_count,
		seed				= arg_list.seed,
		logging				= _strToBool(arg_list.logging),
	)


if __name__ == '__main__':
	preset = parser(sys.argv[:])
	if PaletteGen.usePreset(preset) is None:
		sys.exit(1)
