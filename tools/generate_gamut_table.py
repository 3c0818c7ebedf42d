#!/usr/bin/env python

import sys
import numpy as np
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from okcolor import GamutTable, OkLab

#Largest chroma of any 8-bit sRGB color, the table can't exceed it
def calc_maxSrgbChroma(size):
	axis = np.arange(size) / (size-1)
	rr, gg, bb = np.meshgrid(axis, axis, axis, indexing='ij')
	srgb = np.stack([rr.ravel(), gg.ravel(), bb.ravel()], axis=1)
	lab = OkLab.srgbToOklab(srgb)
	return np.sqrt(lab[:,1]**2 + lab[:,2]**2).max()

def check_table(table, precision):
	chroma = table.data / GamutTable.CHROMA_SCALE
	print("Table max chroma ", round(float(chroma.max()), precision))
	print("sRGB max chroma  ", round(float(calc_maxSrgbChroma(128)), precision))

	#entries are rounded, half a quantum under each must decode inside the cube
	worst = 0.0
	for j in range(0, GamutTable.L_STEPS, 5):
		L = j / GamutTable.L_BYTE_SCALE
		hue = (np.arange(GamutTable.H_STEPS) + 0.5) / GamutTable.H_STEPS
		c = np.maximum(chroma[j] - 0.5/GamutTable.CHROMA_SCALE, 0.0)
		lab = np.stack([np.full_like(c, L), np.cos(2*np.pi*hue)*c, np.sin(2*np.pi*hue)*c], axis=1)
		lin = OkLab.oklabToLinear(lab)
		worst = max(worst, float(np.max(np.maximum(-lin, lin - 1.0))))
	print("Worst overshoot  ", worst, " (0 is inside)")


if __name__ == '__main__':
	output = sys.argv[1] if len(sys.argv) > 1 else "./gamut_table.npy"
	table = GamutTable.build()
	table.save(output)
	print("Saved ", table.data.nbytes, " bytes to ", output)
	check_table(table, precision = 6)
