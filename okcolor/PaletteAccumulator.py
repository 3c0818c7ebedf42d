#PaletteAccumulator.py
import numpy as np
from PIL import Image
from scipy.spatial import cKDTree

from .PackedColor import PackedColor
from .OkLab import OkLab
from .OkTools import OkTools


class PaletteAccumulator:
	"""
		Collects RGBA8888 colors for one generator run.
		Duplicates are reported and skipped, never fatal.
		Alpha below 128 collapses to one transparent entry.
	"""

	TRANSPARENT = 0x00000000
	ALPHA_THRESHOLD = PackedColor.OPAQUE_THRESHOLD

	def __init__(self, name: str = "palette"):
		self.name = name
		self.colors = []
		self.duplicates = []
		self._seen = set()

	def __len__(self):
		return len(self.colors)

	def __contains__(self, rgba):
		return self.key(rgba) in self._seen

	def __iter__(self):
		return iter(self.colors)

	@staticmethod
	def key(rgba):
		"""int key(int 0xRRGGBBAA) dedup and sort key"""
		rgba &= 0xFFFFFFFF
		if (rgba & 0xFF) < PaletteAccumulator.ALPHA_THRESHOLD:
			return PaletteAccumulator.TRANSPARENT
		return rgba

	def add(self, rgba):
		"""bool add(int 0xRRGGBBAA) False if the color was already present"""
		rgba = self.key(rgba)
		if rgba in self._seen:
			self.duplicates.append(rgba)
			print(self.name + ": duplicate color " + OkTools.rgba8888ToHex(rgba) + " skipped")
			return False
		self._seen.add(rgba)
		self.colors.append(rgba)
		return True

	def addPacked(self, packed):
		"""bool addPacked(int packed) converts Oklab to RGBA8888 first"""
		return self.add(OkLab.toRGBA8888(packed))

	def extend(self, rgba_list):
		"""int extend(int[] rgba_list) number of new colors"""
		return sum(1 for rgba in rgba_list if self.add(rgba))

	def toList(self):
		return list(self.colors)

	def toRGBAArray(self):
		"""uint8[n][4] toRGBAArray()"""
		return OkLab.rgba8888ToArray(self.colors)

	def toOklab(self):
		"""float[n][3] toOklab() Oklab of the opaque colors"""
		opaque = [c for c in self.colors if c != self.TRANSPARENT]
		if not opaque:
			return np.zeros((0, 3))
		return OkLab.srgbToOklab(OkLab.rgba8888ToArray(opaque)[:, :3] / 255.0)


	#Sort into hue buckets, transparent first, grays next, each bucket by lightness
	def sortByHue(self, hue_count: int = 12):
		hue_count = max(1, hue_count)
		if len(self.colors) == 0:
			return

		has_transparent = self.TRANSPARENT in self._seen
		opaque = [c for c in self.colors if c != self.TRANSPARENT]
		if not opaque:
			return
		lab_list = self.toOklab()
		is_gray = OkTools.isOkSrgbGray(lab_list)

		hue_list = np.arctan2(lab_list[:,2], lab_list[:,1]) / (2*np.pi) % 1.0
		hue_bucket_idxs = (hue_list * hue_count).astype(int) % hue_count
		hue_bucket_idxs[is_gray] = -1

		#lexsort, last key is primary
		order = np.lexsort((lab_list[:,0], hue_bucket_idxs))
		self.colors = [self.TRANSPARENT] * has_transparent + [opaque[i] for i in order]


	#Save to file as a one pixel high strip
	def saveImage(self, path):
		if len(self.colors) == 0:
			print("Warning: " + self.name + " is empty, nothing saved")
			return None

		arr = np.array([self.toRGBAArray()], dtype=np.uint8)
		img = Image.fromarray(arr) #(1,n,4) uint8 is RGBA
		img.save(path)
		return img

	@staticmethod
	def load(path, name: str = None):
		"""PaletteAccumulator load(char* path) every pixel of an image, in reading order"""
		img = Image.open(path).convert("RGBA")
		pixels = np.asarray(img, dtype=np.uint32).reshape(-1, 4)
		palette = PaletteAccumulator(name or path)
		for r, g, b, a in pixels:
			palette.add(int(r) << 24 | int(g) << 16 | int(b) << 8 | int(a))
		return palette


	### Stats ###

	@staticmethod
	def _printPairStats(lab_list, rgba_list, print_count, list_name = "", precision = 4):
		if len(lab_list) < 2:
			return

		color_tree = cKDTree(lab_list)
		dists, idxs = color_tree.query(lab_list, k=2)

		#[a,b] [b,a] -> [a,b]
		pair_idxs = np.sort(idxs[:, :2], axis=1)
		pair_idxs, unique_idxs = np.unique(pair_idxs, axis=0, return_index=True)
		pair_dists = dists[unique_idxs, 1]

		sorted_idxs = np.argsort(pair_dists)
		pair_idxs = pair_idxs[sorted_idxs]
		pair_dists = pair_dists[sorted_idxs]

		print(list_name + " Closest pairs")
		for (first, second), dist in zip(pair_idxs[:print_count], pair_dists[:print_count]):
			print("d:" + str(round(float(dist), precision)) + " " + OkTools.rgba8888ToHex(rgba_list[first]) + " " + OkTools.rgba8888ToHex(rgba_list[second]))

		print(list_name + " Avg pair gap: " + str(round(float(np.average(pair_dists)), precision)))
		print(list_name + " Median pair gap: " + str(round(float(np.median(pair_dists)), precision)))
		print("")
		return pair_dists

	def printGapStats(self, print_count = 4, precision = 4):
		"""Closest Oklab pairs among grays and among hued colors"""
		opaque = [c for c in self.colors if c != self.TRANSPARENT]
		lab_list = self.toOklab()
		if len(lab_list) == 0:
			return
		is_gray = OkTools.isOkSrgbGray(lab_list)
		rgba_list = np.array(opaque, dtype=np.uint64)

		PaletteAccumulator._printPairStats(lab_list[is_gray], rgba_list[is_gray], print_count, "Grayscale", precision)
		PaletteAccumulator._printPairStats(lab_list[~is_gray], rgba_list[~is_gray], print_count, "Chroma", precision)

	def report(self):
		print(self.name + ": " + str(len(self.colors)) + " colors, " + str(len(self.duplicates)) + " duplicates skipped")
