"""GLSL Oklab tint shader, generated from the OkLab matrices"""

import re
import numpy as np

from .PackedColor import PackedColor
from .OkLab import OkLab


class OkShader:
	"""
		Fragment shader that converts a texel to Oklab, shifts it by the batch color
		(L, A, B as stored in PackedColor, 0.5 is no change) and converts back.
		fast_gamma swaps the sRGB curve for square/sqrt. That is a real-time trade only,
		nothing on the CPU side uses it outside emulate().
	"""

	NEUTRAL_TINT = (0.5, 0.5, 0.5, 1.0)
	MATRIX_TOLERANCE = 1e-9
	_MAT3_PATTERN = re.compile(r"const\s+mat3\s+(\w+)\s*=\s*mat3\(([^)]*)\)")

	#uniform name -> OkLab matrix
	MATRICES = {
		"rgbToLms": OkLab.RGB_TO_LMS,
		"lmsToOklab": OkLab.LMS_TO_OKLAB,
		"oklabToLms": OkLab.OKLAB_TO_LMS,
		"lmsToRgb": OkLab.LMS_TO_RGB,
	}

	_GAMMA_FAST = (
		"vec3 toLinear(vec3 c) { return c * c; }\n"
		"vec3 fromLinear(vec3 c) { return sqrt(max(c, 0.0)); }\n"
	)
	_GAMMA_PRECISE = (
		"vec3 toLinear(vec3 c) {\n"
		"  return mix(c / 12.92, pow((c + 0.055) / 1.055, vec3(2.4)), step(0.04045, c));\n"
		"}\n"
		"vec3 fromLinear(vec3 c) {\n"
		"  c = max(c, 0.0);\n"
		"  return mix(c * 12.92, 1.055 * pow(c, vec3(1.0 / 2.4)) - 0.055, step(0.0031308, c));\n"
		"}\n"
	)

	@staticmethod
	def glslMat3(matrix):
		"""char* glslMat3(float[3][3] matrix) column-major literal"""
		values = np.asarray(matrix, dtype=float).T.reshape(-1)
		return "mat3(" + ", ".join("{:.10f}".format(v) for v in values) + ")"

	@staticmethod
	def fragmentShader(fast_gamma=True):
		"""char* fragmentShader(bool fast_gamma = True)"""
		consts = "".join(
			"const mat3 " + name + " = " + OkShader.glslMat3(m) + ";\n"
			for name, m in OkShader.MATRICES.items()
		)
		gamma = OkShader._GAMMA_FAST if fast_gamma else OkShader._GAMMA_PRECISE
		return (
			"#ifdef GL_ES\n"
			"precision mediump float;\n"
			"#endif\n"
			"varying vec2 v_texCoords;\n"
			"varying vec4 v_color;\n"
			"uniform sampler2D u_texture;\n"
			+ consts + gamma +
			"void main() {\n"
			"  vec4 tgt = texture2D(u_texture, v_texCoords);\n"
			"  vec3 lab = lmsToOklab * pow(rgbToLms * toLinear(tgt.rgb), vec3(1.0 / 3.0));\n"
			"  lab += v_color.rgb - 0.5;\n"
			"  vec3 lms = oklabToLms * lab;\n"
			"  vec3 rgb = fromLinear(lmsToRgb * (lms * lms * lms));\n"
			"  gl_FragColor = vec4(clamp(rgb, 0.0, 1.0), v_color.a * tgt.a);\n"
			"}\n"
		)

	@staticmethod
	def readMatrices(source):
		"""{char*: float[3][3]} readMatrices(char* source)"""
		found = {}
		for name, body in OkShader._MAT3_PATTERN.findall(source):
			values = np.array([float(v) for v in body.split(",")])
			found[name] = values.reshape(3, 3).T #column-major
		return found

	@staticmethod
	def verifyShader(source):
		"""bool verifyShader(char* source) True if every embedded matrix matches OkLab"""
		found = OkShader.readMatrices(source)
		if set(found) != set(OkShader.MATRICES):
			print("Shader matrices "+str(sorted(found))+" expected "+str(sorted(OkShader.MATRICES)))
			return False
		for name, m in found.items():
			if not np.allclose(m, OkShader.MATRICES[name], rtol=0.0, atol=OkShader.MATRIX_TOLERANCE):
				print("Shader matrix "+name+" differs from OkLab")
				return False
		return True

	@staticmethod
	def emulate(rgba, tint=NEUTRAL_TINT, fast_gamma=True):
		"""int emulate(int 0xRRGGBBAA, float[4] tint) the shader's output for one texel on the CPU"""
		texel = OkLab.rgba8888ToArray([rgba])[0] / 255.0
		to_linear = OkLab.approxSrgbToLinear if fast_gamma else OkLab.srgbToLinear
		from_linear = OkLab.approxLinearToSrgb if fast_gamma else OkLab.linearToSrgb

		lab = OkLab.linearToOklab(to_linear(texel[:3]))
		lab = lab + np.asarray(tint[:3], dtype=float) - PackedColor.NEUTRAL_AB
		rgb = np.clip(from_linear(OkLab.oklabToLinear(lab)), 0.0, 1.0)
		out = np.round(np.append(rgb, tint[3] * texel[3]) * 255.0).astype(int)
		return int(out[0]) << 24 | int(out[1]) << 16 | int(out[2]) << 8 | int(out[3])
