#
# Brain atlas rendering
#
# Mapping region values onto a color table, hex codes and the colorbar image
#

import numpy as np

import matplotlib
import matplotlib.colors as mcolors
import matplotlib.pyplot as plt

COLORBAR_WIDTH = 200


def check_color_table(cm):
	cm = np.asarray(cm)
	if not np.issubdtype(cm.dtype, np.number):
		raise ValueError("colormap must be numeric Nx3 matrix")
	cm = cm.astype(float)
	if cm.ndim != 2 or cm.shape[1] != 3 or cm.shape[0] == 0:
		raise ValueError("colormap must be numeric Nx3 matrix")
	if not np.all(np.isfinite(cm)):
		raise ValueError("colormap must only contain finite values")
	return cm


def colormap_table(colormap_name='viridis', n_color=256):
	"""
	Sample a named matplotlib colormap into an (n_color, 3) RGB table
	"""
	if n_color < 1:
		raise ValueError("n_color must be a positive integer")
	cmap = matplotlib.colormaps[colormap_name]
	return cmap( np.linspace(0.0, 1.0, n_color) )[:, :3]


def data_limits(values):
	# nanmin/nanmax, without the all-NaN warning
	values = np.asarray(values, dtype=float)
	finite = values[~np.isnan(values)]
	if len(finite) == 0:
		return np.nan, np.nan
	return float(np.min(finite)), float(np.max(finite))


def clamp_values(values, vmin, vmax):
	# comparisons with NaN are False, so NaN entries pass through untouched
	values = np.array(values, dtype=float)
	values[values < vmin] = vmin
	values[values > vmax] = vmax
	return values


def is_degenerate(values):
	# a single distinct (non-NaN) value cannot be normalized
	values = np.asarray(values, dtype=float)
	return len( np.unique( values[~np.isnan(values)] ) ) <= 1


def color_indices(values, vmin, vmax, n_color):
	"""
	0-based color table row for each value.

	Values are clamped into [vmin, vmax] and normalized linearly, then
	projected onto the n_color rows. When all values coincide, every value
	gets the last row. NaN values also get the last row.
	"""
	values = clamp_values(values, vmin, vmax)
	if is_degenerate(values):
		return np.full( len(values), n_color - 1, dtype=int )

	values_norm = (values - vmin)/(vmax - vmin)
	idx = np.rint( values_norm*(n_color - 1) )
	idx[np.isnan(idx)] = n_color - 1
	return idx.astype(int)


def value2color(values, vmin, vmax, cm):
	cm = check_color_table(cm)
	return cm[ color_indices(values, vmin, vmax, len(cm)) ]


def rgb2hex(rgb):
	# channels outside [0, 1] saturate at 00/FF
	rgb = np.clip( np.asarray(rgb, dtype=float), 0.0, 1.0 )
	return mcolors.to_hex(rgb).upper()


def cm2hex(coloring):
	return [rgb2hex(rgb) for rgb in coloring]


def hex2rgb(hex_color):
	return tuple( float(c) for c in mcolors.to_rgb(hex_color) )


def write_colorbar(cm, cb_path, width=COLORBAR_WIDTH):
	"""
	Write the color table as a vertical bar, first row at the bottom
	"""
	cm = check_color_table(cm)
	bar = np.repeat( cm[:, np.newaxis, :], width, axis=1 )
	bar = np.flipud(bar)
	plt.imsave(cb_path, np.clip(bar, 0.0, 1.0))
	return cb_path
