#
# Brain atlas rendering
#
# Patching the atlas SVG templates line by line
#
# The templates are not parsed as XML. A line that contains a region's token
# gets the value of its first fill="..." attribute replaced; every other line
# is copied as is.
#

import os

from atlas_config import HEIGHT_MM, WIDTH_MM

FILL_ATTR = 'fill='


class OutputWriteError(OSError):
	def __init__(self, fname, code=None, reason=None):
		msg = "Cannot write file"
		if reason is not None:
			msg += f" ({reason})"
		super().__init__(code, msg, fname)


def replace_fill(line, hex_color):
	pos = line.find(FILL_ATTR)
	if pos < 0:
		return line

	qpos = pos + len(FILL_ATTR)
	if qpos >= len(line) or line[qpos] not in '"\'':
		return line
	end = line.find(line[qpos], qpos + 1)
	if end < 0:
		return line
	return line[:qpos + 1] + hex_color + line[end:]


def patch_line(line, region_colors):
	"""
	region_colors – ordered (token, hex color) pairs; the first token found in the line is used
	"""
	for token, hex_color in region_colors:
		if token and token in line:
			return replace_fill(line, hex_color)
	return line


def make_surface(inname, outname, regions, coloring):
	region_colors = list( zip(regions, coloring) )

	with open(inname, 'r', encoding='utf-8', newline='') as fi:
		try:
			fo = open(outname, 'w', encoding='utf-8', newline='')
		except OSError as e:
			raise OutputWriteError(outname, e.errno, e.strerror) from e
		with fo:
			for tline in fi:
				fo.write( patch_line(tline, region_colors) )

	return outname


def format_limit(value):
	return '%0.4g' % value


def substitute_line(tline, cb_path, values_min, values_max, scaling):
	# real colorbar path
	tline = tline.replace('colorbarpath', cb_path)

	# min and max values
	tline = tline.replace('minvalue', format_limit(values_min))
	tline = tline.replace('maxvalue', format_limit(values_max))

	# scaling (display size only, the viewBox is untouched)
	tline = tline.replace(f'height="{HEIGHT_MM}mm"', 'height="%fmm"' % (scaling*HEIGHT_MM))
	tline = tline.replace(f'width="{WIDTH_MM}mm"', 'width="%fmm"' % (scaling*WIDTH_MM))
	return tline


def fill_placeholders(svg_path, cb_path, values_min, values_max, scaling):
	"""
	Substitute the colorbar path, limits and display size in svg_path.

	The result is written next to svg_path and moved over it once complete.
	"""
	tmp_path = svg_path + '.tmp'
	with open(svg_path, 'r', encoding='utf-8', newline='') as fi:
		try:
			fo = open(tmp_path, 'w', encoding='utf-8', newline='')
		except OSError as e:
			raise OutputWriteError(tmp_path, e.errno, e.strerror) from e
		with fo:
			for tline in fi:
				fo.write( substitute_line(tline, cb_path, values_min, values_max, scaling) )

	os.replace(tmp_path, svg_path)
	return svg_path
