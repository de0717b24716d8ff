#
# Brain atlas rendering
#
# Color the regions of an atlas SVG by value and write it with its colorbar
#

import os
import sys
import shutil
import tempfile
import time
import webbrowser
import argparse
from os import path
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from atlas_config import DEFAULT_ATLAS, get_atlas_config, get_available_atlases, region_tokens, template_path
from coloring import check_color_table, colormap_table, data_limits, value2color, cm2hex, write_colorbar
from svg_template import make_surface, fill_placeholders

# seconds to leave the browser before the temporary directory is removed
VIEWER_WAIT = 2


@dataclass
class PlotOptions:
	"""
	limits    – (min, max) clamp range; defaults to the range of the data
	viewer    – open the SVG in a browser when done
	save_path – output prefix, written as {save_path}_{atlas}.svg and {save_path}_cb.png;
	            defaults to a temporary directory, removed after viewing
	scaling   – display size relative to the template, 0 < scaling <= 1
	atlas     – one of atlas_config.ATLAS_CONFIGS
	atlas_dir – directory holding the atlas templates
	"""
	limits    : Optional[Sequence[float]] = None
	viewer    : bool = True
	save_path : Optional[str] = None
	scaling   : float = 0.1
	atlas     : str = DEFAULT_ATLAS
	atlas_dir : Optional[str] = None

	def __post_init__(self):
		if self.limits is not None:
			limits = np.asarray(self.limits)
			if limits.shape != (2,) or not np.issubdtype(limits.dtype, np.number):
				raise ValueError("limits must be a numeric pair [min, max]")
			if limits[0] > limits[1]:
				raise ValueError(f"limits must satisfy min <= max, got {list(self.limits)}")
			self.limits = (float(limits[0]), float(limits[1]))

		if np.size(self.viewer) != 1:
			raise ValueError("viewer must be 0/False (no show) or 1/True (show)")
		self.viewer = bool( np.ravel(self.viewer)[0] > 0 )

		if self.save_path is not None:
			if not isinstance(self.save_path, (str, os.PathLike)):
				raise TypeError("save_path must be string with file path")
			self.save_path = path.expanduser( os.fspath(self.save_path) )

		if isinstance(self.scaling, bool) or not isinstance(self.scaling, (int, float, np.number)):
			raise ValueError("scaling must be a scalar > 0 and <= 1")
		if not (0 < self.scaling <= 1):
			raise ValueError("scaling must be a scalar > 0 and <= 1")

		if not isinstance(self.atlas, str):
			raise TypeError("atlas must be string with atlas name")
		self.atlas = self.atlas.lower()
		get_atlas_config(self.atlas)


@dataclass
class RenderResult:
	svg_path : str
	cb_path  : str
	colors   : list = field(default_factory=list)
	limits   : tuple = (np.nan, np.nan)
	tmp_dir  : Optional[str] = None


def check_inputs(regions, values, cm):
	if isinstance(regions, str):
		raise TypeError("regions must be array of strings with region names")
	regions = list(regions)
	if not all( isinstance(r, str) for r in regions ):
		raise TypeError("regions must be array of strings with region names")

	try:
		values = np.asarray(values)
	except ValueError as e:
		raise ValueError("values must be numeric") from e
	# booleans and numeric strings are not values
	if not np.issubdtype(values.dtype, np.number):
		raise ValueError("values must be numeric")
	values = values.astype(float)
	if values.ndim > 1 and np.count_nonzero( np.array(values.shape) > 1 ) > 1:
		raise ValueError("values must be a vector")
	values = values.ravel()
	if len(regions) != len(values):
		raise ValueError(f"regions and values must be same size ({len(regions)} != {len(values)})")

	cm = check_color_table(cm)
	return regions, values, cm


def open_viewer(svg_path):
	webbrowser.open_new( 'file://' + path.abspath(svg_path) )


def plot_brain(regions, values, cm, options=None, verbose=True, **kwargs):
	"""
	Create SVG of the brain with colored regions.

	regions – list (N) of region names to color
	values  – values associated with each region (N)
	cm      – colormap (Mx3) to which the values are mapped
	options – PlotOptions; alternatively pass its fields as keyword arguments

	Regions that have no shape in the atlas template are left uncolored.
	"""
	if options is None:
		options = PlotOptions(**kwargs)
	elif kwargs:
		raise TypeError("pass either options or keyword options, not both")
	regions, values, cm = check_inputs(regions, values, cm)

	original_svg_path = template_path(options.atlas, options.atlas_dir)

	tmp_dir = None
	save_file = options.save_path
	if save_file is None:
		tmp_dir = tempfile.mkdtemp(prefix='plot_brain_')
		save_file = path.join(tmp_dir, 'plot')

	if options.limits is None:
		values_min, values_max = data_limits(values)
	else:
		values_min, values_max = options.limits

	cb_path = path.abspath(save_file + '_cb.png')
	combined_svg_path = path.abspath(save_file + '_' + options.atlas + '.svg')

	# COLORING
	coloring = value2color(values, values_min, values_max, cm)
	coloring_rgb = cm2hex(coloring)

	# SURFACES
	make_surface(original_svg_path, combined_svg_path, region_tokens(regions, options.atlas), coloring_rgb)

	# COLORBAR
	write_colorbar(cm, cb_path)

	# WRITE
	fill_placeholders(combined_svg_path, cb_path, values_min, values_max, options.scaling)
	if verbose:
		print(f"wrote {combined_svg_path}")

	# VIEWER
	if options.viewer:
		open_viewer(combined_svg_path)
		if tmp_dir is not None:
			time.sleep(VIEWER_WAIT)
			shutil.rmtree(tmp_dir)

	return RenderResult(combined_svg_path, cb_path, coloring_rgb, (values_min, values_max), tmp_dir)


def load_region_values(fname, region_col='region', value_col='value'):
	df = pd.read_csv(fname)
	for col in (region_col, value_col):
		if col not in df.columns:
			raise ValueError(f"column '{col}' not found in {fname}")
	regions = [str(r) for r in df[region_col]]
	values = pd.to_numeric(df[value_col], errors='coerce').to_numpy(dtype=float)
	return regions, values


def main(argv=None):
	parser = argparse.ArgumentParser(description="Color brain atlas regions by value")
	parser.add_argument("csv", help="CSV file with a region and a value column")
	parser.add_argument("--region-col", default="region")
	parser.add_argument("--value-col", default="value")
	parser.add_argument("--colormap", default="viridis", help="matplotlib colormap name")
	parser.add_argument("--colormap-file", default=None, help="text file with an Mx3 RGB table, overrides --colormap")
	parser.add_argument("--n-colors", type=int, default=256, help="number of entries sampled from --colormap")
	parser.add_argument("--limits", nargs=2, type=float, metavar=("MIN", "MAX"), default=None)
	parser.add_argument("--no-viewer", action="store_true", help="do not open the result in a browser")
	parser.add_argument("--save-path", default=None, help="output prefix (default: temporary directory)")
	parser.add_argument("--scaling", type=float, default=0.1)
	atlas_help = "; ".join( f"{name}: {get_atlas_config(name)['description']}" for name in get_available_atlases() )
	parser.add_argument("--atlas", default=DEFAULT_ATLAS, choices=get_available_atlases(), help=atlas_help)
	parser.add_argument("--atlas-dir", default=None)
	args = parser.parse_args(argv)

	try:
		regions, values = load_region_values(args.csv, args.region_col, args.value_col)
		if args.colormap_file is not None:
			cm = np.loadtxt(args.colormap_file, ndmin=2)
		else:
			cm = colormap_table(args.colormap, args.n_colors)
		options = PlotOptions(
			limits=args.limits,
			viewer=not args.no_viewer,
			save_path=args.save_path,
			scaling=args.scaling,
			atlas=args.atlas,
			atlas_dir=args.atlas_dir,
		)
		plot_brain(regions, values, cm, options)
	except (ValueError, TypeError, KeyError, OSError) as e:
		print(f"plot_brain: {e}", file=sys.stderr)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())
