#
# Brain atlas rendering
#
# Atlas descriptors and template lookup
#

import errno
from os import path

ATLAS_DIR = path.join( path.dirname(path.abspath(__file__)), 'atlases' )

# reference size of every template, see the width/height attributes of the <svg> tag
HEIGHT_MM = 1756
WIDTH_MM = 4224.5

DEFAULT_ATLAS = 'lausanne120'

# Some atlases have region names that are prefixes of other names (e.g. FE and FEE);
# their templates tag each shape with the name followed by '_'.
ATLAS_CONFIGS = {
	'aparc': {
		'description': 'Desikan-Killiany atlas',
		'template': 'aparc_combined.svg',
		'suffix': '_',
	},
	'aparc_aseg': {
		'description': 'Desikan-Killiany atlas + subcortical ASEG segmentation',
		'template': 'aparc_aseg_combined.svg',
		'suffix': '_',
	},
	'lausanne120': {
		'description': '120 regions Cammoun sub-parcellation of the Desikan-Killiany atlas',
		'template': 'lausanne120_combined.svg',
		'suffix': '',
	},
	'lausanne120_aseg': {
		'description': '120 regions Cammoun sub-parcellation + subcortical ASEG segmentation',
		'template': 'lausanne120_aseg_combined.svg',
		'suffix': '',
	},
	'lausanne250': {
		'description': '250 regions Cammoun sub-parcellation',
		'template': 'lausanne250_combined.svg',
		'suffix': '',
	},
	'wbb47': {
		'description': 'Combined Walker-von Bonin and Bailey parcellation atlas of the macaque',
		'template': 'wbb47_combined.svg',
		'suffix': '_',
	},
}


class TemplateNotFoundError(FileNotFoundError):
	def __init__(self, template, atlas):
		super().__init__(errno.ENOENT, f"Atlas not found for atlas '{atlas}'", template)
		self.atlas = atlas


def get_atlas_config(atlas=DEFAULT_ATLAS):
	"""
	Get configuration for specified atlas

	Raises:
		ValueError: If atlas is not supported
	"""
	atlas = str(atlas).lower()
	if atlas not in ATLAS_CONFIGS:
		raise ValueError(
			f"Unknown atlas: {atlas}. "
			f"Available: {get_available_atlases()}"
		)
	return ATLAS_CONFIGS[atlas]


def get_available_atlases():
	return list(ATLAS_CONFIGS.keys())


def region_tokens(regions, atlas=DEFAULT_ATLAS):
	# the text that identifies each region's shape in the template
	suffix = get_atlas_config(atlas)['suffix']
	return [region + suffix for region in regions]


def template_path(atlas=DEFAULT_ATLAS, atlas_dir=None):
	if atlas_dir is None:
		atlas_dir = ATLAS_DIR
	fname = path.join( atlas_dir, get_atlas_config(atlas)['template'] )
	if not path.isfile(fname):
		raise TemplateNotFoundError(fname, atlas)
	return fname
