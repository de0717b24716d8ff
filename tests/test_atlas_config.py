"""
Tests for atlas_config.py.
"""

import errno
import os

import pytest

from atlas_config import (
	ATLAS_DIR,
	TemplateNotFoundError,
	get_atlas_config,
	get_available_atlases,
	region_tokens,
	template_path,
)


class TestAtlasConfig:

	def test_closed_set(self):
		assert sorted(get_available_atlases()) == sorted([
			'aparc', 'aparc_aseg', 'lausanne120', 'lausanne120_aseg', 'lausanne250', 'wbb47',
		])

	def test_unknown_atlas(self):
		with pytest.raises(ValueError, match="Unknown atlas"):
			get_atlas_config('destrieux')

	def test_case_insensitive(self):
		assert get_atlas_config('WBB47') is get_atlas_config('wbb47')

	@pytest.mark.parametrize("atlas", ['aparc', 'aparc_aseg', 'wbb47'])
	def test_suffixed_atlases(self, atlas):
		assert region_tokens(['FE', 'FEE'], atlas) == ['FE_', 'FEE_']

	@pytest.mark.parametrize("atlas", ['lausanne120', 'lausanne120_aseg', 'lausanne250'])
	def test_plain_atlases(self, atlas):
		assert region_tokens(['FE', 'FEE'], atlas) == ['FE', 'FEE']


class TestTemplatePath:

	def test_found(self, atlas_dir):
		assert template_path('wbb47', atlas_dir) == os.path.join(atlas_dir, 'wbb47_combined.svg')

	def test_missing_template_names_path_and_atlas(self, atlas_dir):
		with pytest.raises(TemplateNotFoundError) as excinfo:
			template_path('aparc', atlas_dir)
		msg = str(excinfo.value)
		assert os.path.join(atlas_dir, 'aparc_combined.svg') in msg
		assert "'aparc'" in msg
		assert isinstance(excinfo.value, FileNotFoundError)
		assert excinfo.value.errno == errno.ENOENT
		assert excinfo.value.filename == os.path.join(atlas_dir, 'aparc_combined.svg')
		assert msg.startswith("[Errno 2] Atlas not found")

	def test_default_directory(self):
		assert os.path.basename(ATLAS_DIR) == 'atlases'
