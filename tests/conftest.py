# tests/conftest.py
import pytest

TEMPLATE_LINES = [
	'<?xml version="1.0" encoding="UTF-8"?>\n',
	'<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="4224.5mm" height="1756mm" viewBox="0 0 4224.5 1756">\n',
	'<image xlink:href="colorbarpath" x="4000" y="100" width="50" height="600"/>\n',
	'<text x="4060" y="700">minvalue</text>\n',
	'<text x="4060" y="110">maxvalue</text>\n',
	'<path id="lh_precuneus" fill="#FFFFFF" stroke="#000000" d="M 10 10 L 20 20 Z"/>\n',
	'<path id="rh_precuneus" fill="#FFFFFF" stroke="#000000" d="M 30 30 L 40 40 Z"/>\n',
	'<path id="FE_" fill="#FFFFFF" stroke="#000000" d="M 50 50 L 60 60 Z"/>\n',
	'<path id="FEE_" fill="#FFFFFF" stroke="#000000" d="M 70 70 L 80 80 Z"/>\n',
	'<path id="lh_cuneus" stroke="#000000" d="M 90 90 L 95 95 Z"/>\n',
	'</svg>\n',
]


def write_template(fname, lines=TEMPLATE_LINES):
	with open(fname, 'w', encoding='utf-8', newline='') as f:
		f.writelines(lines)
	return fname


@pytest.fixture
def atlas_dir(tmp_path):
	"""Directory with a small lausanne120 and wbb47 template."""
	d = tmp_path / "atlases"
	d.mkdir()
	write_template(d / "lausanne120_combined.svg")
	write_template(d / "wbb47_combined.svg")
	return str(d)


@pytest.fixture
def grey_table():
	return [[0.0, 0.0, 0.0], [0.5, 0.5, 0.5], [1.0, 1.0, 1.0]]


@pytest.fixture
def template_lines():
	return list(TEMPLATE_LINES)
