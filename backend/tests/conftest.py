"""Shared test fixtures."""

from __future__ import annotations

import pytest


SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

# One path, three subpaths: two explicit moves plus one implicit after Z
COMPOUND_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <g id="shapes">
    <path id="frame" d="M 10,10 90,10 90,90 Z M 30,30 L 70,30 Z l 0,40"/>
  </g>
</svg>'''

# Second path has a stray "%" and must be reported, not raised
BROKEN_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0,0,50,50">
  <path d="M 1 2 L 3 4"/>
  <path d="M 10 7%4 Z"/>
  <path d="L 5 5"/>
</svg>'''


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def compound_svg() -> str:
    return COMPOUND_SVG


# Well-formed but nested far past the interpreter's recursion limit
DEEP_NESTING = 3000
DEEP_SVG = (
    '<svg viewBox="0 0 10 10">'
    + "<g>" * DEEP_NESTING
    + "<path d='M 1 2 L 3 4'/>"
    + "</g>" * DEEP_NESTING
    + "<path d='M 5 6'/>"
    + "</svg>"
)
