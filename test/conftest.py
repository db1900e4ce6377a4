"""Pytest configuration and fixtures

Provides shared fixtures for all tests and helpers for inspecting the SVG
documents the renderer produces.
"""

import sys
from pathlib import Path

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging
import xml.etree.ElementTree as ET
from typing import List

import pytest

from lilygraph.graph_params import ChartData, ChartOptions
from lilygraph.logger import ConsoleLogger
from lilygraph.render import ChartRenderer

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse_svg(document: str) -> ET.Element:
    """Parse a rendered document, skipping the XML declaration"""
    body = document.split("\n", 1)[1]
    return ET.fromstring(body)


def find_all(root: ET.Element, tag: str) -> List[ET.Element]:
    """All descendants with the given SVG tag, in document order"""
    return list(root.iter(SVG_NS + tag))


def texts(root: ET.Element) -> List[str]:
    return [(element.text or "").strip() for element in find_all(root, "text")]


def series_group(root: ET.Element) -> ET.Element:
    """The group holding bars, points and value labels"""
    for group in find_all(root, "g"):
        if group.get("font-size") == "10px" and group.get("stroke-width") == "0.3":
            return group
    raise AssertionError("series group not found")


@pytest.fixture(scope="function")
def logger():
    """
    Provide a ConsoleLogger instance for test logging.
    Reusable across all test files.

    Returns:
        ConsoleLogger: Logger configured for testing
    """
    return ConsoleLogger(name="test", level=logging.INFO)


@pytest.fixture(scope="function")
def renderer(logger):
    """ChartRenderer logging through the test logger"""
    return ChartRenderer(logger=logger)


@pytest.fixture
def render(renderer):
    """Render data with option overrides and return the parsed SVG root"""

    def _render(slots, labels=None, legend=None, colors=None, extra=None, **options):
        document = renderer.render(
            ChartOptions().merged(**options),
            ChartData(slots=slots, labels=labels or [], legend=legend),
            colors,
            extra,
        )
        return parse_svg(document)

    return _render
