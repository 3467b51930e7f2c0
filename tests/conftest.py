"""
tests/conftest.py

Configuration for pytest.
"""

from pathlib import Path
from typing import Any, Callable

import pytest

from remixr.data_models.structure import Geometry, PresentationSample, StructuralNode, TextLeaf


@pytest.fixture(scope="session")
def tests_root() -> Path:
    """
    Root directory for tests.
    Returns:
        Path to the tests directory.
    """
    return Path(__file__).parent.resolve()


@pytest.fixture(scope="session")
def data_dir(tests_root: Path) -> Path:
    """
    Directory containing test data files.
    Returns:
        Path to tests/data.
    """
    return tests_root / "data"


@pytest.fixture(scope="session")
def input_data_dir(data_dir: Path) -> Path:
    """
    Directory containing input test data files.
    Returns:
        Path to tests/data/input.
    """
    return data_dir / "input"


@pytest.fixture
def make_node() -> Callable[..., StructuralNode]:
    """
    Factory for serialized structural nodes.
    Children may be StructuralNodes or plain strings (turned into text leaves).
    """
    def _make_node(
        tag: str,
        *children: StructuralNode | str,
        attributes: dict[str, str] | None = None,
        geometry: tuple[float, float, float, float] | None = None,
        **presentation: Any,
    ) -> StructuralNode:
        attributes = dict(attributes or {})
        return StructuralNode(
            tag=tag,
            element_id=attributes.get("id"),
            attributes={k: v for k, v in attributes.items() if not k.startswith("data-")},
            data_attributes={k: v for k, v in attributes.items() if k.startswith("data-")},
            class_list=attributes.get("class", "").split(),
            presentation=PresentationSample(**presentation),
            geometry=Geometry(x=geometry[0], y=geometry[1], width=geometry[2], height=geometry[3]) if geometry else None,
            children=[TextLeaf(content=child) if isinstance(child, str) else child for child in children],
        )
    return _make_node


@pytest.fixture
def dom_capture() -> dict[str, Any]:
    """
    A small JSON DOM capture shaped like the output of a browser-side capture script.
    """
    return {
        "nodeType": 1,
        "tagName": "HTML",
        "computedStyle": {"backgroundColor": "rgb(255, 255, 255)", "color": "rgb(0, 0, 0)"},
        "children": [
            {
                "nodeType": 1,
                "tagName": "BODY",
                "computedStyle": {"backgroundColor": "rgba(0, 0, 0, 0)"},
                "boundingBox": {"x": 0, "y": 0, "width": 1280, "height": 2000},
                "children": [
                    {
                        "nodeType": 1,
                        "tagName": "DIV",
                        "attributes": {"id": "root", "class": "app app shell", "data-reactroot": ""},
                        "computedStyle": {"paddingTop": "40px", "paddingBottom": "40px"},
                        "boundingBox": {"x": 0, "y": 0, "width": 1280, "height": 600},
                        "children": [
                            {
                                "nodeType": 1,
                                "tagName": "H1",
                                "computedStyle": {"color": "rgb(0, 0, 0)", "fontSize": "32px"},
                                "boundingBox": {"x": 10, "y": 10, "width": 400, "height": 60},
                                "children": [{"nodeType": 3, "textContent": "  Only 3 left in stock!  "}],
                            },
                            {"nodeType": 3, "textContent": "   \n  "},
                            {"nodeType": 8, "textContent": "a comment"},
                            {
                                "nodeType": 1,
                                "tagName": "BUTTON",
                                "computedStyle": {"color": "rgb(200, 200, 200)", "backgroundColor": "rgb(255, 255, 255)"},
                                "boundingBox": {"x": 900, "y": 10, "width": 120, "height": 40},
                                "children": [{"nodeType": 3, "textContent": "No thanks"}],
                            },
                        ],
                    },
                ],
            },
        ],
    }
