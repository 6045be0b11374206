"""Shared raw Figma node fixtures."""
import pytest


@pytest.fixture
def text_node():
    """TEXT node inside a frame: 16px Inter, 24px line height."""
    return {
        'id': '1:2',
        'name': 'Greeting',
        'type': 'TEXT',
        'characters': 'Hi',
        'absoluteBoundingBox': {'x': 20, 'y': 30, 'width': 40, 'height': 24},
        'style': {
            'fontFamily': 'Inter',
            'fontWeight': 400,
            'fontSize': 16,
            'lineHeightPx': 24,
            'letterSpacing': 0,
            'textAlignHorizontal': 'LEFT',
            'textAlignVertical': 'TOP',
        },
        'fills': [{'type': 'SOLID', 'color': {'r': 0, 'g': 0, 'b': 0, 'a': 1}}],
    }


@pytest.fixture
def frame_node(text_node):
    """Top-level frame containing one text child."""
    return {
        'id': '1:1',
        'name': 'Card',
        'type': 'FRAME',
        'absoluteBoundingBox': {'x': 0, 'y': 0, 'width': 320, 'height': 200},
        'fills': [{'type': 'SOLID', 'color': {'r': 1, 'g': 1, 'b': 1, 'a': 1}, 'opacity': 0.5}],
        'strokes': [{'type': 'SOLID', 'color': {'r': 0, 'g': 0, 'b': 1, 'a': 1}}],
        'strokeWeight': 2,
        'cornerRadius': 8,
        'children': [text_node],
    }


@pytest.fixture
def linear_gradient():
    return {
        'type': 'GRADIENT_LINEAR',
        'gradientHandlePositions': [{'x': 0, 'y': 0.5}, {'x': 1, 'y': 0.5}, {'x': 0, 'y': 1}],
        'gradientStops': [
            {'position': 0.0, 'color': {'r': 1, 'g': 0, 'b': 0, 'a': 1}},
            {'position': 0.5, 'color': {'r': 0, 'g': 1, 'b': 0, 'a': 0.5}},
            {'position': 1.0, 'color': {'r': 0, 'g': 0, 'b': 1, 'a': 1}},
        ],
    }


@pytest.fixture
def file_response(frame_node):
    """GET /v1/files/:key response."""
    return {
        'name': 'Design System',
        'lastModified': '2024-05-01T10:00:00Z',
        'thumbnailUrl': 'https://example.com/thumb.png',
        'document': {
            'id': '0:0',
            'name': 'Document',
            'type': 'DOCUMENT',
            'children': [frame_node],
        },
    }


@pytest.fixture
def nodes_response(frame_node):
    """GET /v1/files/:key/nodes?ids=1:1 response."""
    return {
        'name': 'Design System',
        'lastModified': '2024-05-01T10:00:00Z',
        'thumbnailUrl': 'https://example.com/thumb.png',
        'nodes': {'1:1': {'document': frame_node}},
    }
