"""
Default attributes and attribute resolution for board elements.

Every element created on a board gets its effective attributes from three
layers, later layers winning:

    1. DEFAULT_OPTIONS['elements']  - shared by all elements
    2. board options along a path   - e.g. ('slider', 'point1')
    3. user attributes along path[1:] - e.g. attributes['point1']

Attribute keys are case-insensitive and normalised to lower case, so
``{'snapWidth': 1}`` and ``{'snapwidth': 1}`` are the same setting.
"""

from __future__ import annotations

import copy
from typing import Any, Mapping

from pygeoboard.core.constants import SNAP_DISABLED


DEFAULT_OPTIONS: dict[str, Any] = {
    'elements': {
        'name': '',
        'visible': True,
        'fixed': False,
        'withlabel': False,
        'dump': True,
        'strokecolor': '#0000ff',
        'strokewidth': 2,
    },
    'point': {
        'withlabel': True,
        'size': 3,
        'face': 'o',
        'strokecolor': '#ff0000',
    },
    'glider': {
        'snapwidth': SNAP_DISABLED,
    },
    'line': {
        'straightfirst': True,
        'straightlast': True,
    },
    'segment': {
        'straightfirst': False,
        'straightlast': False,
    },
    'group': {},
    'ticks': {
        'drawlabels': True,
        'majorheight': 10,
        'minorticks': 4,
    },
    'text': {
        'fontsize': 12,
        'strokecolor': '#000000',
    },
    'slider': {
        'snapwidth': SNAP_DISABLED,
        'precision': 2,
        'withticks': True,
        'withlabel': True,
        'size': 6,
        'strokecolor': '#000000',
        'point1': {
            'visible': False,
            'fixed': True,
            'withlabel': False,
            'name': '',
        },
        'point2': {
            'visible': False,
            'fixed': True,
            'withlabel': False,
            'name': '',
        },
        'baseline': {
            'name': '',
            'strokecolor': '#000000',
            'strokewidth': 1,
        },
        'ticks': {
            'drawlabels': False,
            'minorticks': 0,
            'majorheight': 5,
        },
        'highline': {
            'name': '',
            'strokecolor': '#000000',
            'strokewidth': 3,
        },
        'label': {
            'strokecolor': '#000000',
        },
    },
}


def _lower_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively lower-case the keys of a mapping."""
    out: dict[str, Any] = {}
    for key, val in d.items():
        if isinstance(val, Mapping):
            val = _lower_keys(val)
        out[str(key).lower()] = val
    return out


def merge_options(
    base: Mapping[str, Any],
    override: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """
    Deep-merge ``override`` over ``base``. Neither input is modified.

    Nested mappings are merged key by key, anything else is replaced.
    All keys of the result are lower case.
    """
    merged = _lower_keys(copy.deepcopy(dict(base)))
    if not override:
        return merged

    for key, val in _lower_keys(override).items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_options(merged[key], val)
        else:
            merged[key] = copy.deepcopy(val)
    return merged


def _walk(tree: Mapping[str, Any], path: tuple[str, ...]) -> Mapping[str, Any] | None:
    node: Any = tree
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node if isinstance(node, Mapping) else None


def copy_attributes(
    attributes: Mapping[str, Any] | None,
    options: Mapping[str, Any],
    *path: str,
) -> dict[str, Any]:
    """
    Resolve the effective attributes of an element or sub-element.

    Parameters
    ----------
    attributes : mapping or None
        Attributes given by the user when creating the (parent) element.
    options : mapping
        Board options, normally ``board.options``.
    *path : str
        Options path, e.g. ``('point',)`` or ``('slider', 'baseline')``.
        User attributes are looked up along ``path[1:]``, so the
        attributes of a slider's baseline come from ``attributes['baseline']``.

    Returns
    -------
    dict
        Fresh dict of lower-case keys. Nested sub-element sections of the
        options are not carried over into the result.
    """
    path = tuple(p.lower() for p in path)
    options = _lower_keys(options)
    attributes = _lower_keys(attributes or {})

    result = merge_options(options.get('elements', {}), None)

    node = _walk(options, path)
    if node is not None:
        result = merge_options(result, node)

    user = _walk(attributes, path[1:])
    if user is not None:
        result = merge_options(result, user)

    # Sub-element sections belong to the sub-elements, not to this element
    return {k: v for k, v in result.items() if not isinstance(v, dict)}
