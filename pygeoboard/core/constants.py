"""
Constants for pygeoboard.

This module is the SINGLE SOURCE OF TRUTH for element type strings and
numeric sentinels. Import from here, never use raw strings.
"""

# Numerical epsilon below which lengths are treated as zero
EPS = 1e-6

# snapwidth value that switches snapping off
SNAP_DISABLED = -1

# Element types
OBJECT_TYPE_POINT = 'point'
OBJECT_TYPE_GLIDER = 'glider'
OBJECT_TYPE_LINE = 'line'
OBJECT_TYPE_SEGMENT = 'segment'
OBJECT_TYPE_GROUP = 'group'
OBJECT_TYPE_TICKS = 'ticks'
OBJECT_TYPE_TEXT = 'text'
OBJECT_TYPE_SLIDER = 'slider'

ALL_OBJECT_TYPES = frozenset({
    OBJECT_TYPE_POINT,
    OBJECT_TYPE_GLIDER,
    OBJECT_TYPE_LINE,
    OBJECT_TYPE_SEGMENT,
    OBJECT_TYPE_GROUP,
    OBJECT_TYPE_TICKS,
    OBJECT_TYPE_TEXT,
    OBJECT_TYPE_SLIDER,
})

__all__ = [
    'EPS',
    'SNAP_DISABLED',
    'OBJECT_TYPE_POINT',
    'OBJECT_TYPE_GLIDER',
    'OBJECT_TYPE_LINE',
    'OBJECT_TYPE_SEGMENT',
    'OBJECT_TYPE_GROUP',
    'OBJECT_TYPE_TICKS',
    'OBJECT_TYPE_TEXT',
    'OBJECT_TYPE_SLIDER',
    'ALL_OBJECT_TYPES',
]
