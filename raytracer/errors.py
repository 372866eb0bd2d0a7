#!/usr/bin/env python
# -*- coding: utf-8 -*-


class RaytracerError(Exception):
    pass


class OutOfBoundsError(RaytracerError, IndexError):
    """Raised when a pixel outside of the canvas is written"""

    def __init__(self, row, column, height, width):
        self.row = row
        self.column = column
        self.height = height
        self.width = width
        super().__init__(
            'pixel ({0}, {1}) is outside of the {2}x{3} canvas'.format(
                row, column, height, width))
