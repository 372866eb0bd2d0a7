#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from raytracer.canvas import Canvas
from raytracer.color import Color
from raytracer.errors import OutOfBoundsError, RaytracerError
from raytracer.ppm import PpmImage, encode, ppm_from_canvas
from raytracer.vector import Vec3

__version__ = '0.1'

logging.getLogger(__name__).addHandler(logging.NullHandler())
