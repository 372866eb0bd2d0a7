#!/usr/bin/env python
# -*- coding: utf-8 -*-

import math

import numpy as np

from raytracer.settings import DOUBLE


class Vec3(object):
    """3次元ベクトル"""

    __slots__ = ('x', 'y', 'z')

    def __init__(self, x, y, z):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_array(cls, array):
        x, y, z = array
        return cls(x, y, z)

    def as_array(self):
        """
        :rtype: numpy.ndarray
        """
        return np.array((self.x, self.y, self.z), dtype=DOUBLE)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return 'Vec3({0!r}, {1!r}, {2!r})'.format(self.x, self.y, self.z)

    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, k):
        if isinstance(k, Vec3):
            return NotImplemented
        return Vec3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k):
        return Vec3(self.x / k, self.y / k, self.z / k)

    def norm(self):
        """長さの2乗"""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self):
        return math.sqrt(self.norm())

    def normalize(self):
        """単位ベクトルを求める処理

        :raises ZeroDivisionError: ゼロベクトルのとき
        """
        magnitude = self.magnitude()
        if magnitude == 0:
            raise ZeroDivisionError('cannot normalize a zero vector')
        return self / magnitude

    def dot(self, other):
        return float(np.dot(self.as_array(), other.as_array()))

    def cross(self, other):
        return Vec3.from_array(
            np.cross(self.as_array(), other.as_array()).tolist())
