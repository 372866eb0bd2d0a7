#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

from raytracer.settings import DOUBLE, MAX_COLOR_VALUE


def quantize(array, depth=MAX_COLOR_VALUE):
    """0.0-1.0 の色を 0-depth の整数に変換する処理

    四捨五入した後に 0-depth の範囲に飽和させる

    :param numpy.ndarray array: 色の配列 (任意の形)
    :param int depth: 最大値
    :rtype: numpy.ndarray
    """
    scaled = np.floor(np.asarray(array, dtype=DOUBLE) * depth + 0.5)
    # NaN は黒として扱う
    scaled = np.nan_to_num(scaled, nan=0.0)
    return np.clip(scaled, 0, depth).astype(np.uint8)


class Color(object):
    """色を表すクラス

    各チャンネルの値は制限しない (光の計算の途中では負や 1.0 を超える値になる).
    8 bit への変換時にのみ飽和させる.
    """

    __slots__ = ('r', 'g', 'b')

    def __init__(self, r, g, b):
        """
        :param r: 赤
        :param g: 緑
        :param b: 青
        """
        object.__setattr__(self, 'r', r)
        object.__setattr__(self, 'g', g)
        object.__setattr__(self, 'b', b)

    def __setattr__(self, name, value):
        raise AttributeError('Color is immutable')

    def __reduce__(self):
        # copy, pickle は __setattr__ を通さずコンストラクタで復元する
        return Color, (self.r, self.g, self.b)

    @classmethod
    def from_array(cls, array):
        r, g, b = array
        return cls(r, g, b)

    def as_array(self):
        """
        :rtype: numpy.ndarray
        """
        return np.array((self.r, self.g, self.b), dtype=DOUBLE)

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __hash__(self):
        return hash((self.r, self.g, self.b))

    def __repr__(self):
        return 'Color({0!r}, {1!r}, {2!r})'.format(self.r, self.g, self.b)

    def __str__(self):
        return '({0!r}, {1!r}, {2!r})'.format(self.r, self.g, self.b)

    def __add__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other):
        # 色同士の積はチャンネルごと (光源の色と物体の色の合成)
        if isinstance(other, Color):
            return self.multiply(other)
        return self.scale(other)

    def __rmul__(self, other):
        if isinstance(other, Color):
            return NotImplemented
        return self.scale(other)

    def scale(self, k):
        return Color(self.r * k, self.g * k, self.b * k)

    def multiply(self, other):
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def to_rgb8(self):
        """8 bit の色に変換する処理

        :rtype: Color
        """
        r, g, b = quantize(self.as_array())
        return Color(int(r), int(g), int(b))

    to_8bit = to_rgb8


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
