#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import numbers

import numpy as np

from raytracer.color import Color, quantize
from raytracer.errors import OutOfBoundsError
from raytracer.settings import DOUBLE


logger = logging.getLogger(__name__)


class Canvas(object):
    """色を格納する2次元の画素の配列

    画素は1次元の配列に行優先で並べる (index = row * width + column).
    """

    def __init__(self, height, width):
        """
        :param int height: 行数
        :param int width: 列数
        """
        for name, value in (('height', height), ('width', width)):
            if (isinstance(value, bool) or
                    not isinstance(value, numbers.Integral)):
                raise ValueError('{0} must be an int, not {1!r}'.format(
                    name, value))
            if value < 0:
                raise ValueError('{0} must not be negative: {1}'.format(
                    name, value))
        self.height = int(height)
        self.width = int(width)
        # 黒で初期化
        self.data = np.zeros((self.height * self.width, 3), dtype=DOUBLE)
        logger.debug('Created {0}x{1} canvas'.format(height, width))

    def __len__(self):
        return self.height * self.width

    def __repr__(self):
        return 'Canvas(height={0}, width={1})'.format(self.height, self.width)

    def _index(self, row, column):
        """範囲外であれば None を返す"""
        if 0 <= row < self.height and 0 <= column < self.width:
            return row * self.width + column
        return None

    def get(self, row, column):
        """画素の色を取得する処理

        :param int row: 行
        :param int column: 列
        :return: 範囲外であれば None
        :rtype: Color or None
        """
        index = self._index(row, column)
        if index is None:
            return None
        return Color.from_array(self.data[index].tolist())

    def set(self, row, column, color):
        """画素に色を書き込む処理

        :param int row: 行
        :param int column: 列
        :param Color color: 色
        :raises OutOfBoundsError: 範囲外の画素を指定したとき
        """
        index = self._index(row, column)
        if index is None:
            raise OutOfBoundsError(row, column, self.height, self.width)
        self.data[index] = color.as_array()

    def fill(self, color):
        """すべての画素を同じ色で塗りつぶす処理"""
        self.data[:] = color.as_array()
        logger.debug('Filled {0!r} with {1}'.format(self, color))

    def __getitem__(self, key):
        row, column = key
        color = self.get(row, column)
        if color is None:
            raise OutOfBoundsError(row, column, self.height, self.width)
        return color

    def __setitem__(self, key, color):
        row, column = key
        self.set(row, column, color)

    def pixels(self):
        """格納順に画素の色を返す"""
        for values in self.data.tolist():
            yield Color.from_array(values)

    def rows(self):
        """行ごとに画素の色のリストを返す"""
        for row in range(self.height):
            yield [self.get(row, column) for column in range(self.width)]

    def to_rgb8_array(self):
        """すべての画素を 8 bit に変換する処理

        :rtype: numpy.ndarray
        """
        return quantize(self.data)
