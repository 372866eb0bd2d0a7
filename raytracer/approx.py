#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""浮動小数点数の近似比較

数値, :class:`raytracer.color.Color`, :class:`raytracer.vector.Vec3`,
数値のシーケンスを受け取り, 成分ごとに比較する.
すべての成分が等しいとみなせるときのみ True を返す.
"""

import numpy as np

from raytracer.settings import (DEFAULT_EPSILON, DEFAULT_MAX_RELATIVE,
                                DEFAULT_MAX_ULPS, DOUBLE)


ABSOLUTE = 'absolute'
RELATIVE = 'relative'
ULPS = 'ulps'


def _as_array(value):
    if hasattr(value, 'as_array'):
        value = value.as_array()
    return np.atleast_1d(np.asarray(value, dtype=DOUBLE))


def _pair(a, b):
    a = _as_array(a)
    b = _as_array(b)
    if a.shape != b.shape:
        raise ValueError('cannot compare values of shape {0} and {1}'.format(
            a.shape, b.shape))
    return a, b


def abs_diff_eq(a, b, epsilon=DEFAULT_EPSILON):
    """差の絶対値が epsilon 以下であれば等しいとみなす

    :param float epsilon: 許容する差の絶対値
    :rtype: bool
    """
    a, b = _pair(a, b)
    with np.errstate(invalid='ignore'):
        close = np.abs(a - b) <= epsilon
    return bool(np.all((a == b) | close))


def relative_eq(a, b, epsilon=DEFAULT_EPSILON,
                max_relative=DEFAULT_MAX_RELATIVE):
    """差が epsilon 以下か, 大きい方の絶対値の max_relative 倍以下であれば
    等しいとみなす

    :param float epsilon: 0 付近で使う差の絶対値の許容量
    :param float max_relative: 許容する相対誤差
    :rtype: bool
    """
    a, b = _pair(a, b)
    with np.errstate(invalid='ignore', over='ignore'):
        diff = np.abs(a - b)
        largest = np.maximum(np.abs(a), np.abs(b))
        close = (diff <= epsilon) | (diff <= largest * max_relative)
    # 無限大同士は完全一致のときのみ等しい
    close &= np.isfinite(a) & np.isfinite(b)
    return bool(np.all((a == b) | close))


def ulps_eq(a, b, epsilon=DEFAULT_EPSILON, max_ulps=DEFAULT_MAX_ULPS):
    """差が epsilon 以下か, 表現可能な浮動小数点数 max_ulps 個以内であれば
    等しいとみなす

    :param float epsilon: 0 付近で使う差の絶対値の許容量
    :param int max_ulps: 許容する ULP (unit in the last place) の数
    :rtype: bool
    """
    a, b = _pair(a, b)
    with np.errstate(invalid='ignore'):
        close = (a == b) | (np.abs(a - b) <= epsilon)
    # 符号が異なれば ULP の比較は意味をなさない
    same_sign = np.signbit(a) == np.signbit(b)
    ulps = np.abs(a.view(np.int64) - b.view(np.int64))
    finite = np.isfinite(a) & np.isfinite(b)
    return bool(np.all(close | (same_sign & finite & (ulps <= max_ulps))))


_POLICIES = {
    ABSOLUTE: abs_diff_eq,
    RELATIVE: relative_eq,
    ULPS: ulps_eq,
}


def approx_equal(a, b, epsilon=DEFAULT_EPSILON, policy=ABSOLUTE, **kwargs):
    """policy で選んだ比較方法で a と b を比較する

    :param float epsilon: 許容する差の絶対値
    :param str policy: ``'absolute'``, ``'relative'``, ``'ulps'`` のいずれか
    :param kwargs: ``max_relative`` や ``max_ulps`` など比較方法ごとの引数
    :rtype: bool
    """
    try:
        compare = _POLICIES[policy]
    except KeyError:
        raise ValueError('unknown comparison policy: {0!r}'.format(policy))
    return compare(a, b, epsilon=epsilon, **kwargs)
