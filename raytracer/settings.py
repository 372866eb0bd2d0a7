#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np


DOUBLE = np.float64

# 各色の階調数 (bit)
DEPTH = 8
MAX_COLOR_VALUE = 2 ** DEPTH - 1

PPM_MAGIC = 'P3'
# 古い PPM リーダは 70 文字を超える行を読めない
MAX_LINE_WIDTH = 70

DEFAULT_EPSILON = float(np.finfo(DOUBLE).eps)
DEFAULT_MAX_RELATIVE = float(np.finfo(DOUBLE).eps)
DEFAULT_MAX_ULPS = 4
