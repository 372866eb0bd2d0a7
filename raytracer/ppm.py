#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from raytracer.settings import MAX_COLOR_VALUE, MAX_LINE_WIDTH, PPM_MAGIC


logger = logging.getLogger(__name__)


def wrap_tokens(tokens, width=MAX_LINE_WIDTH):
    """トークンを1行 width 文字以内の行にまとめる処理

    トークンを追加すると width を超える場合は, 追加する前に改行する.
    トークンの途中では改行しない.

    :param tokens: 末尾に空白を含むトークン
    :param int width: 1行の最大文字数
    :rtype: list
    """
    lines = []
    line = ''
    for token in tokens:
        if line and len(line) + len(token) > width:
            lines.append(line)
            line = ''
        line += token
    if line:
        lines.append(line)
    return lines


def _body_lines(canvas):
    """画素を走査線ごとに折り返した行のリストを返す処理

    走査線はキャンバスの行ではなく, 格納順に height 個ずつ区切った画素の並び.
    そのため width が height と異なると, 1行の画素が2つの走査線にまたがる.
    """
    rgb = canvas.to_rgb8_array()
    assert len(rgb) == canvas.height * canvas.width, 'corrupted canvas buffer'
    if len(rgb) == 0:
        return []

    lines = []
    # 1走査線はヘッダの1つ目の値 (height) 個の画素
    for scanline in rgb.reshape(canvas.width, canvas.height * 3):
        tokens = ('{0:d} '.format(value) for value in scanline.tolist())
        lines.extend(wrap_tokens(tokens))
    return lines


def ppm_from_canvas(canvas, name=None):
    """キャンバスを PPM (P3) 形式の文字列に変換する処理

    :param raytracer.canvas.Canvas canvas:
    :param name: ヘッダにコメントとして書き込む名前
    :type name: str or None
    :raises ValueError: name に改行が含まれるとき
    :rtype: str
    """
    header = [PPM_MAGIC]
    if name is not None:
        if '\n' in name or '\r' in name:
            raise ValueError('name must not contain line breaks: {0!r}'.format(
                name))
        header.append('# ' + name)
    header.append('{0:d} {1:d}'.format(canvas.height, canvas.width))
    header.append('{0:d}'.format(MAX_COLOR_VALUE))

    lines = _body_lines(canvas)
    body = '\n'.join(lines).rstrip()
    if body:
        header.append(body)
    logger.debug('Encoded {0!r} into {1:d} body lines'.format(
        canvas, len(lines)))
    return '\n'.join(header) + '\n'


encode = ppm_from_canvas


class PpmImage(object):
    """PPM 画像を表すクラス"""

    def __init__(self, canvas, name=None):
        """
        :param raytracer.canvas.Canvas canvas:
        :param name: 画像の名前
        :type name: str or None
        """
        self.canvas = canvas
        self.name = name

    def dumps(self):
        return ppm_from_canvas(self.canvas, name=self.name)

    def dump(self, fp):
        """ファイルに画像データを書き込む処理"""
        fp.write(self.dumps())
