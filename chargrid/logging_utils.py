# -*- coding: utf-8 -*-
"""
chargrid パッケージのログ設定をまとめたモジュールです。

ポイント:
- グリッド構築時の注意（列数の補正、空入力、空ファイル）は
  例外ではなく WARNING ログとして通知します。
- ファイルの読み書きに失敗した場合は ERROR ログを出したうえで
  GridIOError を送出します。
- CLI の ``--log-level`` は :func:`set_log_level` を通して反映されます。
"""

from __future__ import annotations

import logging
from typing import Union

from .config import DEFAULT_LOG_LEVEL, LOGGER_NAME


def get_logger() -> logging.Logger:
    """
    chargrid 全体で共通して使う logger（名前: ``config.LOGGER_NAME``）を返します。

    初回呼び出し時にだけコンソール出力用の handler を取り付け、
    レベルを ``config.DEFAULT_LOG_LEVEL`` に設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] [%(name)s] %(message)s")
        )
        logger.addHandler(console)
        logger.setLevel(DEFAULT_LOG_LEVEL)

    return logger


def set_log_level(level: Union[str, int]) -> logging.Logger:
    """
    パッケージ logger のレベルを変更します。

    Parameters
    ----------
    level : str or int
        ``"debug"`` / ``"WARNING"`` のようなレベル名、または ``logging.INFO`` などの数値。
        レベル名の大文字・小文字は区別しません。
    """
    logger = get_logger()
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
