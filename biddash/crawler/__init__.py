# -*- coding: utf-8 -*-
"""
Crawler Package
입찰 공고 API 조회 및 정규화 모듈
"""

from .g2b_client import G2BBidClient, mask_api_key
from .normalizer import MalformedItemError, normalize, normalize_item

__all__ = [
    'G2BBidClient',
    'mask_api_key',
    'MalformedItemError',
    'normalize',
    'normalize_item',
]
