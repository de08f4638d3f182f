# -*- coding: utf-8 -*-
"""
BidDash
나라장터 입찰공고 조회 대시보드
"""

__version__ = "1.0.0"
