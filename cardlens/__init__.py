"""
CardLens
신용카드 신청서 자동 심사 엔진
"""

__version__ = "0.1.0"
