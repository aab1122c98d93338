"""
금액/수량 포맷 유틸리티
"""

from decimal import Decimal
from typing import Optional, Union

from babel import Locale
from babel.numbers import format_decimal

from .text import null_safe_str


def format_amount(
    value: Decimal,
    scale: Optional[int],
    currency: bool,
    symbol_at_start: bool,
    symbol: Optional[str],
    locale: Union[str, Locale] = "en"
) -> str:
    """
    금액(통화) 또는 수량(상품)을 로케일에 맞게 포맷합니다.

    통화는 소수점 이하를 정확히 scale 자리로 맞추고, 상품은 scale 자리까지 표시하되
    끝자리 0은 생략합니다 (예: 0.10000 g -> 0.1 g).

    Args:
        value: 포맷할 값
        scale: 소수점 이하 자릿수 (None인 경우 0)
        currency: 통화이면 True, 상품(수량)이면 False
        symbol_at_start: 기호를 앞에 붙이면 True, 뒤에 붙이면 False
        symbol: 통화/상품 기호
        locale: 그룹/소수 구분자를 결정하는 로케일

    Returns:
        str: 포맷된 문자열
    """
    digits = scale or 0
    fraction = ("0" if currency else "#") * digits
    pattern = "#,##0" + ("." + fraction if digits else "")

    text = format_decimal(value, format=pattern, locale=locale)
    if symbol_at_start:
        return null_safe_str(symbol) + text
    return text + null_safe_str(symbol)
