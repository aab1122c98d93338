"""
Decimal 연산 유틸리티
"""

from decimal import (
    ROUND_HALF_UP, Decimal, DivisionByZero, InvalidOperation, getcontext, localcontext
)
from typing import Callable, Iterable, Optional, Type, TypeVar, Union

T = TypeVar('T')
N = TypeVar('N', int, float, Decimal)

DecimalSource = Union[str, int, float, Decimal]


def d(value: DecimalSource) -> Decimal:
    """
    문자열/숫자로 Decimal을 생성합니다.

    float는 repr 문자열을 거쳐 변환하므로 이진 부동소수점 오차가 들어가지 않습니다.

    Args:
        value: 원본 값

    Returns:
        Decimal: 생성된 값

    Raises:
        decimal.InvalidOperation: 숫자로 해석할 수 없는 문자열인 경우
    """
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _exponent(digits: int) -> Decimal:
    return Decimal(1).scaleb(-digits)


def _precision(adjusted: int, digits: int) -> int:
    # 결과 계수를 정확히 담을 수 있는 자릿수
    return max(adjusted + digits + 2, getcontext().prec)


def scale(value: Decimal, digits: int) -> Decimal:
    """
    소수점 이하 자릿수를 맞춥니다 (ROUND_HALF_UP, 사사오입).

    자릿수 제한 없이 한 번만 반올림합니다.

    Args:
        value: 원본 값
        digits: 소수점 이하 자릿수

    Returns:
        Decimal: 자릿수가 조정된 값
    """
    with localcontext() as ctx:
        if value.is_finite():
            ctx.prec = _precision(value.adjusted(), digits)
        return value.quantize(_exponent(digits), rounding=ROUND_HALF_UP)


def div(a: Decimal, b: Decimal, digits: int) -> Decimal:
    """
    나눗셈 결과를 지정한 자릿수로 반올림합니다 (ROUND_HALF_UP).

    몫을 정수 나눗셈으로 정확히 계산한 뒤 한 번만 반올림합니다.

    Args:
        a: 피제수
        b: 제수
        digits: 결과의 소수점 이하 자릿수

    Returns:
        Decimal: 나눗셈 결과

    Raises:
        decimal.DivisionByZero: 제수가 0인 경우
        decimal.InvalidOperation: 무한대 또는 NaN이 포함된 경우
    """
    a, b = Decimal(a), Decimal(b)
    if not (a.is_finite() and b.is_finite()):
        raise InvalidOperation(f"Cannot divide {a} by {b}")
    if b.is_zero():
        raise DivisionByZero("division by zero")

    a_sign, a_digits, a_exp = a.as_tuple()
    b_sign, b_digits, b_exp = b.as_tuple()
    numerator = int("".join(map(str, a_digits)))
    denominator = int("".join(map(str, b_digits)))

    # a * 10^digits / b = numerator * 10^shift / denominator
    shift = a_exp + digits - b_exp
    if shift >= 0:
        numerator *= 10 ** shift
    else:
        denominator *= 10 ** -shift

    quotient, remainder = divmod(numerator, denominator)
    if 2 * remainder >= denominator:
        quotient += 1

    sign = (a_sign ^ b_sign) if quotient else 0
    return Decimal((sign, tuple(int(c) for c in str(quotient)), -digits))


def parse_number(value: Optional[str], number_type: Type[N] = int) -> Optional[N]:
    """
    문자열을 숫자로 파싱합니다. 실패하면 None을 반환합니다.

    Args:
        value: 파싱할 문자열
        number_type: int, float 또는 Decimal

    Returns:
        Optional[N]: 파싱된 값 (실패한 경우 None)
    """
    if value is None:
        return None
    try:
        return number_type(value)
    except (ValueError, TypeError, InvalidOperation):
        return None


def total(iterable: Iterable[T], mapper: Callable[[T], Decimal]) -> Decimal:
    """
    컬렉션 요소들을 Decimal로 변환해 합계를 계산합니다.

    Args:
        iterable: 원본 컬렉션
        mapper: 요소 -> Decimal 변환 함수

    Returns:
        Decimal: 합계 (빈 컬렉션인 경우 0)
    """
    return sum((mapper(item) for item in iterable), Decimal(0))
