"""
Rendering — десятичное текстовое представление BigInt и Rational

Единственная внешняя поверхность арифметического ядра:
- BigInt: "0" для нуля; иначе опциональный "-", старший слот без
  дополнения, каждый следующий слот дополнен нулями до DIGIT_WIDTH
- Rational: представление числителя; если знаменатель не равен единице,
  добавляется "/" и представление знаменателя

Парсинга из текста нет: значения строятся только из int или digit-слотов.
"""

from typing import Optional

from src.core.math.magnitude import DIGIT_WIDTH, Digits


def render_digits(sign: bool, digits: Digits) -> str:
    """
    Рендеринг знака и модуля в десятичную строку.

    Args:
        sign: True для отрицательного значения
        digits: Нормализованный модуль (least-significant first)

    Returns:
        Десятичная строка

    Examples:
        >>> render_digits(True, (45, 23, 1))
        '-12345'
        >>> render_digits(False, (5, 0, 7))
        '70005'
        >>> render_digits(False, ())
        '0'
    """
    if not digits:
        return "0"

    parts = ["-"] if sign else []
    parts.append(str(digits[-1]))
    parts.extend(f"{slot:0{DIGIT_WIDTH}d}" for slot in reversed(digits[:-1]))
    return "".join(parts)


def render_fraction(numerator: str, denominator: Optional[str] = None) -> str:
    """
    Рендеринг дроби из уже отрендеренных числителя и знаменателя.

    Args:
        numerator: Строка числителя
        denominator: Строка знаменателя или None, если знаменатель равен 1

    Returns:
        "n" или "n/d"
    """
    if denominator is None:
        return numerator
    return f"{numerator}/{denominator}"
