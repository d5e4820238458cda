"""Showcase — эталонный сценарий BigInt / Rational.

Собственной арифметики не содержит: строит значения, выполняет операции
ядра и возвращает отрендеренные строки.

Разделы:
1. BigInt: построение из слотов, унарный минус, +, -, *
2. Rational: построение из BigInt, унарный минус, +, -, *, /
3. Дополнительные сценарии Rational: отрицательный знаменатель, нулевой
   числитель, равенство несокращённых дробей
"""

from dataclasses import dataclass
from typing import Optional

from src.core.math.bigint import BigInt
from src.core.math.rational import Rational


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ShowcaseConfig:
    """Конфигурация showcase: операнды BigInt-раздела.

    Значения по умолчанию: -12345 и 336699 (последний с двумя старшими
    нулевыми слотами, которые конструктор обрезает).
    """

    first_sign: bool = True
    first_digits: tuple[int, ...] = (45, 23, 1)
    second_sign: bool = False
    second_digits: tuple[int, ...] = (99, 66, 33, 0, 0)


# =============================================================================
# SHOWCASE
# =============================================================================


def run_showcase(config: Optional[ShowcaseConfig] = None) -> list[str]:
    """
    Выполнение эталонного сценария.

    Args:
        config: Операнды (default: ShowcaseConfig())

    Returns:
        Отрендеренные строки в порядке вывода
    """
    config = config or ShowcaseConfig()
    lines = ["--- Integer Tests ---"]

    i1 = BigInt.from_digits(config.first_sign, config.first_digits)
    i2 = BigInt.from_digits(config.second_sign, config.second_digits)
    lines.append(f"i1: {i1}, i2: {i2}")

    i3 = -i1
    i4 = i1 + i2
    lines.append(f"i3 (-i1): {i3}, i4 (i1 + i2): {i4}")

    i5 = i1 - i2
    i6 = i1 * i2
    lines.append(f"i5 (i1 - i2): {i5}, i6 (i1 * i2): {i6}")

    lines.append("")
    lines.append("--- Rational Tests ---")

    r1 = Rational.of(i1, i2)
    r2 = Rational.of(i4, i5)
    lines.append(f"r1: {r1}, r2: {r2}")

    lines.append(f"r3 (-r1): {-r1}, r4 (r1 + r2): {r1 + r2}, r5 (r1 - r2): {r1 - r2}")
    lines.append(f"r6 (r1 * r2): {r1 * r2}, r7 (r1 / r2): {r1 / r2}")

    lines.append("")
    lines.append("--- Additional Tests for the Rational Class ---")

    r_a = Rational.of(1, 2)
    r_b = Rational.of(3, 4)
    r_c = Rational.of(-1, 3)
    r_d = Rational.of(2, -5)
    r_zero_num = Rational.of(0, 2)

    lines.append(f"r_a: {r_a}")
    lines.append(f"r_b: {r_b}")
    lines.append(f"r_c: {r_c}")
    lines.append(f"r_d: {r_d}")
    lines.append(f"r_zero_num: {r_zero_num}")

    r_equiv = Rational.of(2, 4)
    lines.append(f"r_a == 1/2: {int(r_a == Rational.of(1, 2))}")
    lines.append(f"r_a == 2/4: {int(r_a == r_equiv)}")

    lines.append(f"-r_a: {-r_a}")
    lines.append(f"r_a + r_b: {r_a + r_b}")
    lines.append(f"r_a - r_b: {r_a - r_b}")
    lines.append(f"r_a * r_c: {r_a * r_c}")
    lines.append(f"r_a / r_b: {r_a / r_b}")

    return lines


def main() -> None:
    for line in run_showcase():
        print(line)
