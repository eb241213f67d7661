"""
Float Formats — IEEE-754 форматы фиксированной ширины

Модуль описывает двоичные форматы binary32 и binary64 как значения-конфигурации
и предоставляет над ними общий набор операций:
- Приведение сырого числа к ширине формата (round-to-nearest)
- Проверка конечности и классификация нечисловых значений (NaN, ±Inf)
- Реинтерпретация битового представления как беззнакового целого
- IEEE-арифметика без исключений (деление на ноль → ±Inf/NaN)

Все вычисления выполняются скалярами numpy нужной ширины, поэтому результат
binary32-операции округляется именно до binary32, а не до double.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметика формата никогда не бросает исключений и не печатает warnings
2. Классификация выполняется по IEEE-категории уже приведённого значения
3. Строки и bool не являются числами и не приводятся
"""

import math
import numbers
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Final

import numpy as np


# =============================================================================
# ENUMS
# =============================================================================


class NonFiniteKind(str, Enum):
    """Категория не-конечного значения"""

    NAN = "NaN"
    POSITIVE_INFINITY = "PositiveInfinity"
    NEGATIVE_INFINITY = "NegativeInfinity"


# =============================================================================
# FLOAT FORMAT
# =============================================================================


@dataclass(frozen=True)
class FloatFormat:
    """Двоичный формат с плавающей точкой фиксированной ширины.

    Attributes:
        name: Короткое имя формата ("f32", "f64")
        bits: Ширина формата в битах
        dtype: Скалярный тип numpy для значений формата
        bits_dtype: Беззнаковый целый тип той же ширины (для битовых view)
    """

    name: str
    bits: int
    dtype: type
    bits_dtype: type

    def coerce(self, raw: Any) -> np.floating:
        """
        Приведение сырого числа к скаляру данного формата.

        Значения за пределами диапазона формата становятся ±Inf,
        NaN остаётся NaN.

        Args:
            raw: int, float или скаляр numpy (целый или с плавающей точкой)

        Returns:
            Скаляр numpy ширины формата

        Raises:
            TypeError: Если raw не является вещественным числом (str, bool, None)
        """
        if isinstance(raw, (bool, np.bool_)) or not isinstance(raw, numbers.Real):
            raise TypeError(
                f"{self.name} expects a real number, got {type(raw).__name__}"
            )

        if not isinstance(raw, np.generic):
            try:
                raw = float(raw)
            except OverflowError:
                # Целое вне диапазона double
                raw = math.inf if raw > 0 else -math.inf

        with np.errstate(over="ignore", invalid="ignore"):
            return self.dtype(raw)

    def is_finite(self, raw: Any) -> bool:
        """Проверка, что значение конечно после приведения к формату"""
        return bool(np.isfinite(self.coerce(raw)))

    def classify(self, raw: Any) -> NonFiniteKind | None:
        """
        IEEE-категория не-конечного значения.

        Args:
            raw: Сырое число

        Returns:
            NonFiniteKind для NaN/+Inf/-Inf, None для конечного значения
        """
        value = self.coerce(raw)

        if np.isnan(value):
            return NonFiniteKind.NAN
        if np.isinf(value):
            if value > 0:
                return NonFiniteKind.POSITIVE_INFINITY
            return NonFiniteKind.NEGATIVE_INFINITY
        return None

    def to_bits(self, raw: Any) -> int:
        """
        Битовое представление значения как беззнаковое целое ширины формата.

        Examples:
            >>> F32.to_bits(1.0)
            1065353216
            >>> F64.to_bits(-0.0)
            9223372036854775808
        """
        return int(self.coerce(raw).view(self.bits_dtype))

    # -------------------------------------------------------------------------
    # IEEE-арифметика
    # -------------------------------------------------------------------------

    def add(self, lhs: Any, rhs: Any) -> np.floating:
        return self._apply(operator.add, lhs, rhs)

    def sub(self, lhs: Any, rhs: Any) -> np.floating:
        return self._apply(operator.sub, lhs, rhs)

    def mul(self, lhs: Any, rhs: Any) -> np.floating:
        return self._apply(operator.mul, lhs, rhs)

    def div(self, lhs: Any, rhs: Any) -> np.floating:
        """Деление по IEEE: x/0 → ±Inf, 0/0 → NaN (без ZeroDivisionError)"""
        return self._apply(operator.truediv, lhs, rhs)

    def _apply(
        self, op: Callable[[Any, Any], Any], lhs: Any, rhs: Any
    ) -> np.floating:
        a = self.coerce(lhs)
        b = self.coerce(rhs)
        with np.errstate(all="ignore"):
            return self.dtype(op(a, b))


# =============================================================================
# ФОРМАТЫ
# =============================================================================

# IEEE-754 binary32 (single precision)
F32: Final[FloatFormat] = FloatFormat(
    name="f32", bits=32, dtype=np.float32, bits_dtype=np.uint32
)

# IEEE-754 binary64 (double precision)
F64: Final[FloatFormat] = FloatFormat(
    name="f64", bits=64, dtype=np.float64, bits_dtype=np.uint64
)
