"""
FiniteFloat — Конечное число с плавающей точкой

Immutable Pydantic value object, гарантирующий на границе API, что хранимое
значение не является NaN, +Inf или -Inf. Проверка конечности выполняется один
раз при создании, а не в каждой точке использования.

Благодаря инварианту:
- Равенство является отношением эквивалентности (a == a для любого a)
- Порядок между двумя FiniteFloat полный (нет "unordered")
- Хэш можно считать по битовому представлению значения

Это делает FiniteFloat пригодным как ключ для dict/set, для sorted, heapq и bisect.

Две ширины: FiniteF32 (binary32) и FiniteF64 (binary64). Поведение общее,
ширина задаётся FloatFormat на уровне класса.
"""

import logging
import numbers
from enum import Enum
from typing import Any, ClassVar, TypeVar

import numpy as np
from pydantic import BaseModel, Field, field_validator

from src.core.math.float_formats import F32, F64, FloatFormat, NonFiniteKind

logger = logging.getLogger(__name__)

_FiniteT = TypeVar("_FiniteT", bound="FiniteFloat")


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат трёхстороннего сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# ERRORS
# =============================================================================


class FiniteFloatConversionError(ValueError):
    """
    Отказ в создании FiniteFloat из не-конечного значения.

    Attributes:
        kind: Категория отклонённого значения (NaN, +Inf, -Inf)
        raw: Исходное значение
    """

    def __init__(self, kind: NonFiniteKind, raw: Any):
        self.kind = kind
        self.raw = raw
        super().__init__(f"Cannot convert {raw!r} to a finite float: {kind.value}")


# =============================================================================
# FINITE FLOAT MODEL
# =============================================================================


class FiniteFloat(BaseModel):
    """
    Базовая модель конечного числа с плавающей точкой.

    Immutable модель (frozen=True). Ширина задаётся атрибутом класса
    float_format; напрямую используются подклассы FiniteF32 и FiniteF64.

    Создание:
    - new(raw): экземпляр или None
    - try_from(raw): экземпляр или FiniteFloatConversionError с категорией
    - FiniteF64(raw): валидация Pydantic (ValidationError для NaN/Inf)

    Арифметика в двух вариантах:
    - Операторы + - * / и add/sub/mul/div: сырой результат ширины формата,
      никогда не падают (переполнение → Inf, 0/0 → NaN)
    - checked_add/checked_sub/checked_mul/checked_div: FiniteFloat или None,
      если результат не конечен
    """

    float_format: ClassVar[FloatFormat]

    value: float = Field(..., description="Конечное значение, точно представимое в формате")

    model_config = {"frozen": True}

    def __init__(self, value: Any) -> None:
        type(self).width_format()
        super().__init__(value=value)

    @classmethod
    def width_format(cls) -> FloatFormat:
        """
        Формат ширины класса.

        Raises:
            TypeError: Если класс не задаёт float_format (базовый FiniteFloat)
        """
        float_format = getattr(cls, "float_format", None)
        if float_format is None:
            raise TypeError(
                f"{cls.__name__} has no float_format, use FiniteF32 or FiniteF64"
            )
        return float_format

    @field_validator("value", mode="before")
    @classmethod
    def validate_finite(cls, v: Any) -> float:
        """Значение приводится к ширине формата и должно быть конечным"""
        float_format = cls.width_format()
        kind = float_format.classify(v)
        if kind is not None:
            raise ValueError(f"{cls.__name__} value must be finite, got {kind.value}")
        return float(float_format.coerce(v))

    # Методы Pydantic, создающие экземпляр в обход валидации, проходят через __init__

    @classmethod
    def model_construct(
        cls: type[_FiniteT], _fields_set: set[str] | None = None, **values: Any
    ) -> _FiniteT:
        return cls(**values)

    def model_copy(
        self: _FiniteT, *, update: dict[str, Any] | None = None, deep: bool = False
    ) -> _FiniteT:
        return type(self)(**{"value": self.value, **(update or {})})

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls: type[_FiniteT], raw: Any) -> _FiniteT | None:
        """
        Создание конечного значения.

        Args:
            raw: Сырое число

        Returns:
            Экземпляр, если raw конечно в формате класса, иначе None

        Raises:
            TypeError: Если raw не является вещественным числом
        """
        if not cls.width_format().is_finite(raw):
            return None
        return cls(raw)

    @classmethod
    def try_from(cls: type[_FiniteT], raw: Any) -> _FiniteT:
        """
        Создание конечного значения с классифицированной ошибкой.

        Args:
            raw: Сырое число

        Returns:
            Экземпляр для конечного raw

        Raises:
            FiniteFloatConversionError: Если raw равно NaN, +Inf или -Inf
            TypeError: Если raw не является вещественным числом
        """
        kind = cls.width_format().classify(raw)
        if kind is not None:
            logger.debug(f"{cls.__name__} rejected {raw!r} ({kind.value})")
            raise FiniteFloatConversionError(kind, raw)
        return cls(raw)

    # -------------------------------------------------------------------------
    # Доступ к значению
    # -------------------------------------------------------------------------

    def get(self) -> np.floating:
        """Сырое значение как скаляр numpy ширины формата"""
        return self.float_format.dtype(self.value)

    def bits(self) -> int:
        """
        Каноническое битовое представление значения.

        -0.0 и +0.0 равны, поэтому оба дают биты +0.0.
        """
        value = 0.0 if self.value == 0.0 else self.value
        return self.float_format.to_bits(value)

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"

    def __str__(self) -> str:
        return str(self.get())

    # -------------------------------------------------------------------------
    # Равенство, порядок, хэш
    # -------------------------------------------------------------------------

    def _operand(self, other: Any) -> np.floating | None:
        """Правый операнд в формате self; None, если тип не поддерживается"""
        if isinstance(other, FiniteFloat):
            if other.float_format != self.float_format:
                return None
            return other.get()
        if isinstance(other, numbers.Real) and not isinstance(other, (bool, np.bool_)):
            return self.float_format.coerce(other)
        return None

    def _require_operand(self, other: Any) -> np.floating:
        rhs = self._operand(other)
        if rhs is None:
            raise TypeError(
                f"unsupported operand for {type(self).__name__}: {type(other).__name__}"
            )
        return rhs

    def __eq__(self, other: object) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return bool(self.get() == rhs)

    def __ne__(self, other: object) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return bool(self.get() != rhs)

    def __lt__(self, other: Any) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return bool(self.get() < rhs)

    def __le__(self, other: Any) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return bool(self.get() <= rhs)

    def __gt__(self, other: Any) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return bool(self.get() > rhs)

    def __ge__(self, other: Any) -> bool:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return bool(self.get() >= rhs)

    def __hash__(self) -> int:
        return hash(self.bits())

    def cmp(self: _FiniteT, other: _FiniteT) -> Ordering:
        """
        Полное трёхстороннее сравнение двух конечных значений.

        Raises:
            TypeError: Если other не FiniteFloat той же ширины
        """
        if not isinstance(other, FiniteFloat) or other.float_format != self.float_format:
            raise TypeError(
                f"{type(self).__name__}.cmp expects {type(self).__name__}, "
                f"got {type(other).__name__}"
            )
        a, b = self.get(), other.get()
        if a < b:
            return Ordering.LESS
        if a > b:
            return Ordering.GREATER
        return Ordering.EQUAL

    def partial_cmp(self, other: Any) -> Ordering | None:
        """
        Сравнение с сырым числом или FiniteFloat.

        Returns:
            Ordering или None, если other равно NaN (unordered)
        """
        rhs = self._require_operand(other)
        a = self.get()
        if a < rhs:
            return Ordering.LESS
        if a > rhs:
            return Ordering.GREATER
        if a == rhs:
            return Ordering.EQUAL
        return None

    # -------------------------------------------------------------------------
    # Арифметика: сырой результат
    # -------------------------------------------------------------------------

    def add(self, other: Any) -> np.floating:
        return self.float_format.add(self.get(), self._require_operand(other))

    def sub(self, other: Any) -> np.floating:
        return self.float_format.sub(self.get(), self._require_operand(other))

    def mul(self, other: Any) -> np.floating:
        return self.float_format.mul(self.get(), self._require_operand(other))

    def div(self, other: Any) -> np.floating:
        return self.float_format.div(self.get(), self._require_operand(other))

    def __add__(self, other: Any) -> np.floating:
        if self._operand(other) is None:
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> np.floating:
        if self._operand(other) is None:
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> np.floating:
        if self._operand(other) is None:
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Any) -> np.floating:
        if self._operand(other) is None:
            return NotImplemented
        return self.div(other)

    def __neg__(self: _FiniteT) -> _FiniteT:
        return type(self)(-self.get())

    def __abs__(self: _FiniteT) -> _FiniteT:
        return type(self)(abs(self.get()))

    # -------------------------------------------------------------------------
    # Арифметика: checked
    # -------------------------------------------------------------------------

    def checked_add(self: _FiniteT, other: Any) -> _FiniteT | None:
        """self + other, если результат конечен, иначе None"""
        return self.new(self.add(other))

    def checked_sub(self: _FiniteT, other: Any) -> _FiniteT | None:
        """self - other, если результат конечен, иначе None"""
        return self.new(self.sub(other))

    def checked_mul(self: _FiniteT, other: Any) -> _FiniteT | None:
        """self * other, если результат конечен, иначе None"""
        return self.new(self.mul(other))

    def checked_div(self: _FiniteT, other: Any) -> _FiniteT | None:
        """self / other, если результат конечен, иначе None (в т.ч. x/0 и 0/0)"""
        return self.new(self.div(other))


# =============================================================================
# ШИРИНЫ
# =============================================================================


class FiniteF32(FiniteFloat):
    """Конечное binary32. Значение округляется до binary32 при создании."""

    float_format: ClassVar[FloatFormat] = F32


class FiniteF64(FiniteFloat):
    """Конечное binary64."""

    float_format: ClassVar[FloatFormat] = F64
