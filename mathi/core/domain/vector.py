"""
Vector - Числовой вектор фиксированной длины над float (double precision)

Value type с семантикой неизменяемости:
- Фабрики: new, from_list, full, zeros, ones, full_like, zeros_like, ones_like
- Поэлементные сравнения и предикаты: compare, compare_scalar, all, any, is_zero
- Tolerance-равенство (==) на основе isclose с DEFAULT_TOL
- Алгебра: dot, cross (только 3D), add (+ и +=)
- Индексация v[i] с проверкой границ

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. size задаётся при создании и никогда не меняется (нет resize/append)
2. Каждый Vector единолично владеет своим хранилищем (нет aliasing)
3. Единственная мутирующая операция: += (меняет значения in-place, размер прежний)
4. Несовпадение размеров в dot/add/compare → SizeMismatchError
5. cross требует ровно 3 компоненты у обоих операндов → DimensionError

ВНИМАНИЕ: равенство (==) НЕ транзитивно.
    a == b and b == c не гарантирует a == c, т.к. "близость" с абсолютной
    толерантностью не транзитивна. Не стройте цепочки равенств.
    По той же причине Vector не hashable.

Методы делегируют в свободные функции модуля (dot, cross, add), поэтому
обе формы дают идентичный результат:

    >>> a = Vector.new([1.0, 2.0, 3.0])
    >>> b = Vector.new([-1.0, 1.0, -2.0])
    >>> a.dot(b) == dot(a, b) == -5.0
    True
"""

import logging
import operator
from typing import Any, Final, Iterable, Iterator

from mathi.core.domain.vector_model import VectorModel
from mathi.core.errors import DimensionError, SizeMismatchError, VectorIndexError
from mathi.core.math.comparison import (
    ComparisonOp,
    Condition,
    all_of,
    any_of,
    compare,
    compare_scalar,
)
from mathi.core.math.tolerance import isclose, resolve_tol

logger = logging.getLogger(__name__)

# Размерность, для которой определено векторное произведение
CROSS_DIM: Final[int] = 3


# =============================================================================
# VECTOR
# =============================================================================


class Vector:
    """
    Вектор фиксированной длины из float.

    Создавайте через фабрики (new, from_list, full, zeros, ...) или
    напрямую Vector(iterable), что эквивалентно Vector.new.
    """

    __slots__ = ("_components", "_size")

    __hash__ = None  # tolerance-равенство несовместимо с хешированием

    def __init__(self, components: Iterable[float] = ()):
        self._components: list[float] = [float(x) for x in components]
        self._size: int = len(self._components)

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, components: Iterable[float]) -> "Vector":
        """
        Создание вектора с копированием данных.

        Args:
            components: Любая итерируемая последовательность чисел (в т.ч. пустая)

        Returns:
            Новый Vector, size = длина входа
        """
        return cls(components)

    @classmethod
    def from_list(cls, components: list[float]) -> "Vector":
        """
        Создание вектора с передачей владения списком (без копирования).

        Переданный list становится хранилищем вектора; элементы приводятся
        к float на месте. После вызова список нельзя использовать снаружи.

        Raises:
            TypeError: Если components не list
        """
        if not isinstance(components, list):
            raise TypeError(
                f"from_list takes ownership of a list, got {type(components).__name__}"
            )
        components[:] = [float(x) for x in components]
        v = cls.__new__(cls)
        v._components = components
        v._size = len(components)
        return v

    @classmethod
    def full(cls, size: int, value: float) -> "Vector":
        """
        Вектор длины size, все компоненты равны value.

        size = 0 даёт пустой вектор (не ошибка).

        Raises:
            ValueError: Если size < 0
        """
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        return cls.from_list([float(value)] * size)

    @classmethod
    def zeros(cls, size: int) -> "Vector":
        return cls.full(size, 0.0)

    @classmethod
    def ones(cls, size: int) -> "Vector":
        return cls.full(size, 1.0)

    @classmethod
    def full_like(cls, v: "Vector", value: float) -> "Vector":
        """Как full, но размер берётся из существующего вектора v."""
        return cls.full(v.size, value)

    @classmethod
    def zeros_like(cls, v: "Vector") -> "Vector":
        return cls.full_like(v, 0.0)

    @classmethod
    def ones_like(cls, v: "Vector") -> "Vector":
        return cls.full_like(v, 1.0)

    def copy(self) -> "Vector":
        """Независимая копия с собственным хранилищем."""
        return Vector(self._components)

    # -------------------------------------------------------------------------
    # Доступ к данным
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Количество компонент (фиксировано при создании)."""
        return self._size

    @property
    def components(self) -> tuple[float, ...]:
        """Read-only снимок компонент."""
        return tuple(self._components)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __getitem__(self, index: int) -> float:
        """
        Компонента с индексом index.

        Отрицательные индексы и wraparound не поддерживаются.

        Raises:
            VectorIndexError: Если index < 0 или index >= size
            TypeError: Если index не целое (в т.ч. slice)
        """
        i = operator.index(index)
        if i < 0 or i >= self._size:
            raise VectorIndexError(i, self._size)
        return self._components[i]

    def to_list(self) -> list[float]:
        """Копия компонент как list."""
        return list(self._components)

    # -------------------------------------------------------------------------
    # Поэлементные сравнения
    # -------------------------------------------------------------------------

    @staticmethod
    def compare(
        v1: "Vector",
        v2: "Vector",
        condition: Condition | ComparisonOp | str,
        truncate: bool = False,
    ) -> list[bool]:
        """См. mathi.core.math.comparison.compare."""
        return compare(v1, v2, condition, truncate=truncate)

    @staticmethod
    def compare_scalar(
        v: "Vector", val: float, condition: Condition | ComparisonOp | str
    ) -> list[bool]:
        """См. mathi.core.math.comparison.compare_scalar."""
        return compare_scalar(v, val, condition)

    @staticmethod
    def all(flags: Iterable[bool]) -> bool:
        return all_of(flags)

    @staticmethod
    def any(flags: Iterable[bool]) -> bool:
        return any_of(flags)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_close_to(self, value: float, tol: float | None = None) -> bool:
        """
        Все компоненты близки к скаляру value.

        Args:
            value: Скаляр для сравнения
            tol: Абсолютная толерантность (default: DEFAULT_TOL)

        Returns:
            True если abs(v[i] - value) < tol для всех i (пустой вектор → True)

        Граница строгая, как в isclose: компонента ровно на расстоянии tol
        от value НЕ считается близкой.
        """
        tol = resolve_tol(tol)
        return all_of(compare_scalar(self, value, lambda a, b: isclose(a, b, tol)))

    def is_zero(self) -> bool:
        """Все компоненты близки к 0.0 с толерантностью по умолчанию."""
        return all_of(compare_scalar(self, 0.0, isclose))

    def allclose(self, other: "Vector", tol: float | None = None) -> bool:
        """
        Попарная близость компонент с явной толерантностью.

        Векторы разного размера не близки (False, без исключения).

        Raises:
            TypeError: Если other не Vector
        """
        tol = resolve_tol(tol)
        if not isinstance(other, Vector):
            raise TypeError(f"allclose expects a Vector, got {type(other).__name__}")
        if self._size != other.size:
            return False
        return all_of(compare(self, other, lambda a, b: isclose(a, b, tol)))

    def __eq__(self, other: object) -> bool:
        """
        Tolerance-равенство: размеры равны и все пары компонент isclose.

        ВНИМАНИЕ: не транзитивно (см. docstring модуля).
        """
        if not isinstance(other, Vector):
            return NotImplemented
        if self._size != other._size:
            return False
        return all_of(compare(self, other, isclose))

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def dot(self, other: "Vector") -> float:
        return dot(self, other)

    def cross(self, other: "Vector") -> "Vector":
        return cross(self, other)

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return add(self, other)

    def __iadd__(self, other: object) -> "Vector":
        """
        In-place сложение: значения левого операнда заменяются суммами.

        Хранилище и identity объекта сохраняются, размер не меняется.

        Raises:
            SizeMismatchError: Если размеры различаются
        """
        if not isinstance(other, Vector):
            return NotImplemented
        _check_same_size(self, other, "add")
        storage = self._components
        for i, x in enumerate(other._components):
            storage[i] += x
        return self

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_model(self) -> VectorModel:
        return VectorModel(components=self.to_list())

    @classmethod
    def from_model(cls, model: VectorModel) -> "Vector":
        return cls.new(model.components)

    def to_dict(self) -> dict[str, Any]:
        """{"components": [...]}"""
        return self.to_model().model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vector":
        """
        Создание вектора из dict с валидацией.

        Raises:
            pydantic.ValidationError: Некорректный payload (в т.ч. NaN/Inf)
        """
        return cls.from_model(VectorModel.model_validate(data))

    def __repr__(self) -> str:
        return f"Vector({self._components!r})"


# =============================================================================
# СВОБОДНЫЕ ФУНКЦИИ
# =============================================================================


def _check_same_size(a: Vector, b: Vector, operation: str) -> None:
    if a.size != b.size:
        logger.debug("%s rejected operands of sizes %d and %d", operation, a.size, b.size)
        raise SizeMismatchError(a.size, b.size, operation)


def dot(a: Vector, b: Vector) -> float:
    """
    Скалярное произведение: Σ a[i] * b[i].

    Для пустых векторов возвращает 0.0.

    Raises:
        SizeMismatchError: Если a.size != b.size

    Examples:
        >>> dot(Vector([1.0, 2.0, 3.0]), Vector([-1.0, 1.0, -2.0]))
        -5.0
    """
    _check_same_size(a, b, "dot")
    result = 0.0
    for ai, bi in zip(a, b):
        result += ai * bi
    return result


def cross(a: Vector, b: Vector) -> Vector:
    """
    Векторное произведение в 3D.

    Формула (индексы с нуля):
        [a1*b2 - a2*b1, a2*b0 - a0*b2, a0*b1 - a1*b0]

    Raises:
        DimensionError: Если хотя бы один из операндов не 3-мерный

    Examples:
        >>> cross(Vector([-1.0, 2.0, 0.0]), Vector([1.0, 2.0, 3.0]))
        Vector([6.0, 3.0, -4.0])
    """
    if a.size != CROSS_DIM or b.size != CROSS_DIM:
        logger.debug("cross rejected operands of sizes %d and %d", a.size, b.size)
        raise DimensionError(a.size, b.size, CROSS_DIM)

    a0, a1, a2 = a
    b0, b1, b2 = b
    return Vector.from_list(
        [
            a1 * b2 - a2 * b1,
            a2 * b0 - a0 * b2,
            a0 * b1 - a1 * b0,
        ]
    )


def add(a: Vector, b: Vector) -> Vector:
    """
    Поэлементная сумма в новом векторе.

    Raises:
        SizeMismatchError: Если a.size != b.size
    """
    _check_same_size(a, b, "add")
    return Vector.from_list([ai + bi for ai, bi in zip(a, b)])
