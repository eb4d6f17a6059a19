"""
Errors - Таксономия исключений mathi

Все ошибки размерности и индексации поднимаются как исключения и
немедленно пробрасываются вызывающему коду. Внутренних retry/recovery нет.

Иерархия:
    VectorError
    ├── SizeMismatchError  (dot, add, +=, compare)
    ├── DimensionError     (cross)
    └── VectorIndexError   (v[i])

SizeMismatchError и DimensionError наследуют ValueError, VectorIndexError
наследует IndexError, поэтому стандартные except-блоки продолжают работать.
"""


class VectorError(Exception):
    """Базовое исключение для всех ошибок Vector."""

    pass


class SizeMismatchError(VectorError, ValueError):
    """
    Размеры операндов не совпадают.

    Поднимается dot, add/+= и compare (без truncate).
    """

    def __init__(self, left_size: int, right_size: int, operation: str):
        self.left_size = left_size
        self.right_size = right_size
        self.operation = operation
        super().__init__(
            f"{operation}: size mismatch, left has {left_size} components, "
            f"right has {right_size}"
        )

    def __reduce__(self):
        return (type(self), (self.left_size, self.right_size, self.operation))


class DimensionError(VectorError, ValueError):
    """
    Операнд не трёхмерный.

    Один общий check для cross: покрывает и "не 3D", и "размеры различаются".
    """

    def __init__(self, left_size: int, right_size: int, expected: int = 3):
        self.left_size = left_size
        self.right_size = right_size
        self.expected = expected
        super().__init__(
            f"cross product requires two {expected}-dimensional vectors, "
            f"got sizes {left_size} and {right_size}"
        )

    def __reduce__(self):
        return (type(self), (self.left_size, self.right_size, self.expected))


class VectorIndexError(VectorError, IndexError):
    """Индекс вне диапазона 0..size-1 (отрицательные индексы не поддерживаются)."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"index {index} out of range for vector of size {size}")

    def __reduce__(self):
        return (type(self), (self.index, self.size))
