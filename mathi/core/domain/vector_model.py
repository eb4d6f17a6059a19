"""
VectorModel - Pydantic модель для сериализации Vector

Immutable Pydantic модель, представляющая вектор в dict/JSON виде:

    {"components": [1.0, 2.0, 3.0]}

Используется Vector.to_model / Vector.from_model / to_dict / from_dict.
Модуль импортируется вместе с mathi.core.domain.vector, поэтому pydantic
является обязательной зависимостью всего пакета. Арифметика Vector
модель не использует, она нужна только на границе (загрузка/выгрузка данных).
"""

import math

from pydantic import BaseModel, Field, field_validator


class VectorModel(BaseModel):
    """
    Сериализуемое представление вектора.

    Immutable модель (frozen=True). NaN/Inf в компонентах запрещены,
    чтобы невалидные значения не попадали в вычисления через загрузку данных.
    """

    components: list[float] = Field(
        default_factory=list, description="Компоненты вектора (double precision)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("components")
    @classmethod
    def validate_finite(cls, v: list[float]) -> list[float]:
        """Все компоненты должны быть конечными числами."""
        for i, x in enumerate(v):
            if not math.isfinite(x):
                raise ValueError(f"component {i} must be finite (not NaN/Inf), got {x}")
        return v

    @property
    def size(self) -> int:
        """Количество компонент."""
        return len(self.components)
