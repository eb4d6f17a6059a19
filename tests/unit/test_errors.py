"""
Тесты для таксономии исключений и DEBUG-логирования отказов

Проверяет:
1. Атрибуты и сообщения исключений
2. pickle/copy исключений (передача через границу процесса)
3. DEBUG-записи при отказе проверок размера/размерности
"""

import copy
import logging
import pickle

import pytest

from mathi import (
    ComparisonOp,
    DimensionError,
    SizeMismatchError,
    Vector,
    VectorIndexError,
    compare,
    cross,
    dot,
)


# =============================================================================
# PICKLE / COPY
# =============================================================================


class TestErrorSerialization:
    """Исключения восстанавливаются из pickle и copy"""

    def test_size_mismatch_pickle(self) -> None:
        err = pickle.loads(pickle.dumps(SizeMismatchError(3, 2, "dot")))
        assert isinstance(err, SizeMismatchError)
        assert (err.left_size, err.right_size, err.operation) == (3, 2, "dot")
        assert str(err) == str(SizeMismatchError(3, 2, "dot"))

    def test_dimension_error_pickle(self) -> None:
        err = pickle.loads(pickle.dumps(DimensionError(2, 4)))
        assert (err.left_size, err.right_size, err.expected) == (2, 4, 3)
        assert "3-dimensional" in str(err)

    def test_index_error_pickle(self) -> None:
        err = pickle.loads(pickle.dumps(VectorIndexError(5, 3)))
        assert (err.index, err.size) == (5, 3)

    def test_copy(self) -> None:
        err = copy.copy(VectorIndexError(5, 3))
        assert (err.index, err.size) == (5, 3)

        err = copy.deepcopy(SizeMismatchError(1, 2, "add"))
        assert err.operation == "add"

    def test_raised_error_pickles(self) -> None:
        """Пойманное исключение из dot переживает pickle"""
        with pytest.raises(SizeMismatchError) as exc_info:
            dot(Vector.new([1.0]), Vector.new([1.0, 2.0]))

        restored = pickle.loads(pickle.dumps(exc_info.value))
        assert restored.left_size == 1
        assert restored.right_size == 2


# =============================================================================
# DEBUG-ЛОГИРОВАНИЕ
# =============================================================================


class TestRejectionLogging:
    """Отказы проверок размера пишут DEBUG-запись перед исключением"""

    def test_dot_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="mathi")
        with pytest.raises(SizeMismatchError):
            Vector.new([1.0]).dot(Vector.new([1.0, 2.0]))

        records = [r for r in caplog.records if r.name == "mathi.core.domain.vector"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert records[0].getMessage() == "dot rejected operands of sizes 1 and 2"

    def test_add_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="mathi")
        with pytest.raises(SizeMismatchError):
            Vector.zeros(2) + Vector.zeros(3)

        assert "add rejected operands of sizes 2 and 3" in caplog.messages

    def test_cross_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="mathi")
        with pytest.raises(DimensionError):
            cross(Vector.zeros(2), Vector.zeros(3))

        records = [r for r in caplog.records if r.name == "mathi.core.domain.vector"]
        assert [r.getMessage() for r in records] == ["cross rejected operands of sizes 2 and 3"]
        assert records[0].levelno == logging.DEBUG

    def test_compare_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="mathi")
        with pytest.raises(SizeMismatchError):
            compare(Vector.zeros(3), Vector.zeros(1), ComparisonOp.EQ)

        records = [r for r in caplog.records if r.name == "mathi.core.math.comparison"]
        assert [r.getMessage() for r in records] == ["compare rejected operands of sizes 3 and 1"]
        assert records[0].levelno == logging.DEBUG

    def test_success_does_not_log(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="mathi")
        dot(Vector.ones(3), Vector.ones(3))
        cross(Vector.ones(3), Vector.ones(3))

        assert not [r for r in caplog.records if r.name.startswith("mathi")]
