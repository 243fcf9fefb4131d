"""Tests for core helpers, errors and logging setup."""

import logging
import math

import pytest

from core.config import DEFAULTS, GaussianDefaults
from core.exceptions import InvalidParameterError, MathKitError
from core.logging_config import setup_logging
from core.utils import (
    SQRT_TAU,
    is_close,
    require_finite,
    require_non_negative_int,
    require_positive,
    require_real,
    to_float,
)


class TestValidators:
    """Test the require_* helpers."""

    def test_require_real_coerces(self):
        """Test ints are coerced to float."""
        value = require_real("x", 3)
        assert value == 3.0
        assert isinstance(value, float)

    @pytest.mark.parametrize("value", [None, "1.0", True, [1.0]])
    def test_require_real_rejects(self, value):
        """Test non-numbers are rejected."""
        with pytest.raises(InvalidParameterError):
            require_real("x", value)

    def test_require_real_rejects_out_of_range_int(self):
        """Test integers beyond float range raise the library error."""
        with pytest.raises(InvalidParameterError) as exc_info:
            require_real("mean", 10**400)
        assert exc_info.value.reason == "out of float range"
        assert isinstance(exc_info.value.__cause__, OverflowError)

    def test_to_float_maps_overflow_to_infinity(self):
        """Test huge integers become signed infinities."""
        assert to_float(10**400) == math.inf
        assert to_float(-(10**400)) == -math.inf
        assert to_float(3) == 3.0
        assert math.isnan(to_float(math.nan))

    def test_require_finite(self):
        """Test infinities and NaN are rejected."""
        assert require_finite("x", -2.5) == -2.5
        for value in [math.inf, -math.inf, math.nan]:
            with pytest.raises(InvalidParameterError):
                require_finite("x", value)

    def test_require_positive(self):
        """Test only finite positive values pass."""
        assert require_positive("x", 1e-300) == 1e-300
        for value in [0, -1, math.nan, math.inf]:
            with pytest.raises(InvalidParameterError):
                require_positive("x", value)

    def test_require_non_negative_int(self):
        """Test integer validation."""
        assert require_non_negative_int("n", 0) == 0
        assert require_non_negative_int("n", 250) == 250
        for value in [-1, 1.0, True, "3"]:
            with pytest.raises(InvalidParameterError):
                require_non_negative_int("n", value)

    def test_is_close(self):
        """Test tolerant comparison."""
        assert is_close(0.1 + 0.2, 0.3)
        assert not is_close(1.0, 1.001)

    def test_sqrt_tau(self):
        """Test the normalizing constant."""
        assert SQRT_TAU == pytest.approx(math.sqrt(2 * math.pi))


class TestInvalidParameterError:
    """Test the error type."""

    def test_attributes_and_message(self):
        """Test the error records what was wrong."""
        with pytest.raises(InvalidParameterError) as exc_info:
            require_positive("stdev", 0)
        err = exc_info.value
        assert err.name == "stdev"
        assert err.value == 0.0
        assert str(err) == "Invalid stdev=0.0: must be strictly positive"

    def test_hierarchy(self):
        """Test the error is both a library error and a ValueError."""
        assert issubclass(InvalidParameterError, MathKitError)
        assert issubclass(InvalidParameterError, ValueError)


class TestConfig:
    """Test library defaults."""

    def test_defaults(self):
        """Test default values."""
        assert DEFAULTS == GaussianDefaults()
        assert DEFAULTS.mean == 0.0
        assert DEFAULTS.stdev == 1.0
        assert DEFAULTS.cumulative_terms == 100
        assert DEFAULTS.reliable_abs_z == 10.0


class TestSetupLogging:
    """Test setup_logging."""

    def test_file_handler(self, tmp_path, restore_loggers):
        """Test records from library modules reach the log file."""
        log_file = tmp_path / "mathkit.log"
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        logging.getLogger("distributions.gaussian").warning("far tail")
        for handler in logging.getLogger("distributions").handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "far tail" in text
        assert "Logging initialized." in text

    def test_idempotent(self, restore_loggers):
        """Test repeated setup does not stack handlers."""
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("geometry").handlers) == 1
        assert logging.getLogger("geometry").level == logging.INFO

    def test_replaced_file_handler_is_closed(self, tmp_path, restore_loggers):
        """Test a second setup closes the file handler of the first."""
        setup_logging(log_file=str(tmp_path / "first.log"))
        first = [
            h for h in logging.getLogger("core").handlers if isinstance(h, logging.FileHandler)
        ][0]
        assert first.stream is not None

        setup_logging(log_file=str(tmp_path / "second.log"))
        assert first.stream is None
        assert first not in logging.getLogger("distributions").handlers
