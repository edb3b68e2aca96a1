"""Tests for RUT normalization and modulo-11 verification."""

import pytest

from rutctl.domain.generator import RutGenerator
from rutctl.domain.rut import (
    MAX_LENGTH,
    MIN_LENGTH,
    NormalizedRut,
    RutError,
    RutErrorCode,
    compute_check_digit,
    is_valid,
    normalize,
    validate,
    verify,
)


class TestNormalize:
    def test_plain(self) -> None:
        assert normalize("11111111-1") == NormalizedRut(body="11111111", check="1")

    def test_strips_dots(self) -> None:
        assert normalize("11.111.111-1") == NormalizedRut(body="11111111", check="1")

    def test_seven_digit_body(self) -> None:
        assert normalize("5.126.663-3") == NormalizedRut(body="5126663", check="3")

    def test_lowercase_k_is_uppercased(self) -> None:
        assert normalize("1000005-k").check == "K"

    def test_uppercase_k_accepted(self) -> None:
        assert normalize("1000005-K").check == "K"

    def test_does_not_mutate_input(self) -> None:
        raw = "1.000.005-k"
        normalize(raw)
        assert raw == "1.000.005-k"

    def test_str_is_compact_form(self) -> None:
        assert str(normalize("11.111.111-1")) == "11111111-1"

    @pytest.mark.parametrize(
        "raw,code",
        [
            ("123", RutErrorCode.TOO_SHORT),
            ("", RutErrorCode.TOO_SHORT),
            ("123456-7", RutErrorCode.TOO_SHORT),  # 6-digit body
            ("111111111-1", RutErrorCode.TOO_LONG),  # 9-digit body
            ("1111111X1", RutErrorCode.MISSING_SEPARATOR),
            ("11111111-11", RutErrorCode.TOO_LONG),
            ("111111-111", RutErrorCode.MISSING_SEPARATOR),
            ("1111111-A", RutErrorCode.INVALID_CHECK_CHAR),
            ("1111111-x", RutErrorCode.INVALID_CHECK_CHAR),
            ("111a111-1", RutErrorCode.NON_DIGIT_BODY),
            ("+111111-1", RutErrorCode.NON_DIGIT_BODY),
            (" 111111-1", RutErrorCode.NON_DIGIT_BODY),
            ("111111٣-1", RutErrorCode.NON_DIGIT_BODY),  # arabic-indic digit
        ],
    )
    def test_rejects(self, raw: str, code: RutErrorCode) -> None:
        with pytest.raises(RutError) as exc_info:
            normalize(raw)
        assert exc_info.value.code == code

    def test_length_checked_after_stripping_dots(self) -> None:
        """Dots do not count towards the length bounds."""
        with pytest.raises(RutError) as exc_info:
            normalize("1.2.3.4.5.6-7")
        assert exc_info.value.code == RutErrorCode.TOO_SHORT

    def test_bounds_constants(self) -> None:
        assert (MIN_LENGTH, MAX_LENGTH) == (9, 10)


class TestComputeCheckDigit:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("11111111", "1"),
            ("12345678", "5"),
            ("77117239", "3"),
            ("5126663", "3"),
            ("01234567", "4"),
        ],
    )
    def test_known_bodies(self, body: str, expected: str) -> None:
        assert compute_check_digit(body) == expected

    def test_remainder_one_yields_k(self) -> None:
        # 5*2 + 1*2 = 12, 12 % 11 == 1
        assert compute_check_digit("1000005") == "K"

    def test_remainder_zero_yields_zero(self) -> None:
        # 3*3 + 1*2 = 11, 11 % 11 == 0
        assert compute_check_digit("1000030") == "0"

    def test_zero_digit_advances_weight(self) -> None:
        # 0*2 + 1*3 = 3 -> 8; skipping the zero's weight would give 9
        assert compute_check_digit("10") == "8"

    def test_weights_wrap_after_seven(self) -> None:
        # seventh digit from the right takes weight 2 again: 1*2 = 2 -> 9
        assert compute_check_digit("1000000") == "9"

    def test_deterministic(self) -> None:
        assert compute_check_digit("76354771") == compute_check_digit("76354771")

    def test_empty_body(self) -> None:
        assert compute_check_digit("") == "0"

    def test_non_digit(self) -> None:
        with pytest.raises(RutError) as exc_info:
            compute_check_digit("12a4")
        assert exc_info.value.code == RutErrorCode.NON_DIGIT_BODY


class TestVerify:
    def test_match_returns_expected(self) -> None:
        assert verify(NormalizedRut(body="11111111", check="1")) == "1"

    def test_mismatch_carries_expected(self) -> None:
        with pytest.raises(RutError) as exc_info:
            verify(NormalizedRut(body="11111111", check="2"))
        assert exc_info.value.code == RutErrorCode.CHECK_MISMATCH
        assert exc_info.value.expected == "1"
        assert "expected '1'" in str(exc_info.value)

    def test_rechecks_body_digits(self) -> None:
        with pytest.raises(RutError) as exc_info:
            verify(NormalizedRut(body="1111a111", check="1"))
        assert exc_info.value.code == RutErrorCode.NON_DIGIT_BODY


class TestValidate:
    def test_worked_example(self) -> None:
        result = validate("11111111-1")
        assert result.ok
        assert result.expected == "1"
        assert result.rut == NormalizedRut(body="11111111", check="1")

    def test_k_check_digit(self) -> None:
        assert validate("1.000.005-k").ok

    @pytest.mark.parametrize("wrong", ["0", "2", "3", "4", "5", "6", "7", "8", "9", "K"])
    def test_any_other_check_char_mismatches(self, wrong: str) -> None:
        result = validate(f"11111111-{wrong}")
        assert not result.ok
        assert result.error == RutErrorCode.CHECK_MISMATCH
        assert result.expected == "1"

    def test_swapped_check_char_reports_original(self) -> None:
        """Every other check character fails and points back to the real one."""
        gen = RutGenerator(seed=2024)
        originals = [gen.generate(5_000_000, 23_000_000) for _ in range(25)]
        originals.append(NormalizedRut(body="1000005", check="K"))
        originals.append(NormalizedRut(body="1000030", check="0"))

        for original in originals:
            assert validate(str(original)).ok, original
            for wrong in [*"0123456789", "K"]:
                if wrong == original.check:
                    continue
                result = validate(f"{original.body}-{wrong}")
                assert result.error == RutErrorCode.CHECK_MISMATCH, (original, wrong)
                assert result.expected == original.check

    def test_format_error_has_no_expected(self) -> None:
        result = validate("123")
        assert result.error == RutErrorCode.TOO_SHORT
        assert result.rut is None
        assert result.expected is None

    def test_is_valid(self) -> None:
        assert is_valid("12.345.678-5")
        assert not is_valid("12.345.678-4")
        assert not is_valid("garbage")

    def test_error_is_value_error(self) -> None:
        assert issubclass(RutError, ValueError)
