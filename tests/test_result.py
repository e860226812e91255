from __future__ import annotations

import httpx
import pytest

from onelink.result import TranslationResult


def _result(
    *,
    status_code: int = 200,
    success: bool = True,
    headers: dict[str, str] | None = None,
    body: str = "<p>hola</p>",
) -> TranslationResult:
    return TranslationResult(status_code=status_code, success=success, headers=headers or {}, body=body)


def test_from_response_round_trip() -> None:
    response = httpx.Response(
        200,
        headers={"x-onelinktxpercent": "100"},
        text="<p>Yo soy va para un caminar</p>",
    )
    result = TranslationResult.from_response(response)

    assert result.data == "<p>Yo soy va para un caminar</p>"
    assert result.is_translated() is True
    assert result.is_successful is True
    assert result.is_failure is False
    assert result.translation_percent == 100
    assert result.raw is response


@pytest.mark.parametrize(
    ("status_code", "success", "expected"),
    [
        (200, True, True),
        (200, False, False),
        (201, True, False),
        (500, False, False),
    ],
)
def test_is_failure_negates_is_successful(status_code: int, success: bool, expected: bool) -> None:
    result = _result(status_code=status_code, success=success)
    assert result.is_successful is expected
    assert result.is_failure is (not expected)


def test_non_200_response_is_a_failed_result() -> None:
    result = TranslationResult.from_response(httpx.Response(503, text="unavailable"))
    assert result.status_code == 503
    assert result.is_failure
    assert result.data == "unavailable"


def test_translation_percent_defaults_to_zero() -> None:
    assert _result().translation_percent == 0
    assert _result(headers={"x-onelinktxpercent": ""}).translation_percent == 0


def test_translation_percent_header_is_case_insensitive() -> None:
    assert _result(headers={"X-OneLinkTxPercent": "42"}).translation_percent == 42


def test_translation_percent_ignores_garbage(caplog: pytest.LogCaptureFixture) -> None:
    result = _result(headers={"x-onelinktxpercent": "most"})
    assert result.translation_percent == 0
    assert "non-numeric" in caplog.text


def test_is_translated_uses_default_threshold() -> None:
    assert _result(headers={"x-onelinktxpercent": "97"}).is_translated()
    assert not _result(headers={"x-onelinktxpercent": "96"}).is_translated()


def test_is_translated_with_overridden_threshold() -> None:
    almost = _result(headers={"x-onelinktxpercent": "99"})
    full = _result(headers={"x-onelinktxpercent": "100"})
    assert not almost.is_translated(100)
    assert full.is_translated(100)
    assert almost.is_translated(50)


def test_threshold_set_on_result_is_used_by_default() -> None:
    result = TranslationResult(
        status_code=200,
        success=True,
        headers={"x-onelinktxpercent": "80"},
        body="x",
        threshold=75,
    )
    assert result.is_translated()
    assert not result.is_translated(90)


def test_empty_body_returns_no_data_sentinel() -> None:
    result = _result(body="")
    assert result.data is None
    assert str(result) == ""


def test_str_returns_body_verbatim() -> None:
    body = "<div>a &amp; b</div>\n"
    assert str(_result(body=body)) == body


def test_result_headers_are_a_read_only_snapshot() -> None:
    response = httpx.Response(200, headers={"X-OneLinkTxPercent": "100"}, text="<p>hola</p>")
    result = TranslationResult.from_response(response)

    with pytest.raises(TypeError):
        result.headers["x-onelinktxpercent"] = "0"  # type: ignore[index]
    response.headers["x-onelinktxpercent"] = "0"

    assert result.translation_percent == 100
    assert result.header("X-ONELINKTXPERCENT") == "100"
    assert result.header("x-missing") is None


def test_result_is_hashable() -> None:
    first = _result(headers={"x-onelinktxpercent": "50"})
    second = _result(headers={"X-OneLinkTxPercent": "50"})
    assert first == second
    assert hash(first) == hash(second)


def test_zero_threshold_is_not_replaced_by_default() -> None:
    assert _result().is_translated(0)
