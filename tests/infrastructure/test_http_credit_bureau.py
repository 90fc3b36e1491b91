import httpx
import pytest
import respx

from loan_approval.infrastructure.credit.http_credit_bureau import HttpCreditBureauService

BASE_URL = "https://bureau.example.com"


@pytest.fixture
def bureau():
    service = HttpCreditBureauService(base_url=BASE_URL, timeout_seconds=1.0)
    yield service
    service.close()


@respx.mock
def test_successful_lookup(bureau):
    # Arrange
    route = respx.get(f"{BASE_URL}/scores/555-0100").mock(
        return_value=httpx.Response(200, json={"score": 710, "message": "Good standing"})
    )

    # Act
    result = bureau.get_credit_score("555-0100")

    # Assert
    assert route.called
    assert result.success
    assert result.score == 710
    assert result.message == "Good standing"


@respx.mock
def test_phone_number_is_url_encoded(bureau):
    # Arrange
    route = respx.route(method="GET", host="bureau.example.com").mock(
        return_value=httpx.Response(200, json={"score": 700})
    )

    # Act
    result = bureau.get_credit_score("+44 555")

    # Assert
    assert route.calls.last.request.url.raw_path == b"/scores/%2B44%20555"
    assert result.score == 700


@respx.mock
def test_timeout_is_reported_as_failure(bureau):
    # Arrange
    respx.get(f"{BASE_URL}/scores/555-0100").mock(side_effect=httpx.ReadTimeout("timed out"))

    # Act
    result = bureau.get_credit_score("555-0100")

    # Assert
    assert not result.success
    assert result.score is None
    assert result.message == "Service timeout"


@respx.mock
def test_connection_error_is_reported_as_unavailable(bureau):
    # Arrange
    respx.get(f"{BASE_URL}/scores/555-0100").mock(side_effect=httpx.ConnectError("refused"))

    # Act
    result = bureau.get_credit_score("555-0100")

    # Assert
    assert not result.success
    assert result.message.startswith("Service unavailable")


@respx.mock
def test_error_status_is_reported(bureau):
    # Arrange
    respx.get(f"{BASE_URL}/scores/555-0100").mock(return_value=httpx.Response(503))

    # Act
    result = bureau.get_credit_score("555-0100")

    # Assert
    assert result.message == "Credit bureau returned HTTP 503"


@respx.mock
@pytest.mark.parametrize("body", [{"rating": "A"}, {"score": "high"}, ["710"]])
def test_malformed_body_is_reported(bureau, body):
    # Arrange
    respx.get(f"{BASE_URL}/scores/555-0100").mock(return_value=httpx.Response(200, json=body))

    # Act
    result = bureau.get_credit_score("555-0100")

    # Assert
    assert not result.success
    assert result.message == "Malformed credit bureau response"


@respx.mock
@pytest.mark.parametrize(
    "body",
    [
        {"score": 700, "message": 42},
        {"score": True},
        {"score": 700.9},
        {"score": None},
    ],
)
def test_loosely_typed_body_is_reported(bureau, body):
    # Arrange
    respx.get(f"{BASE_URL}/scores/555-0100").mock(return_value=httpx.Response(200, json=body))

    # Act
    result = bureau.get_credit_score("555-0100")

    # Assert
    assert not result.success
    assert result.message == "Malformed credit bureau response"


@respx.mock
def test_non_json_body_is_reported(bureau):
    # Arrange
    respx.get(f"{BASE_URL}/scores/555-0100").mock(
        return_value=httpx.Response(200, text="<html>maintenance</html>")
    )

    # Act
    result = bureau.get_credit_score("555-0100")

    # Assert
    assert result.message == "Malformed credit bureau response"
