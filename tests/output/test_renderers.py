"""Tests for the Rich renderers."""

import pytest

from pulsarctl.output.renderers import describe_value, render_quiet, render_result
from pulsarctl.services.result import ServiceError, ServiceResult


class TestRenderResult:
    def test_message_printed_verbatim(self) -> None:
        message = (
            "Set retention successfully for [a-very-long-tenant-name/an-even-longer-namespace]."
            " The retention policy is: time = 100 min, size = 1024 MB"
        )
        result = ServiceResult(ok=True, op="set_retention", message=message)
        assert render_result(result) == message

    def test_fields_when_no_message(self) -> None:
        result = ServiceResult(
            ok=True,
            op="get_retention",
            data={
                "namespace": "public/default",
                "retentionTimeInMinutes": -1,
                "retentionSizeInMB": 0,
            },
        )
        output = render_result(result)
        assert "namespace: public/default" in output
        assert "retentionTimeInMinutes: -1 (infinite)" in output
        assert "retentionSizeInMB: 0 (disabled)" in output

    def test_unset_field(self) -> None:
        result = ServiceResult(ok=True, op="x", data={"message_ttl_seconds": None})
        assert render_result(result) == "message_ttl_seconds: not set"

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="remove_message_ttl",
            error=ServiceError(code="NAMESPACE_NOT_FOUND", message="code: 404 reason: gone"),
        )
        assert render_result(result) == "[✖]  code: 404 reason: gone"

    def test_error_without_payload(self) -> None:
        assert render_quiet(ServiceResult(ok=False, op="x")) == "[✖]  Unknown error"


class TestRenderQuiet:
    def test_mutation(self) -> None:
        result = ServiceResult(ok=True, op="set_message_ttl", message="Set message TTL")
        assert render_quiet(result) == "OK: set_message_ttl"

    def test_read_prints_bare_value(self) -> None:
        result = ServiceResult(
            ok=True,
            op="get_max_consumers_per_topic",
            message="The max consumers per topic of namespace public/default is 7",
            data={"namespace": "public/default", "max_consumers_per_topic": 7},
        )
        assert render_quiet(result) == "7"

    def test_read_retention_prints_time_then_size(self) -> None:
        result = ServiceResult(
            ok=True,
            op="get_retention",
            data={
                "namespace": "public/default",
                "retentionTimeInMinutes": -1,
                "retentionSizeInMB": 1024,
            },
        )
        assert render_quiet(result) == "-1\n1024"

    def test_unset_read_prints_nothing(self) -> None:
        result = ServiceResult(
            ok=True,
            op="get_message_ttl",
            data={"namespace": "public/default", "message_ttl_seconds": None},
        )
        assert render_quiet(result) == ""


class TestDescribeValue:
    @pytest.mark.parametrize(
        "key,value,expected",
        [
            ("retentionSizeInMB", -1, "-1 (infinite)"),
            ("retentionTimeInMinutes", 0, "0 (disabled)"),
            ("retentionSizeInMB", 1024, "1024"),
            ("max_consumers_per_topic", 0, "0"),
        ],
    )
    def test_sentinels(self, key: str, value: int, expected: str) -> None:
        assert describe_value(key, value) == expected
