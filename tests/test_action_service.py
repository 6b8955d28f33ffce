"""Tests for the simulated server actions."""

import random

import pytest

from app.services import ActionService


class TestProcessFormData:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title, description", [("", "desc"), ("Title", ""), (None, "desc"), ("Title", None)])
    async def test_missing_fields_fail_without_side_effects(self, action_service, sleep, invalidator, title, description):
        result = await action_service.process_form_data(title, description, "low")

        assert result.success is False
        assert result.message == "title and description are required"
        assert result.data is None
        assert sleep.calls == []
        assert invalidator.keys == []

    @pytest.mark.asyncio
    async def test_valid_input_is_echoed(self, action_service, sleep, invalidator):
        result = await action_service.process_form_data("Title", "Some text", "high")

        assert result.success is True
        assert result.message == "Data processed successfully"
        assert set(result.data) == {"id", "title", "description", "priority", "createdAt", "processedBy", "environment"}
        assert result.data["title"] == "Title"
        assert result.data["description"] == "Some text"
        assert result.data["priority"] == "high"
        assert 0 <= result.data["id"] < 10000
        assert result.data["processedBy"] == "Cloud Run Server"
        assert result.data["environment"] == "test"
        assert sleep.calls == [1000]
        assert invalidator.keys == ["/dashboard"]

    @pytest.mark.asyncio
    async def test_priority_is_not_validated(self, action_service):
        result = await action_service.process_form_data("Title", "Some text", "urgent")

        assert result.success is True
        assert result.data["priority"] == "urgent"

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_converted(self, invalidator, caplog):
        async def broken(ms):
            raise RuntimeError("timer exploded")

        service = ActionService(sleep=broken, invalidate=invalidator)
        result = await service.process_form_data("Title", "Some text", "low")

        assert result.success is False
        assert result.message == "A server error occurred"
        assert result.data is None
        assert invalidator.keys == []
        assert "Error processing form data" in caplog.text


class TestGenerateReport:

    @pytest.mark.asyncio
    async def test_report_shape(self, action_service, sleep):
        result = await action_service.generate_report()

        assert result.success is True
        assert result.message == "Report generated successfully"
        assert result.data["id"].startswith("report_")
        assert result.data["serverInfo"]["location"] == "Google Cloud Run"
        assert result.data["serverInfo"]["environment"] == "test"
        assert result.data["stats"]["systemLoad"].endswith("%")
        assert result.data["stats"]["uptime"].endswith(" hours")
        assert sleep.calls == [2000]

    @pytest.mark.asyncio
    async def test_stats_stay_in_range(self, sleep):
        for seed in range(200):
            service = ActionService(sleep=sleep, rng=random.Random(seed))
            stats = (await service.generate_report()).data["stats"]

            assert 100 <= stats["totalUsers"] < 1100
            assert 50 <= stats["activeUsers"] < 550
            assert 0 <= float(stats["systemLoad"][:-1]) <= 100
            assert 1 <= int(stats["uptime"].split()[0]) <= 168

    @pytest.mark.asyncio
    async def test_report_never_touches_invalidation(self, action_service, invalidator):
        await action_service.generate_report()

        assert invalidator.keys == []

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_converted(self, caplog):
        async def broken(ms):
            raise RuntimeError("timer exploded")

        result = await ActionService(sleep=broken).generate_report()

        assert result.success is False
        assert result.message == "An error occurred while generating the report"
        assert "Error generating report" in caplog.text

    @pytest.mark.asyncio
    async def test_result_serialises_without_data_when_absent(self, action_service):
        result = await action_service.process_form_data("", "", None)

        assert set(result.to_dict()) == {"success", "message", "timestamp"}
