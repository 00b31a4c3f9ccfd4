import io
import json
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from cypress_mcp.cli.container import build_dispatcher
from cypress_mcp.cli.stdio_server import StdioServer
from cypress_mcp.domain.value_objects.app_config import AppConfig
from cypress_mcp.infrastructure.process.tool_probe import ToolAvailabilityProbe


@pytest.fixture
def config(make_config: Callable[..., AppConfig]) -> AppConfig:
    return make_config(allowed_commands=["validate", "generate", "getResults", "getScreenshots"])


@pytest.fixture
def server(config: AppConfig) -> StdioServer:
    dispatcher = build_dispatcher(
        config,
        probe=ToolAvailabilityProbe("cypress", which=lambda _: None),
    )
    return StdioServer(dispatcher, config, stdin=io.StringIO(), stdout=io.StringIO())


class TestHandleRequest:
    async def test_dispatches_command(self, server: StdioServer) -> None:
        response = await server.handle_request(
            json.dumps({"id": 1, "command": "validate", "args": {"testCode": "const x = 1;"}})
        )

        assert response["id"] == 1
        assert response["ok"] is True
        assert response["result"]["isValid"] is True
        assert len(response["result"]["warnings"]) == 2

    async def test_tool_name_is_accepted(self, server: StdioServer) -> None:
        response = await server.handle_request(
            json.dumps({"id": 2, "command": "cypress_get_results"})
        )

        assert response == {"id": 2, "ok": True, "result": []}

    async def test_permission_denied(self, server: StdioServer) -> None:
        response = await server.handle_request(json.dumps({"id": 3, "command": "run"}))

        assert response["ok"] is False
        assert response["error"]["kind"] == "PermissionDenied"
        assert "trace" not in response["error"]

    async def test_not_found(self, server: StdioServer) -> None:
        response = await server.handle_request(
            json.dumps({"id": 4, "command": "getResults", "args": {"runId": "run_x"}})
        )

        assert response["error"] == {
            "message": "No results found for runId: run_x",
            "kind": "NotFound",
        }

    async def test_invalid_json(self, server: StdioServer) -> None:
        response = await server.handle_request("{not json")

        assert response["id"] is None
        assert response["error"]["kind"] == "InvalidRequest"

    @pytest.mark.parametrize(
        "request_body",
        [
            [1, 2],
            {"id": 5},
            {"id": 5, "command": 7},
        ],
    )
    async def test_malformed_request(self, server: StdioServer, request_body: object) -> None:
        response = await server.handle_request(json.dumps(request_body))

        assert response["ok"] is False
        assert response["error"]["kind"] == "InvalidRequest"

    async def test_args_must_be_object(self, server: StdioServer) -> None:
        response = await server.handle_request(
            json.dumps({"id": 6, "command": "validate", "args": ["x"]})
        )

        assert response["id"] == 6
        assert response["error"]["kind"] == "InvalidRequest"

    async def test_tools_request(self, server: StdioServer) -> None:
        response = await server.handle_request(json.dumps({"id": 7, "command": "tools"}))

        assert len(response["result"]) == 7

    async def test_config_request(self, server: StdioServer, config: AppConfig) -> None:
        response = await server.handle_request(json.dumps({"id": 8, "command": "config"}))

        assert response["result"]["security"]["allowedCommands"] == config.security.allowed_commands

    async def test_trace_included_when_enabled(self, config: AppConfig) -> None:
        dispatcher = MagicMock()
        dispatcher.execute = AsyncMock(side_effect=RuntimeError("boom"))
        server = StdioServer(dispatcher, config, include_trace=True)

        response = await server.handle_request(json.dumps({"id": 9, "command": "getResults"}))

        assert response["error"]["kind"] == "InternalError"
        assert "RuntimeError: boom" in response["error"]["trace"]


class TestServe:
    async def test_answers_every_line_until_eof(self, config: AppConfig) -> None:
        requests = [
            {"id": 1, "command": "generate", "args": {"description": "logs in"}},
            {"id": 2, "command": "getScreenshots"},
            {"id": 3, "command": "explode"},
        ]
        stdin = io.StringIO("\n".join(json.dumps(r) for r in requests) + "\n\n")
        stdout = io.StringIO()
        server = StdioServer(build_dispatcher(config), config, stdin=stdin, stdout=stdout)

        await server.serve()

        responses = {r["id"]: r for r in map(json.loads, stdout.getvalue().splitlines())}
        assert set(responses) == {1, 2, 3}
        assert "describe('Generated Test'" in responses[1]["result"]["testCode"]
        assert responses[2]["result"] == {"screenshots": []}
        assert responses[3]["error"]["kind"] == "PermissionDenied"
