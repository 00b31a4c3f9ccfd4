import asyncio
import json
import sys
from typing import Any, TextIO

from loguru import logger

from cypress_mcp.application.dispatcher import CommandDispatcher
from cypress_mcp.cli.payloads import error_payload, to_payload
from cypress_mcp.cli.tool_catalog import list_tools, resolve_command
from cypress_mcp.domain.value_objects.app_config import AppConfig

INVALID_REQUEST_KIND = "InvalidRequest"

# Requests answered by the server itself rather than the dispatcher
LIST_TOOLS_REQUEST = "tools"
SHOW_CONFIG_REQUEST = "config"


class StdioServer:
    """JSON-lines request/response loop over stdin and stdout.

    Request:  {"id": 1, "command": "run", "args": {"spec": "..."}}
    Response: {"id": 1, "ok": true, "result": {...}}
              {"id": 1, "ok": false, "error": {"message": ..., "kind": ...}}

    Each request is handled in its own task, so a long run does not hold
    up later requests; responses may arrive out of order and carry the
    request id for matching.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        config: AppConfig,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        include_trace: bool = False,
    ) -> None:
        self.dispatcher = dispatcher
        self.config = config
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.include_trace = include_trace

    async def serve(self) -> None:
        logger.info("{} {} started on stdio", self.config.mcp.name, self.config.mcp.version)
        pending: set[asyncio.Task[None]] = set()

        while line := await asyncio.to_thread(self.stdin.readline):
            if not line.strip():
                continue
            task = asyncio.create_task(self._handle_line(line))
            pending.add(task)
            task.add_done_callback(pending.discard)

        if pending:
            await asyncio.gather(*pending)
        logger.info("stdin closed, server stopped")

    async def _handle_line(self, line: str) -> None:
        response = await self.handle_request(line)
        self.stdout.write(json.dumps(response) + "\n")
        self.stdout.flush()

    async def handle_request(self, line: str) -> dict[str, Any]:
        try:
            request = json.loads(line)
        except json.JSONDecodeError as e:
            return self._invalid(None, f"Invalid JSON request: {e}")

        if not isinstance(request, dict) or not isinstance(request.get("command"), str):
            return self._invalid(None, "Request must be an object with a string 'command'")

        request_id = request.get("id")
        command = request["command"]
        args = request.get("args") or {}
        if not isinstance(args, dict):
            return self._invalid(request_id, "'args' must be an object")

        if command == LIST_TOOLS_REQUEST:
            return {"id": request_id, "ok": True, "result": list_tools()}
        if command == SHOW_CONFIG_REQUEST:
            return {"id": request_id, "ok": True, "result": self.config.to_payload()}

        try:
            result = await self.dispatcher.execute(resolve_command(command), args)
        except Exception as e:
            return {
                "id": request_id,
                "ok": False,
                "error": error_payload(e, include_trace=self.include_trace),
            }

        return {"id": request_id, "ok": True, "result": to_payload(result)}

    @staticmethod
    def _invalid(request_id: Any, message: str) -> dict[str, Any]:
        logger.warning("Rejected request: {}", message)
        return {
            "id": request_id,
            "ok": False,
            "error": {"message": message, "kind": INVALID_REQUEST_KIND},
        }
