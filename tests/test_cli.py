# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/openmcp-python/LICENSE
# ==============================================================================

from __future__ import annotations

import logging

import pytest

from figma_mcp import cli


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_parser_defaults() -> None:
    args = cli.build_parser().parse_args([])
    assert args.transport == "stdio"
    assert args.log_level is None
    assert args.log_json is None


def test_parser_rejects_unknown_transport() -> None:
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--transport", "sse"])


def test_main_serves_with_selected_transport(monkeypatch: pytest.MonkeyPatch) -> None:
    served: list[dict[str, object]] = []

    async def fake_serve(self, **kwargs: object) -> None:
        served.append(kwargs)

    monkeypatch.setattr(cli, "load_dotenv", lambda: False)
    monkeypatch.setattr("figma_mcp.server.core.MCPServer.serve", fake_serve)

    cli.main(["--log-level", "WARNING"])

    assert served == [{"transport": "stdio"}]
    assert logging.getLogger().level == logging.WARNING


def test_main_exits_with_status_one_on_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    async def broken_serve(self, **kwargs: object) -> None:
        raise RuntimeError("stream closed")

    monkeypatch.setattr(cli, "load_dotenv", lambda: False)
    monkeypatch.setattr("figma_mcp.server.core.MCPServer.serve", broken_serve)

    with pytest.raises(SystemExit) as exc_info:
        cli.main([])

    assert exc_info.value.code == 1
