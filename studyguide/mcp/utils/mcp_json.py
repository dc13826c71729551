# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Studyguide contributors
#

import json
import sys

from pathlib import Path
from typing import Any

from pydantic import BaseModel

from ..settings import Settings


class MCPServerConfig(BaseModel):
    """The .mcp.json file content."""

    command: str
    args: tuple[str, ...] | None = None
    env: dict[str, str] | None = None

    def file_content(self) -> dict[str, Any]:
        """Content of the mcp.json file."""
        config = self.model_dump(exclude_none=True)
        return {
            "mcpServers": {
                "studyguide": config,
            }
        }


def mcp_config(content_dir: Path | None = None) -> str:
    """Return the MCP server configuration, optionally for a content directory."""
    command, args = _get_command()
    env = _get_env(content_dir)
    config = MCPServerConfig(command=command, args=args, env=env)

    return json.dumps(config.file_content(), indent=2)


def _get_command() -> tuple[str, tuple[str, ...] | None]:
    script = sys.argv[0]
    if script.endswith("__main__.py"):
        command = sys.executable
        args = ("-m", "studyguide.mcp")
    else:
        command = script
        args = None

    return command, args


def _get_env(content_dir: Path | None) -> dict[str, str] | None:
    if content_dir is None:
        return None
    env_prefix = Settings.model_config["env_prefix"]
    # the server can be started from any directory
    return {(env_prefix + "content_dir").upper(): str(Path(content_dir).resolve())}
