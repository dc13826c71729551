import sys

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    CliApp,
    CliPositionalArg,
    CliSubCommand,
)

from .docs.loader import ContentLoader
from .server import make_server
from .utils.mcp_json import mcp_config


class AgentConfigCommand(BaseModel):
    """Output .mcp.json file content"""

    content_dir: Path | None = Field(
        default=None, description="content directory for the server (default: from settings)"
    )

    def cli_cmd(self) -> None:
        print(mcp_config(self.content_dir))


class ListCommand(BaseModel):
    """List documents in reading order"""

    def cli_cmd(self) -> None:
        loader = ContentLoader.from_settings()
        for doc in loader.list_all():
            print(f"{doc.order:>4}  {doc.slug}  {doc.title}")


class ShowCommand(BaseModel):
    """Show a document"""

    slug: CliPositionalArg[str] = Field(description="document slug")

    def cli_cmd(self) -> None:
        loader = ContentLoader.from_settings()
        doc = loader.get_by_slug(self.slug)
        if doc is None:
            print(f"Error: no document found for slug '{self.slug}'", file=sys.stderr)
            sys.exit(1)
        print(f"# {doc.title}\n")
        print(doc.content)


class RunCommand(BaseModel):
    """Run the MCP server"""

    def cli_cmd(self) -> None:
        mcp = make_server()
        mcp.run(show_banner=False)


class CLIArguments(
    BaseSettings, cli_parse_args=True, cli_kebab_case=True, cli_use_class_docs_for_groups=True
):
    """Command line arguments."""

    agent_config: CliSubCommand[AgentConfigCommand]
    list: CliSubCommand[ListCommand]
    show: CliSubCommand[ShowCommand]
    run: CliSubCommand[RunCommand]

    def cli_cmd(self) -> None:
        if not self.model_dump(exclude_none=True):
            # no option was provided, run by default
            RunCommand().cli_cmd()
        else:
            CliApp.run_subcommand(self)
