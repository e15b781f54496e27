"""FastMCP server exposing the import attribute migration as tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from import_attr_migrator.core.ast import dump_tree as _dump_tree
from import_attr_migrator.core.ast import encode_text
from import_attr_migrator.core.batch import run_migration
from import_attr_migrator.core.discovery import expand_paths
from import_attr_migrator.core.migrate import migrate
from import_attr_migrator.settings import get_settings


def create_mcp_server() -> FastMCP:
    """Create a FastMCP server for migrating `assert` import attributes to `with`."""

    mcp = FastMCP(
        "import-attr-migrator",
        instructions="Rewrite legacy `assert` import attributes to `with` in JavaScript and TypeScript.",
    )

    @mcp.tool()
    async def migrate_code(code: str, language: str = "javascript") -> dict[str, Any]:
        """Migrate a source snippet and return the rewritten code."""
        result = migrate(encode_text(code), language)
        return {"output": result.output.decode("utf-8"), "replacements": result.replacements}

    @mcp.tool()
    async def migrate_paths(paths: list[str], write: bool = False) -> list[dict[str, Any]]:
        """Migrate files and directories on disk, optionally rewriting them in place."""
        settings = get_settings()
        files = expand_paths(paths, settings.extensions, skip_dirs=settings.skip_dirs)
        outcomes = await run_migration(files, write=write, concurrency=settings.concurrency)
        return [outcome.model_dump() for outcome in outcomes]

    @mcp.tool()
    async def dump_tree(code: str, language: str = "javascript") -> str:
        """Return the parsed S-expression of a source snippet."""
        return _dump_tree(encode_text(code), language)

    return mcp
