"""Точка входа для `fastmcp run server.py:app`."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")

from brave_mcp import app, config  # noqa: E402

config.reload_from_env()
config.configure_logging()


__all__ = ["app"]
