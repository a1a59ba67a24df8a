#!/usr/bin/env python3
"""Basic usage example for the IRC Minutes MCP server."""

import asyncio
import os

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

LOG = """13:00:01 <bob> Meeting: Example call
13:00:02 <bob> Chair: bob
13:00:03 <alice> present+
13:00:04 <bob> scribenick: alice
13:00:05 <alice> Topic: Welcome
13:00:06 <alice> bob: thanks for joining
13:00:07 <alice> ... short call today
13:00:08 <bob> RESOLVED: meet again next week
"""


async def run_example():
    """Convert a small log through the server."""
    log_file = "example_log.txt"
    with open(log_file, "w") as f:
        f.write(LOG)

    try:
        server_params = StdioServerParameters(command="python", args=["-m", "ircminutes"])

        async with stdio_client(server_params) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()

                tools = await session.list_tools()
                print("Available tools:")
                for tool in tools.tools:
                    print(f"  - {tool.name}: {tool.description}")

                print("\n--- Converting a log file ---")
                result = await session.call_tool(
                    "convert_transcript", {"source": log_file, "source_reference": "https://example.org/log"}
                )
                if result.structuredContent:
                    doc = result.structuredContent["content"][0]
                    print(f"  {doc['filename']} ({doc['status']})")
                    print(doc["text"])

                print("\n--- Getting transcript info ---")
                info = await session.call_tool("get_transcript_info", {"file_path": log_file})
                print(info.structuredContent or info.content)
    finally:
        if os.path.exists(log_file):
            os.remove(log_file)


if __name__ == "__main__":
    asyncio.run(run_example())
