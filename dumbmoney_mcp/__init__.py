"""
MCP adapter for the DumbMoney reflection-token API.

Exposes a fixed catalog of tools that validate their input and forward to
https://dumbmoney.win.
"""
