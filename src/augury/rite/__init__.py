"""
Rite - Command implementations for the Augury CLI.

Each module corresponds to a top-level CLI command:
- simulate: Preview a transaction through Tenderly
- encode:   Build calldata from a function signature
"""
