"""
Omen - Transaction simulation through Tenderly.

- client:   build, send and interpret a single simulate request
- render:   the fixed-shape text report
- provider: the `simulate_transaction` action for agent frameworks
"""
