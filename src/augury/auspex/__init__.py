"""
Auspex - Wallet-side collaborators for Augury.

Supplies the sender address and the current network for a simulation.
`LocalWalletProvider` answers from an eth-account key and an
eth_chainId JSON-RPC call; any object with the same two methods works.

Uses httpx + eth-account instead of the heavyweight web3.py.
"""
