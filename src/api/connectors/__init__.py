"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- discord/: Interactions endpoint (assinatura Ed25519 + modelos)

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
