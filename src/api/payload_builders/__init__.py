"""Payload builders por canal — serialização de respostas para APIs externas.

Estrutura:
- discord/: respostas de interação (Pong, mensagem, ACK diferido)

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
