"""API — camada de borda do endpoint de interações.

Responsabilidades:
- Receber requests do Discord (webhook de interações)
- Validar pré-condições de transporte e assinaturas
- Decodificar payloads para modelos internos
- Serializar respostas de interação

Subpastas:
- connectors/: modelos, assinatura e parsing por canal
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: serialização de respostas
- routes/: endpoints HTTP

NÃO PODE conter: roteamento de comandos ou orquestração de use cases.
"""
