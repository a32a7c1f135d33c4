"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, dependency-injector, etc.)
- 100% testável sem servidor HTTP
- Agnóstico a infraestrutura de armazenamento
"""
