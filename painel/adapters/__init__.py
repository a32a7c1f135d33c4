"""
Adapters - Lado externo do hexágono.

Driving adapters (Django views e forms) que recebem requisições,
validam a entrada e acionam os Use Cases do Core.
"""
