"""
Adapter Django: API JSON e validação de entrada.
"""
