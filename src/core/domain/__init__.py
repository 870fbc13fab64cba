"""Modelos y entidades del dominio.

Aquí viven los registros de producto, la cesta genérica y los errores de la
tienda. El dominio no conoce la CLI ni la configuración.
"""
