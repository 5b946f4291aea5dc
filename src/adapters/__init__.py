"""Adaptadores de infraestructura: HTTP (httpx) y sistema de ficheros."""
