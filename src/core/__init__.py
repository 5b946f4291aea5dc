"""Core: modelos, configuración, errores y orquestación (sin detalles de I/O)."""
