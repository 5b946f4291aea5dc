"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python -m main` desde `src/` durante desarrollo.
- Mantiene un entrypoint simple además del script `cf-zone-export`.
"""

from __future__ import annotations

import sys

# Rich escribe caracteres de caja (tablas) que no existen en cp1252.
# Los nombres de zona llegan en punycode, no dependen de esto.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
