"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Key: identificador textual inmutable, reusable como clave de CUALQUIER
     mapa, tabla de rutas o índice.
   • Sus dos variantes internas: StaticText (prestada) y OwnedText (propia).
   • Errores semánticos del núcleo (TextKeyError, UnsupportedKeySource).

🚫 ¿Qué NO pertenece aquí?
   • El contenedor que consume las claves (dict, tabla de rutas, caché).
   • Formatos de serialización o protocolos de red.
   • Observabilidad (→ infrastructure/observability.py).

💡 Principio preventivo:
   Si una operación necesita mutar la clave, probablemente NO pertenece a core/.
"""

from __future__ import annotations

from .exceptions import TextKeyError, UnsupportedKeySource
from .value_objects import EMPTY, Key, KeyData, OwnedText, StaticText, TextLike

__all__ = [
    "EMPTY",
    "Key",
    "KeyData",
    "OwnedText",
    "StaticText",
    "TextLike",
    "TextKeyError",
    "UnsupportedKeySource",
]
