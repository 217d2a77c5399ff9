# src/textkey/core/value_objects.py
"""
Key Value Object.

Arquitectura: Modular Monolith
Componente: Value Object (Core)
Responsabilidad: Representar una clave textual inmutable, comparable y hasheable,
con forma prestada (texto estático) o propia (texto construido en runtime).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterable, Union

from .exceptions import UnsupportedKeySource

# === 🧭 Protocolos Arquitectónicos ===
# ✅ CORE: No depende de nada externo.
# 🔒 Inmutabilidad: frozen=True en la clave y en ambas variantes.
# 🏷️ Unión etiquetada: StaticText | OwnedText, sin jerarquía de herencia.

logger = logging.getLogger(__name__)

# Pool de texto estático. Solo crece: lo que entra aquí vive todo el proceso.
_STATIC_POOL: dict[str, str] = {}


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def _pin(text: str) -> str:
    """Fija el texto en el pool estático y devuelve la instancia canónica."""
    if text not in _STATIC_POOL:
        logger.debug(f"Fijando texto estático en el pool: {text!r}")
    return _STATIC_POOL.setdefault(text, text)


@dataclass(frozen=True)
class StaticText:
    """
    Marcador de texto que vive durante todo el proceso (forma prestada).

    Construir un StaticText es la única vía hacia la forma prestada de Key:
    el texto queda fijado en el pool estático y nunca se libera.

    Invariantes:
    1. text es un str
    2. size es la longitud en bytes UTF-8 de text
    """

    text: str
    size: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validación de invariantes y fijado en el pool."""
        if not isinstance(self.text, str):
            raise UnsupportedKeySource(self.text)
        pinned = _pin(str(self.text))
        object.__setattr__(self, "text", pinned)
        object.__setattr__(self, "size", _utf8_len(pinned))

    def __reduce__(self):
        # Al deserializar se vuelve a fijar en el pool del proceso destino.
        return (StaticText, (self.text,))


@dataclass(frozen=True)
class OwnedText:
    """
    Texto propio de una clave (forma propia).

    Conserva la referencia al str recibido, sin copiarlo.
    """

    text: str
    size: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise UnsupportedKeySource(self.text)
        object.__setattr__(self, "size", _utf8_len(self.text))


KeyData = Union[StaticText, OwnedText]
TextLike = Union[str, StaticText, OwnedText, "Key"]

# Singleton de la clave vacía: Key() no reserva nada nuevo.
EMPTY = StaticText("")


def _text_of(value: object) -> str:
    """Extrae el contenido de cualquier valor textual aceptado."""
    if isinstance(value, str):
        return value
    if isinstance(value, (StaticText, OwnedText)):
        return value.text
    if isinstance(value, Key):
        return value.data.text
    raise UnsupportedKeySource(value)


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class Key:
    """
    Clave textual inmutable.

    La forma interna (prestada o propia) es un detalle de implementación:
    igualdad, hash, orden, longitud y representación dependen solo del contenido.

    Invariantes:
    1. El contenido no cambia nunca tras la construcción.
    2. Key() es la cadena vacía en forma prestada.
    3. hash(key) == hash(key.as_str())
    """

    data: KeyData = EMPTY

    def __post_init__(self):
        """Normaliza la entrada a una de las dos variantes."""
        data = self.data
        if isinstance(data, (StaticText, OwnedText)):
            return
        if isinstance(data, Key):
            object.__setattr__(self, "data", data.data)
        elif isinstance(data, str):
            object.__setattr__(self, "data", OwnedText(data))
        else:
            raise UnsupportedKeySource(data)

    # === Construcción ===

    @classmethod
    def from_static(cls, text: str) -> Key:
        """Forma prestada: el texto se fija para toda la vida del proceso."""
        return cls(StaticText(text))

    @classmethod
    def from_string(cls, text: str) -> Key:
        """Forma propia: toma el str recibido tal cual, sin copiarlo."""
        return cls(OwnedText(text))

    @classmethod
    def from_iter(cls, items: Iterable[TextLike]) -> Key:
        """
        Concatena en orden todos los elementos (caracteres, strings, claves).
        Siempre produce forma propia, incluso con cero o un elemento.
        """
        return cls(OwnedText("".join(_text_of(item) for item in items)))

    @classmethod
    def of(cls, value: TextLike) -> Key:
        """Convierte cualquier valor textual aceptado; una Key se devuelve tal cual."""
        if isinstance(value, Key):
            return value
        return cls(value)  # type: ignore[arg-type]

    def clone(self) -> Key:
        """
        Duplica la clave.
        Prestada: reutiliza el mismo StaticText en O(1).
        Propia: nueva variante propia con el mismo contenido.
        """
        if isinstance(self.data, StaticText):
            return Key(self.data)
        return Key(OwnedText(self.data.text))

    def __copy__(self) -> Key:
        return self.clone()

    def __deepcopy__(self, memo) -> Key:
        return self.clone()

    # === Inspección ===

    def is_borrowed(self) -> bool:
        return isinstance(self.data, StaticText)

    def is_owned(self) -> bool:
        return isinstance(self.data, OwnedText)

    def __len__(self) -> int:
        """Longitud en bytes UTF-8 del contenido. O(1)."""
        return self.data.size

    def is_empty(self) -> bool:
        return self.data.size == 0

    def as_str(self) -> str:
        """Vista de solo lectura del contenido. Nunca copia."""
        return self.data.text

    def as_bytes(self) -> bytes:
        return self.data.text.encode("utf-8", "surrogatepass")

    # === Igualdad, hash y orden ===

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Key, str)):
            return self.data.text == _text_of(other)
        return NotImplemented

    def __hash__(self) -> int:
        # La etiqueta de la variante nunca entra en el hash.
        return hash(self.data.text)

    def __lt__(self, other: object) -> bool:
        # El orden por code point coincide con el orden de bytes UTF-8.
        if isinstance(other, (Key, str)):
            return self.data.text < _text_of(other)
        return NotImplemented

    # === Conversiones ===

    def into_string(self) -> str:
        return self.data.text

    def __str__(self) -> str:
        return self.data.text

    def __format__(self, format_spec: str) -> str:
        return format(self.data.text, format_spec)

    def __repr__(self) -> str:
        return repr(self.data.text)
