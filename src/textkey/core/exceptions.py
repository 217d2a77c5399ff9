# src/textkey/core/exceptions.py
"""
Excepciones del núcleo de claves.

Arquitectura: Core Layer
Responsabilidad: Definir errores semánticos independientes de cualquier contenedor.
"""


class TextKeyError(Exception):
    """Clase base para errores del paquete textkey."""

    pass


class UnsupportedKeySource(TextKeyError, TypeError):
    """Se intentó construir una clave a partir de un valor que no es texto."""

    def __init__(self, value: object):
        self.source_type = type(value).__name__
        super().__init__(
            f"No se puede construir una Key a partir de '{self.source_type}': "
            "se esperaba str, StaticText, OwnedText o Key"
        )
