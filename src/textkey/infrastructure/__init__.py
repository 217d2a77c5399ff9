"""📦 infrastructure/ — Logging y métricas (sin lógica de claves)."""
