"""
Utilidades de texto: recorte seguro, mayúscula inicial, codificación UTF-8
y eliminación de diacríticos.
"""
import unicodedata


def recortar_seguro(valor) -> str:
    """Aplica strip si es un string; cualquier otro valor devuelve ''."""
    return valor.strip() if isinstance(valor, str) else ''


def capitalizar_primera(texto: str) -> str:
    return texto[:1].upper() + texto[1:]


def codificar_utf8(texto: str) -> bytes:
    return texto.encode('utf-8')


def decodificar_utf8(datos: bytes) -> str:
    return datos.decode('utf-8')


def longitud_utf8(texto: str) -> int:
    """Cantidad de bytes que ocupa el texto codificado en UTF-8."""
    return len(codificar_utf8(texto))


def quitar_diacriticos(texto: str) -> str:
    """
    Reemplaza cada letra con diacrítico por su letra base (á -> a, Ñ -> N, ç -> c).
    Útil cuando un campo de base de datos cuenta bytes y no caracteres:
    un carácter con diacrítico puede ocupar más de un byte.
    """
    # NFKD + quita marcas diacríticas
    texto = unicodedata.normalize("NFKD", texto)
    texto = "".join(ch for ch in texto if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", texto)
