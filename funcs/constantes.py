"""
Constantes compartidas para la validación y generación de BSN (elfproef) y
para los generadores de datos de prueba.
Este archivo centraliza patrones regex, pesos y límites para evitar
duplicación de código.
"""

# Patrón del identificador: solo dígitos, entre 7 y 9 (entradas parciales/heredadas)
PATRON_BSN = r'[0-9]{7,9}'

LONGITUD_MINIMA_BSN = 7
LONGITUD_MAXIMA_BSN = 9
LONGITUD_BSN = 9

# Peso fijo del último dígito en la prueba del once
PESO_DIGITO_CONTROL = -1

MODULO_ELFPROEF = 11

# Pesos del generador para los 8 primeros dígitos (9..2)
PESOS_GENERADOR = (9, 8, 7, 6, 5, 4, 3, 2)

# Rango de los dígitos aleatorios del generador (el 0 queda excluido)
DIGITO_ALEATORIO_MIN = 1
DIGITO_ALEATORIO_MAX = 9

# Límites de la API
MAX_CANTIDAD_BSN = 1000
MAX_PARRAFOS = 50
MAX_FRASES = 50
MAX_PALABRAS = 100

# Generación de texto de prueba
LONGITUD_PALABRA_MIN = 5
LONGITUD_PALABRA_MAX = 10
CARACTERES_ALFANUMERICOS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789'

# Valores que el entorno de scripting trata como "sin valor"
VALORES_INVALIDOS = {"undefined", "null"}
