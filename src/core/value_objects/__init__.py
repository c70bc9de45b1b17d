"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ParsedResponseValue : Resultat du parsing d'une valeur de reponse
- ResponseValueKind : Nature du resultat (VALUE, EMPTY, MALFORMED)
- parse_response_values : Parsing d'un tableau JSON de reponses
"""

from src.core.value_objects.response_value import (
    ParsedResponseValue,
    ResponseValueKind,
    parse_response_values,
)

__all__ = [
    "ParsedResponseValue",
    "ResponseValueKind",
    "parse_response_values",
]
