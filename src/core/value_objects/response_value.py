"""
Objet valeur pour les valeurs de reponse du questionnaire.

Les reponses sont stockees sous forme de tableau JSON encode en chaine
(ex: "[4]"). L'etape de parsing produit un type somme explicite :
- VALUE : un entier exploitable (premier element du tableau)
- EMPTY : tableau vide, reponse "N/A"
- MALFORMED : JSON invalide, element non convertible en entier 32 bits,
  ou premier element null

Tout le tableau est lu comme une liste d'entiers : un seul element
invalide rend la reponse MALFORMED. Un null est accepte hors de la
premiere position.
"""

import json
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

# Bornes d'un entier signe 32 bits
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ResponseValueKind(Enum):
    """Nature du resultat de parsing d'une valeur de reponse."""

    VALUE = "value"
    EMPTY = "empty"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ParsedResponseValue:
    """
    Resultat du parsing d'une valeur de reponse.

    Attributs:
        kind: VALUE, EMPTY ou MALFORMED
        value: L'entier extrait (uniquement pour VALUE)
        raw: La chaine d'origine, conservee pour les messages d'erreur
    """

    kind: ResponseValueKind
    value: Optional[int] = None
    raw: Optional[str] = None

    @classmethod
    def of(cls, value: int, raw: Optional[str] = None) -> "ParsedResponseValue":
        return cls(ResponseValueKind.VALUE, value, raw)

    @classmethod
    def empty(cls, raw: Optional[str] = None) -> "ParsedResponseValue":
        return cls(ResponseValueKind.EMPTY, None, raw)

    @classmethod
    def malformed(cls, raw: Optional[str] = None) -> "ParsedResponseValue":
        return cls(ResponseValueKind.MALFORMED, None, raw)

    @property
    def is_value(self) -> bool:
        return self.kind is ResponseValueKind.VALUE

    @property
    def is_empty(self) -> bool:
        return self.kind is ResponseValueKind.EMPTY

    @property
    def is_malformed(self) -> bool:
        return self.kind is ResponseValueKind.MALFORMED


def _coerce_int(element: Any) -> Optional[int]:
    """
    Convertit un element JSON en entier, None si impossible.

    Accepte les entiers, les flottants finis (tronques vers zero)
    et les chaines contenant un litteral entier. Les booleens et les
    valeurs hors des bornes 32 bits sont refuses.
    """
    value = None
    if isinstance(element, bool):
        return None
    if isinstance(element, int):
        value = element
    elif isinstance(element, float):
        if not math.isfinite(element):
            return None
        value = int(element)
    elif isinstance(element, str):
        text = element.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            value = int(text)
    if value is None or not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def parse_response_values(raw: Optional[str]) -> ParsedResponseValue:
    """
    Parse une valeur de reponse encodee en JSON.

    Chaque element doit etre convertible en entier 32 bits (null
    accepte sauf en premiere position). La valeur retenue est le
    premier element.

    Args:
        raw: Chaine JSON (ex: "[4]", "[]")

    Returns:
        ParsedResponseValue de nature VALUE, EMPTY ou MALFORMED
    """
    if raw is None:
        return ParsedResponseValue.malformed(raw)
    try:
        document = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return ParsedResponseValue.malformed(raw)

    if not isinstance(document, list):
        return ParsedResponseValue.malformed(raw)
    if not document:
        return ParsedResponseValue.empty(raw)

    values = []
    for element in document:
        value = None if element is None else _coerce_int(element)
        if element is not None and value is None:
            return ParsedResponseValue.malformed(raw)
        values.append(value)

    if values[0] is None:
        return ParsedResponseValue.malformed(raw)
    return ParsedResponseValue.of(values[0], raw)
