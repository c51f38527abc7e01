"""
Amino acid profile GraphQL type
"""

import strawberry


@strawberry.type
class AminoAcid:
    """Amino acid content of a food; null means not measured."""

    id: int
    tryptophan: float | None
    threonine: float | None
    isoleucine: float | None
    leucine: float | None
    lysine: float | None
    methionine: float | None
    cystine: float | None
    phenylalanine: float | None
    tyrosine: float | None
    valine: float | None
    arginine: float | None
    histidine: float | None
    alanine: float | None
    aspartic_acid: float | None
    glutamic_acid: float | None
    glycine: float | None
    proline: float | None
    serine: float | None
