"""
Substitution tables between BCMS Latin and Cyrillic.

REPLACEMENTS is the single source of truth (Latin -> Cyrillic).
FLIPPED_REPLACEMENTS is derived from it by swapping every pair in place,
so both directions always hold the same pairs at the same positions.

Order matters: substitution is plain substring replacement applied pair
by pair, so each digraph must come before the single letter it starts
with ("dž" before "d", "lj" before "l", "nj" before "n"). Otherwise the
single letter would be replaced first and the digraph would never match.
"""

SubstitutionTable = tuple[tuple[str, str], ...]


def mirrored(pairs: SubstitutionTable) -> tuple[SubstitutionTable, SubstitutionTable]:
    """Return ``pairs`` and its inverse, position for position."""
    forward = tuple((src, dst) for src, dst in pairs)
    reverse = tuple((dst, src) for src, dst in forward)
    return forward, reverse


REPLACEMENTS, FLIPPED_REPLACEMENTS = mirrored((
    ("a", "а"),
    ("b", "б"),
    ("c", "ц"),
    ("č", "ч"),
    ("ć", "ћ"),
    ("dž", "џ"),
    ("d", "д"),
    ("đ", "ђ"),
    ("e", "е"),
    ("f", "ф"),
    ("g", "г"),
    ("h", "х"),
    ("i", "и"),
    ("j", "j"),
    ("k", "к"),
    ("lj", "љ"),
    ("l", "л"),
    ("m", "м"),
    ("nj", "њ"),
    ("n", "н"),
    ("o", "о"),
    ("p", "п"),
    ("r", "р"),
    ("s", "с"),
    ("š", "ш"),
    ("t", "т"),
    ("u", "у"),
    ("v", "в"),
    ("z", "з"),
    ("ž", "ж"),
    ("A", "А"),
    ("B", "Б"),
    ("C", "Ц"),
    ("Č", "Ч"),
    ("Ć", "Ћ"),
    ("DŽ", "Џ"),
    ("D", "Д"),
    ("Đ", "Ђ"),
    ("E", "Е"),
    ("F", "Ф"),
    ("G", "Г"),
    ("H", "Х"),
    ("I", "И"),
    ("J", "J"),
    ("K", "К"),
    ("LJ", "Љ"),
    ("L", "Л"),
    ("M", "М"),
    ("NJ", "Њ"),
    ("N", "Н"),
    ("O", "О"),
    ("P", "П"),
    ("R", "Р"),
    ("S", "С"),
    ("Š", "Ш"),
    ("T", "Т"),
    ("U", "У"),
    ("V", "В"),
    ("Z", "З"),
    ("Ž", "Ж"),
))


def source_graphemes(table: SubstitutionTable) -> list[str]:
    """List the graphemes a table substitutes, in table order."""
    return [src for src, _ in table]
