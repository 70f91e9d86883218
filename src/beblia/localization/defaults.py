"""Built-in English localization table.

66 books in Protestant canon order: 39 Old Testament (1-39) followed by
27 New Testament (40-66). The first abbreviation of each book is the
display form; multi-word books use a dotted first abbreviation so the
serialized text form parses back to the same entry.
"""

from __future__ import annotations

OLD_TESTAMENT_COUNT = 39
NEW_TESTAMENT_COUNT = 27

# (number, full name, abbreviations)
DEFAULT_BOOKS: list[tuple[int, str, list[str]]] = [
    # Old Testament
    (1, "Genesis", ["Gen.", "Ge.", "Gn."]),
    (2, "Exodus", ["Ex.", "Exod.", "Exo."]),
    (3, "Leviticus", ["Lev.", "Le.", "Lv."]),
    (4, "Numbers", ["Num.", "Nu.", "Nm.", "Nb."]),
    (5, "Deuteronomy", ["Deut.", "De.", "Dt."]),
    (6, "Joshua", ["Josh.", "Jos.", "Jsh."]),
    (7, "Judges", ["Judg.", "Jdg.", "Jg.", "Jdgs."]),
    (8, "Ruth", ["Ruth", "Rth.", "Ru."]),
    (9, "1 Samuel", ["1 Sam.", "1 Sm.", "1 Sa.", "I Sam.", "1Sam."]),
    (10, "2 Samuel", ["2 Sam.", "2 Sm.", "2 Sa.", "II Sam.", "2Sam."]),
    (11, "1 Kings", ["1 Kgs.", "1 Ki.", "I Kgs.", "1Kgs."]),
    (12, "2 Kings", ["2 Kgs.", "2 Ki.", "II Kgs.", "2Kgs."]),
    (13, "1 Chronicles", ["1 Chron.", "1 Chr.", "1 Ch.", "I Chron."]),
    (14, "2 Chronicles", ["2 Chron.", "2 Chr.", "2 Ch.", "II Chron."]),
    (15, "Ezra", ["Ezra", "Ezr.", "Ez."]),
    (16, "Nehemiah", ["Neh.", "Ne."]),
    (17, "Esther", ["Esth.", "Est.", "Es."]),
    (18, "Job", ["Job", "Jb."]),
    (19, "Psalms", ["Ps.", "Psalm", "Pslm.", "Psa.", "Psm.", "Pss."]),
    (20, "Proverbs", ["Prov.", "Pro.", "Prv.", "Pr."]),
    (21, "Ecclesiastes", ["Eccles.", "Eccl.", "Ecc.", "Ec.", "Qoh."]),
    (
        22,
        "Song of Solomon",
        ["Song.", "Song of Songs", "SOS", "So.", "Canticles", "Cant."],
    ),
    (23, "Isaiah", ["Isa.", "Is."]),
    (24, "Jeremiah", ["Jer.", "Je.", "Jr."]),
    (25, "Lamentations", ["Lam.", "La."]),
    (26, "Ezekiel", ["Ezek.", "Eze.", "Ezk."]),
    (27, "Daniel", ["Dan.", "Da.", "Dn."]),
    (28, "Hosea", ["Hos.", "Ho."]),
    (29, "Joel", ["Joel", "Jl."]),
    (30, "Amos", ["Amos", "Am."]),
    (31, "Obadiah", ["Obad.", "Ob."]),
    (32, "Jonah", ["Jonah", "Jnh.", "Jon."]),
    (33, "Micah", ["Mic.", "Mc."]),
    (34, "Nahum", ["Nah.", "Na."]),
    (35, "Habakkuk", ["Hab.", "Hb."]),
    (36, "Zephaniah", ["Zeph.", "Zep.", "Zp."]),
    (37, "Haggai", ["Hag.", "Hg."]),
    (38, "Zechariah", ["Zech.", "Zec.", "Zc."]),
    (39, "Malachi", ["Mal.", "Ml."]),
    # New Testament
    (40, "Matthew", ["Matt.", "Mt.", "Mat."]),
    (41, "Mark", ["Mark", "Mrk.", "Mk.", "Mr."]),
    (42, "Luke", ["Luke", "Luk.", "Lk."]),
    (43, "John", ["John", "Jn.", "Jhn."]),
    (44, "Acts", ["Acts", "Ac."]),
    (45, "Romans", ["Rom.", "Ro.", "Rm."]),
    (46, "1 Corinthians", ["1 Cor.", "1 Co.", "I Cor.", "1Cor."]),
    (47, "2 Corinthians", ["2 Cor.", "2 Co.", "II Cor.", "2Cor."]),
    (48, "Galatians", ["Gal.", "Ga."]),
    (49, "Ephesians", ["Eph.", "Ephes."]),
    (50, "Philippians", ["Phil.", "Php.", "Pp."]),
    (51, "Colossians", ["Col.", "Co."]),
    (52, "1 Thessalonians", ["1 Thess.", "1 Th.", "I Thess.", "1Thess."]),
    (53, "2 Thessalonians", ["2 Thess.", "2 Th.", "II Thess.", "2Thess."]),
    (54, "1 Timothy", ["1 Tim.", "1 Ti.", "I Tim.", "1Tim."]),
    (55, "2 Timothy", ["2 Tim.", "2 Ti.", "II Tim.", "2Tim."]),
    (56, "Titus", ["Titus", "Tit.", "Ti."]),
    (57, "Philemon", ["Philem.", "Phm.", "Pm."]),
    (58, "Hebrews", ["Heb."]),
    (59, "James", ["Jas.", "Jm."]),
    (60, "1 Peter", ["1 Pet.", "1 Pe.", "1 Pt.", "I Pet.", "1Pet."]),
    (61, "2 Peter", ["2 Pet.", "2 Pe.", "2 Pt.", "II Pet.", "2Pet."]),
    (62, "1 John", ["1 Jn.", "1 Jhn.", "I Jn.", "1Jn."]),
    (63, "2 John", ["2 Jn.", "2 Jhn.", "II Jn.", "2Jn."]),
    (64, "3 John", ["3 Jn.", "3 Jhn.", "III Jn.", "3Jn."]),
    (65, "Jude", ["Jude", "Jud.", "Jd."]),
    (66, "Revelation", ["Rev.", "Re.", "Rv.", "Apoc."]),
]
