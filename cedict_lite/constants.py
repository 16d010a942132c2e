"""
Constants shared across cedict-lite.

Tables are keyed by single code points and never mutated.
"""

from types import MappingProxyType

# ============================================================================
# Source & Limits
# ============================================================================

# Latest CC-CEDICT export from MDBG, gzip compressed (~4MB).
URL = "https://www.mdbg.net/chinese/export/cedict/cedict_1_0_ts_utf-8_mdbg.txt.gz"

# Line ending used when saving, matching the published file.
LINE_ENDING = "\r\n"

# Suffix that selects gzip on load and save.
GZIP_SUFFIX = ".gz"

# Seconds to wait for the download before giving up.
DOWNLOAD_TIMEOUT = 60

# Most entries returned by a meaning lookup.
MAX_RESULTS = 50

# Largest Levenshtein distance accepted for a meaning match.
MAX_DISTANCE = 10


# ============================================================================
# Tone Tables
# ============================================================================

# Vowels in the order they receive the tone mark.
# 'r' only exists for erhua and never changes.
TONE_VOWELS = "AaEeiOouür"

TONE_DIGITS = "12345"

TONE_MARKS = MappingProxyType({
    'A': "ĀÁǍÀA",
    'a': "āáǎàa",
    'E': "ĒÉĚÈE",
    'e': "ēéěèe",
    'i': "īíǐìi",
    'O': "ŌÓǑÒO",
    'o': "ōóǒòo",
    'u': "ūúǔùu",
    'ü': "ǖǘǚǜü",
    'r': "rrrrr",
})

# Diacritic vowel -> (base vowel, tone digit)
TONE_TO_NUMBER = MappingProxyType({
    'Ā': ("A", "1"), 'Á': ("A", "2"), 'Ǎ': ("A", "3"), 'À': ("A", "4"),
    'ā': ("a", "1"), 'á': ("a", "2"), 'ǎ': ("a", "3"), 'à': ("a", "4"),
    'Ē': ("E", "1"), 'É': ("E", "2"), 'Ě': ("E", "3"), 'È': ("E", "4"),
    'ē': ("e", "1"), 'é': ("e", "2"), 'ě': ("e", "3"), 'è': ("e", "4"),
    'ī': ("i", "1"), 'í': ("i", "2"), 'ǐ': ("i", "3"), 'ì': ("i", "4"),
    'Ō': ("O", "1"), 'Ó': ("O", "2"), 'Ǒ': ("O", "3"), 'Ò': ("O", "4"),
    'ō': ("o", "1"), 'ó': ("o", "2"), 'ǒ': ("o", "3"), 'ò': ("o", "4"),
    'ū': ("u", "1"), 'ú': ("u", "2"), 'ǔ': ("u", "3"), 'ù': ("u", "4"),
    'ü': ("u:", ""),
    'ǖ': ("u:", "1"), 'ǘ': ("u:", "2"), 'ǚ': ("u:", "3"), 'ǜ': ("u:", "4"),
})


# ============================================================================
# Punctuation
# ============================================================================

# Full-width CJK punctuation -> half-width latin
SYMBOLS = MappingProxyType({
    '？': "?",
    '！': "!",
    '：': ":",
    '。': ".",
    '・': ".",
    '，': ",",
    '；': ";",
    '（': "(",
    '）': ")",
    '【': "[",
    '】': "]",
})

# Marks that take no space before them after transliteration
CLOSING_SYMBOLS = "?.!:;,])"

# Marks that take no space after them
OPENING_SYMBOLS = "[("
