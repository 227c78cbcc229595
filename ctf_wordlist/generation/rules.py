"""
Fixed rule catalog for candidate generation.

The tables are tuples so they cannot be modified at runtime.
"""

# Morphological suffixes appended to the base word
WORD_SUFFIXES = (
    "s", "es", "ing", "ed",
    "ly", "ful", "less", "ish",
    "er", "est", "tion", "ment",
    "ity", "ness", "ism", "ist",
    "ize", "ise", "ation", "ification",
    "ology", "graphy", "ics",
    "verse", "world", "net", "sys",
)

# Suffixes appended to every context combination
CTF_SUFFIXES = (
    "123", "!", "2024", "2025", "@", "#", "1", "01", "321", "1337",
    "2023", "2022", "2021", "2020", "00", "99", "$$",
    "admin", "user", "test", "flag", "ctf",
)

YEARS = ("2020", "2021", "2022", "2023", "2024", "2025", "1999", "2000", "1337")

KEYBOARD_PATTERNS = ("qwerty", "asdf", "123456", "password", "admin", "root")

CTF_TERMS = (
    "flag", "admin", "secret", "hidden", "key", "pass", "login", "auth",
    "token", "hash", "crypto", "encode", "decode", "ctf", "challenge",
    "pwn", "web", "misc", "forensics", "reverse", "binary",
)

PREFIXES = (
    "admin", "user", "test", "super", "root", "guest", "demo",
    "temp", "new", "old", "backup", "hidden", "secret",
)

NUMERIC_SUFFIX_RANGE = range(100)

# Inclusive character bounds for context words taking part in combinations
CONTEXT_WORD_MIN_LENGTH = 3
CONTEXT_WORD_MAX_LENGTH = 20

LEETSPEAK_TABLE = (
    ("a", "@"), ("A", "@"),
    ("e", "3"), ("E", "3"),
    ("i", "1"), ("I", "1"),
    ("o", "0"), ("O", "0"),
    ("s", "$"), ("S", "$"),
    ("t", "7"), ("T", "7"),
    ("l", "1"), ("L", "1"),
    ("g", "9"), ("G", "9"),
)
