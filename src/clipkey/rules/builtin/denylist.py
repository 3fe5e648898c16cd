"""Markers of placeholder values and common English fragments."""

# Any of these (case-insensitive) means the text is a stand-in, not a credential.
PLACEHOLDER_MARKERS = [
    "example",
    "test",
    "sample",
    "placeholder",
    "your_key_here",
    "password",
    "secret",
    "token",
    "apikey",
    "api_key",
    "lorem",
    "ipsum",
    "dummy",
    "mock",
    "fake",
    "xxxxxxxxxx",
    "123456789",
    "undefined",
    "null",
]

# Short words that rarely survive in machine-generated keys.
COMMON_WORDS = [
    "the", "and", "for", "are", "but", "not", "you", "all",
    "can", "her", "was", "one", "our", "out", "get", "has",
    "him", "his", "how", "man", "new", "now", "old", "see",
    "way", "who", "boy", "did", "its", "let", "put", "say",
    "she", "too", "use", "data", "user", "file", "name",
    "path", "temp", "admin", "config", "debug",
]
