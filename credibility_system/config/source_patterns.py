"""Text-signal configuration for source attribution and content factors.

Rules are ordered: the first rule to name a source decides its type, so
major agencies are recognised before the generic "according to X" phrases
that often name them too.

Confidence tiers are fixed per source type:
1. Major News Agency: High
2. Official Source: High
3. News Website: Medium
4. Everything else (social media, cited, local news): Low
"""

from typing import Dict, List

# Canonical spelling for named agencies, keyed by lowercase match
MAJOR_NEWS_AGENCIES: Dict[str, str] = {
    "reuters": "Reuters",
    "associated press": "Associated Press",
    "ap": "AP",
    "afp": "AFP",
    "bbc news": "BBC News",
    "bbc": "BBC",
    "cnn": "CNN",
    "fox news": "Fox News",
    "msnbc": "MSNBC",
    "al jazeera": "Al Jazeera",
    "the new york times": "The New York Times",
    "new york times": "New York Times",
    "washington post": "Washington Post",
    "the guardian": "The Guardian",
    "usa today": "USA Today",
    "wall street journal": "Wall Street Journal",
    "bloomberg": "Bloomberg",
    "npr": "NPR",
    "cbc news": "CBC News",
    "nbc news": "NBC News",
    "abc news": "ABC News",
    "cbs news": "CBS News",
}

# "AP" only counts in capitals; lowercase "ap" is not an agency
MAJOR_NEWS_AGENCY_PATTERN = (
    r"\b(?:Reuters|Associated Press|(?-i:AP)|AFP|BBC News|BBC|CNN|Fox News|MSNBC"
    r"|Al Jazeera|The New York Times|New York Times|Washington Post|The Guardian"
    r"|USA Today|Wall Street Journal|Bloomberg|NPR|CBC News|NBC News|ABC News"
    r"|CBS News)\b"
)

SOCIAL_MEDIA_PATTERN = (
    r"\b(?:reported|posted|shared|announced|stated|published|revealed|according to sources?)"
    r" (?:on|via|through|in) (Twitter|Facebook|Instagram|LinkedIn|YouTube|TikTok|X|Threads?)\b"
)

NEWS_WEBSITE_PATTERN = (
    r"\b(?:https?://)?(?:www\.)?(?:[a-z0-9-]+\.)+(?:news|com|org|gov|edu)\b(?:/[^\s]*)?"
)

CITED_SOURCE_PATTERN = (
    r"\b(?:according to|as reported by|sources from|cited by|confirmed by|stated by"
    r"|revealed by|announced by) ([^,.\n]+)"
)

OFFICIAL_SOURCE_PATTERNS: List[str] = [
    r"\b(?:officials from|spokesperson for|representatives of|statement from) ([^,.\n]+)",
    r"\b((?:government |federal |state |city |local )?(?:officials|authorities))"
    r" (?:have |had )?(?:said|confirmed|announced|stated|reported|told)\b",
]

LOCAL_NEWS_PATTERN = (
    r"\b(?:local|regional|city|county|state) (?:news|media|press|reports|sources) ([^,.\n]+)"
)

# Attribution words left at the start of a captured name
BOILERPLATE_PREFIX_PATTERN = (
    r"^(?:reported by|according to|sources from|reported on|posted on|via|through|in)\s+"
)

# Characters trimmed from both ends of a captured name
SOURCE_TRIM_CHARS = " \t\r\n,.\"'“”‘’"

# Citation markers; overlapping matches across patterns are all counted
CITATION_PATTERNS: List[str] = [
    r"according to",
    r"cited by",
    r"reported by",
    r"source:",
    r"\[\d+\]",
    r"\(\d{4}\)",
]

# Quoted spans; group 1 is the quote content
QUOTE_PATTERNS: List[str] = [
    r'"([^"]+)"',
    r"(?<!\w)'([^']+)'(?!\w)",
    r"“([^”]+)”",
    r"‘([^’]+)’",
]

# Characters trimmed from quote contents (trailing comma before the closing mark)
QUOTE_TRIM_CHARS = " \t\r\n,;:"

_MONTHS = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*"

DATE_PATTERNS: List[str] = [
    r"\b\d{1,2}/\d{1,2}/\d{2,4}\b",
    r"\b\d{4}-\d{2}-\d{2}\b",
    rf"\b{_MONTHS} \d{{1,2}},? \d{{4}}\b",
    rf"\b\d{{1,2}} {_MONTHS},? \d{{4}}\b",
]

STATISTIC_PATTERNS: List[str] = [
    r"\d+(?:\.\d+)?\s?%",
    r"\$\d[\d,]*(?:\.\d{2})?",
    r"\d+ (?:million|billion|trillion)",
    r"\b(?:increased by|decreased by|grew by)\b",
    r"\b(?:statistics show|according to data|survey shows)\b",
]

COMPLEX_WORD_PATTERN = (
    r"\b\w{10,}\b|\b(?:therefore|however|furthermore|consequently|nevertheless)\b"
)

# Complexity weights and normalisers
COMPLEXITY_WEIGHTS: Dict[str, float] = {
    "word_length": 0.3,
    "sentence_length": 0.3,
    "complex_words": 0.4,
}
WORD_LENGTH_NORMALISER = 8.0
SENTENCE_LENGTH_NORMALISER = 25.0
COMPLEX_WORD_DENSITY = 0.1
