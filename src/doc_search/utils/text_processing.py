"""Text normalization for indexing and querying.

Pipeline shared by index build and query time:
1. Lowercase
2. Replace anything outside [a-z0-9 whitespace] with a space
3. Split on whitespace
4. Drop single characters and stopwords
5. Strip common English suffixes
"""

import re
from typing import List

# Common English function words plus "get"/"getting", which prefix most
# DeviceInfo method names and carry no signal in queries.
STOPWORDS = frozenset([
    'the', 'a', 'an', 'is', 'are', 'was', 'were', 'be', 'been', 'being',
    'have', 'has', 'had', 'having', 'do', 'does', 'did', 'doing',
    'will', 'would', 'could', 'should', 'may', 'might', 'must', 'shall',
    'can', 'need', 'dare', 'ought', 'used',
    'to', 'of', 'in', 'for', 'on', 'with', 'at', 'by', 'from', 'as',
    'into', 'through', 'during', 'before', 'after', 'above', 'below',
    'between', 'under', 'about', 'against', 'via',
    'again', 'further', 'then', 'once', 'here', 'there',
    'when', 'where', 'why', 'how',
    'all', 'any', 'each', 'few', 'more', 'most', 'other', 'some', 'such',
    'no', 'nor', 'not', 'only', 'own', 'same', 'so', 'than', 'too', 'very',
    'just', 'also',
    'and', 'but', 'if', 'or', 'because', 'until', 'while', 'although',
    'this', 'that', 'these', 'those', 'am',
    'it', 'its', 'itself',
    'i', 'me', 'my', 'myself',
    'we', 'our', 'ours', 'ourselves',
    'you', 'your', 'yours', 'yourself', 'yourselves',
    'he', 'him', 'his', 'himself',
    'she', 'her', 'hers', 'herself',
    'they', 'them', 'their', 'theirs', 'themselves',
    'what', 'which', 'who', 'whom', 'whose',
    'get', 'getting',
])

# (suffix, minimum word length, replacement); first match wins.
SUFFIX_RULES = (
    ('ies', 5, 'y'),
    ('ing', 6, ''),
    ('ed', 5, ''),
    ('ly', 5, ''),
    ('s', 4, ''),
)

_NON_ALNUM = re.compile(r'[^a-z0-9\s]')


def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase terms without stopwords.

    Args:
        text: Input text

    Returns:
        Unstemmed terms in order of appearance

    Examples:
        >>> tokenize("How do I get the battery-level?")
        ['battery', 'level']
    """
    if not text:
        return []

    text = _NON_ALNUM.sub(' ', text.lower())
    return [
        term for term in text.split()
        if len(term) > 1 and term not in STOPWORDS
    ]


def stem(word: str) -> str:
    """
    Strip one common suffix from a lowercase word.

    Examples:
        >>> stem("batteries")
        'battery'
        >>> stem("charging")
        'charg'
        >>> stem("class")
        'class'
    """
    for suffix, min_length, replacement in SUFFIX_RULES:
        if word.endswith(suffix) and len(word) >= min_length:
            if suffix == 's' and word.endswith('ss'):
                continue
            return word[:-len(suffix)] + replacement
    return word


def normalize(text: str) -> List[str]:
    """Tokenize and stem text into search terms."""
    return [stem(term) for term in tokenize(text)]
