"""
Hangul Alphabet

The fixed table of 128 readable Hangul syllables used by the codec. The
position of a syllable in the table is its digit value (0..127).

Syllables are grouped by initial consonant and were picked for natural
pronunciation: mostly open syllables or soft final consonants, and few
that read like loanwords.

Group sizes:
- ㄱ ㄴ ㄷ ㄹ ㅁ ㅂ: 9 each
- ㅅ ㅇ: 10 each
- ㅈ ㅊ ㅋ ㅌ ㅍ ㅎ: 9 each

Every syllable is a single precomposed code point, but lookups work on
grapheme clusters so that decomposed (NFD) input still resolves.
"""

import unicodedata
from itertools import product
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

import regex

from .config import ALPHABET_SIZE
from .errors import AlphabetError


# Extended grapheme cluster, one user-perceived character.
_GRAPHEME = regex.compile(r"\X")


ALPHABET_GROUPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("ㄱ", ("가", "간", "강", "개", "거", "고", "공", "구", "금")),
    ("ㄴ", ("나", "날", "남", "내", "너", "노", "눈", "늘", "니")),
    ("ㄷ", ("다", "달", "담", "대", "더", "도", "동", "두", "드")),
    ("ㄹ", ("라", "람", "랑", "래", "러", "로", "루", "리", "림")),
    ("ㅁ", ("마", "만", "말", "매", "머", "모", "무", "문", "미")),
    ("ㅂ", ("바", "반", "방", "배", "보", "봄", "부", "비", "빈")),
    ("ㅅ", ("사", "산", "상", "새", "서", "선", "소", "송", "수", "시")),
    ("ㅇ", ("아", "안", "양", "어", "연", "영", "오", "온", "우", "이")),
    ("ㅈ", ("자", "잔", "장", "재", "저", "조", "주", "중", "지")),
    ("ㅊ", ("차", "찬", "창", "채", "천", "초", "춘", "충", "치")),
    ("ㅋ", ("카", "칸", "코", "쿠", "크", "키", "캐", "케", "콩")),
    ("ㅌ", ("타", "탄", "태", "터", "토", "통", "투", "트", "티")),
    ("ㅍ", ("파", "판", "패", "포", "풍", "프", "피", "팔", "품")),
    ("ㅎ", ("하", "한", "해", "허", "호", "홍", "화", "후", "히")),
)

HANGUL_ALPHABET: Tuple[str, ...] = tuple(
    syllable for _, syllables in ALPHABET_GROUPS for syllable in syllables
)


def split_graphemes(text: str) -> List[str]:
    """
    Split text into grapheme clusters, each NFC-normalized.

    A cluster is what a reader sees as one character, however many code
    points it spans. Normalizing each cluster lets a decomposed syllable
    (leading consonant + vowel + optional final jamo) match its
    precomposed table entry.
    """
    return [unicodedata.normalize("NFC", g) for g in _GRAPHEME.findall(text)]


def validate_alphabet(symbols: Sequence[str]) -> None:
    """
    Check that a symbol table can back the codec.

    Raises:
        AlphabetError: if the table does not hold exactly 128 entries, has
            duplicates, has an entry that is not exactly one grapheme or is
            whitespace, or has two entries that fuse into one grapheme when
            written next to each other.
    """
    if len(symbols) != ALPHABET_SIZE:
        raise AlphabetError(
            f"Alphabet size is {len(symbols)}, expected {ALPHABET_SIZE}"
        )

    malformed = [
        (i, s)
        for i, s in enumerate(symbols)
        if not isinstance(s, str) or len(split_graphemes(s)) != 1
    ]
    if malformed:
        raise AlphabetError(
            f"Alphabet entries must be single graphemes, bad entries: {malformed}"
        )

    blank = [(i, s) for i, s in enumerate(symbols) if any(c.isspace() for c in s)]
    if blank:
        raise AlphabetError(f"Alphabet entries must not be whitespace: {blank}")

    seen: Dict[str, int] = {}
    duplicates = []
    for i, s in enumerate(symbols):
        key = unicodedata.normalize("NFC", s)
        if key in seen:
            duplicates.append((seen[key], i, s))
        else:
            seen[key] = i
    if duplicates:
        raise AlphabetError(f"Alphabet has duplicate entries: {duplicates}")

    # Encoded strings are plain concatenations, so every ordered pair must
    # split back into the same two symbols.
    fused = [
        (a, b)
        for a, b in product(symbols, repeat=2)
        if len(split_graphemes(a + b)) != 2
    ]
    if fused:
        raise AlphabetError(
            f"Alphabet entries merge when adjacent, e.g. {fused[:5]}"
        )


def build_reverse_map(symbols: Sequence[str]) -> Mapping[str, int]:
    """Build a read-only symbol -> index lookup."""
    reverse = {unicodedata.normalize("NFC", s): i for i, s in enumerate(symbols)}
    return MappingProxyType(reverse)

