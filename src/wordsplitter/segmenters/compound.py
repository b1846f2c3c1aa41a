"""Dictionary-based compound word splitter."""

from typing import Dict, List, Optional, Tuple

from ..core.abc import Lexicon, Logger
from ..core.types import SplitResult

Tupel = Tuple[str, ...]

class CompoundSplitter:
    """
    Splits a compound word into its smallest dictionary parts.

    The word is scanned from left to right: the shortest prefix that is a
    word (optionally after stripping a connecting character such as the
    German "s") is accepted if the remainder can be split as well. The first
    prefix length that yields a full split wins.

    In lenient mode two fallbacks cut unknown fragments off the start or the
    end of the word when no full split exists. In strict mode every part is a
    dictionary word or the word is returned unsplit.
    """

    def __init__(self, lexicon: Lexicon, *, hide_connecting_characters: bool = True,
                 strict_mode: bool = False, max_word_length: Optional[int] = None,
                 logger: Optional[Logger] = None):
        """
        Initialize splitter with a lexicon and matching policy.

        Args:
            lexicon: Word list with minimum word length and connecting characters
            hide_connecting_characters: Strip matched connecting characters from parts
            strict_mode: Only emit parts that are dictionary words
            max_word_length: Words longer than this are returned unsplit (no limit if None)
            logger: Optional structured logger
        """
        self.lexicon = lexicon
        self.hide_connecting_characters = hide_connecting_characters
        self.strict_mode = strict_mode
        self.max_word_length = max_word_length
        self.log = logger

    def split_word(self, word: Optional[str]) -> List[str]:
        """
        Split a compound word into its parts.

        If the word cannot be split, a single part holding the original
        (untrimmed) word is returned. ``None`` yields an empty list.

        Args:
            word: A single word without punctuation

        Returns:
            List[str]: Parts in order of appearance
        """
        return self.analyze(word).parts

    def analyze(self, word: Optional[str]) -> SplitResult:
        """
        Split a word and report which strategy produced the parts.

        Args:
            word: A single word without punctuation

        Returns:
            SplitResult: Parts and the method that found them
        """
        if word is None:
            return SplitResult(word=None, parts=[], method="empty")

        s = word.strip()
        if len(s) < 2:
            return SplitResult(word=word, parts=[s], method="short")

        if self.max_word_length is not None and len(s) > self.max_word_length:
            if self.log:
                self.log.warn("word_too_long", word=s, length=len(s), limit=self.max_word_length)
            return SplitResult(word=word, parts=[word], method="too_long")

        memo: Dict[str, Optional[Tupel]] = {}

        tupel = self._find_tupel(s, memo)
        method = "tupel"
        if tupel is None and not self.strict_mode:
            tupel = self._truncate_split(s, memo)
            method = "truncate"
        if tupel is None and not self.strict_mode:
            tupel = self._truncate_split_reverse(s, memo)
            method = "truncate_reverse"

        if tupel is None:
            if self.log:
                self.log.info("unsplit", word=s, strict=self.strict_mode)
            return SplitResult(word=word, parts=[word], method="unsplit")

        if method != "tupel" and self.log:
            self.log.info("fallback_split", word=s, method=method, parts=list(tupel))
        return SplitResult(word=word, parts=list(tupel), method=method)

    def is_word(self, s: Optional[str]) -> bool:
        """Check if a string is a dictionary word of at least the minimum length."""
        if s is None:
            return False
        s = s.strip()
        if len(s) < self.lexicon.minimum_word_length:
            return False
        return s.lower() in self.lexicon

    def strip_connecting_characters(self, s: str) -> str:
        """Remove the first matching connecting character suffix, e.g. the 's' in 'erhebungs'."""
        lowered = s.lower()
        for conn in self.lexicon.connecting_characters:
            if lowered.endswith(conn.lower()):
                return s[:len(s) - len(conn)]
        return s

    def _accept_prefix(self, left: str) -> Optional[str]:
        """The part to emit for a prefix, or None if the prefix is no word."""
        left_cleaned = self.strip_connecting_characters(left)
        if self.is_word(left_cleaned):
            return left_cleaned if self.hide_connecting_characters else left
        if self.is_word(left):
            return left
        return None

    def _accept_whole(self, s: str) -> Optional[Tupel]:
        """Accept s as a single final word, or None."""
        s_is_word = self.is_word(s)
        cleaned = self.strip_connecting_characters(s)
        if not s_is_word and not self.is_word(cleaned):
            return None
        if self.hide_connecting_characters and not s_is_word:
            return (cleaned,)
        return (s,)

    def _find_tupel(self, s: str, memo: Dict[str, Optional[Tupel]]) -> Optional[Tupel]:
        """
        Split s into two or more words, or accept it as one final word.

        Depth-first over prefix lengths with an explicit stack, so long words
        do not hit the interpreter's recursion limit. Each frame holds
        [substring, next prefix length, part accepted for the pending remainder].
        Finished substrings are stored in memo.

        Returns:
            Optional[Tupel]: The parts, or None if s cannot be split
        """
        if len(s) < 2:
            return None
        if s in memo:
            return memo[s]

        stack = [[s, 1, None]]
        child: Optional[Tupel] = None

        while stack:
            frame = stack[-1]
            t, i, part = frame

            if part is not None and child is not None:
                found = (part,) + child
            else:
                found = None
                while i <= len(t):
                    part = self._accept_prefix(t[:i])
                    right = t[i:]
                    i += 1
                    if part is None or len(right) < 2:
                        continue
                    if right not in memo:
                        frame[1], frame[2] = i, part
                        stack.append([right, 1, None])
                        break
                    if memo[right] is not None:
                        found = (part,) + memo[right]
                        break
                else:
                    found = self._accept_whole(t)

                if stack[-1] is not frame:
                    continue

            memo[t] = found
            stack.pop()
            child = found

        return memo[s]

    def _truncate_split(self, s: str, memo: Dict[str, Optional[Tupel]]) -> Optional[Tupel]:
        """Cut an unknown fragment off the start of the word."""
        for i in range(len(s) - 2):
            tail = self._find_tupel(s[i:], memo)
            if tail is not None:
                return (s[:i],) + tail
        return None

    def _truncate_split_reverse(self, s: str, memo: Dict[str, Optional[Tupel]]) -> Optional[Tupel]:
        """Cut an unknown fragment off the end of the word."""
        for i in range(len(s) - 1, 1, -1):
            head = self._find_tupel(s[:i], memo)
            if head is not None:
                return head + (s[i:],)
        return None
