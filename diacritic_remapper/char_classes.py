from enum import Enum

from .translations import sanitize_entry

# Translation keys carrying the per-language diacritic setup
RANGE_KEY = "diacritics_joinable_range"
LEFT_KEY = "left_joining_diacritics"
RIGHT_KEY = "right_joining_diacritics"
JOINER_KEY = "left_and_right_joiners"

CONFIG_KEYS = (RANGE_KEY, LEFT_KEY, RIGHT_KEY, JOINER_KEY)


class CharClass(Enum):
    NONE = "none"
    BASE = "base"
    LEFT_JOINER = "left"
    RIGHT_JOINER = "right"
    LEFT_RIGHT_JOINER = "both"

    @property
    def expects_right_join(self):
        # Only these two invite the following char into the cluster
        return self in (CharClass.RIGHT_JOINER, CharClass.LEFT_RIGHT_JOINER)


class CharClassifier:
    def __init__(self):
        """
        Holds the character classification for the language currently loading.
        Empty until configure() sees at least one joiner.
        """
        self.char_class_map = {}
        self.base_range = None
        self.default_class = CharClass.NONE

    def configure(self, translations):
        """
        Build the classification table from a translation table.
        Returns True if the language needs diacritic remapping at all.

        Recognized keys (values are sanitized, see sanitize_entry):
        - diacritics_joinable_range: two chars 'ab', inclusive Base range a..b
        - left_joining_diacritics:   chars attaching to the preceding char
        - right_joining_diacritics:  chars attaching to the following char
        - left_and_right_joiners:    chars attaching on both sides
        """
        self.clear()

        range_entry = sanitize_entry(translations.get(RANGE_KEY))
        left = sanitize_entry(translations.get(LEFT_KEY))
        right = sanitize_entry(translations.get(RIGHT_KEY))
        joiners = sanitize_entry(translations.get(JOINER_KEY))

        if not (left or right or joiners):
            # Fast path: nothing in this language combines
            return False

        # A range that isn't exactly two chars (or runs backwards) counts as no range
        if len(range_entry) == 2 and range_entry[0] <= range_entry[1]:
            self.default_class = CharClass.NONE
            # Kept as bounds, a range may span most of Unicode
            self.base_range = (range_entry[0], range_entry[1])
        else:
            self.default_class = CharClass.BASE
            # Whitespace always ends a cluster
            self.char_class_map[' '] = CharClass.NONE

        for char in left:
            self.char_class_map[char] = CharClass.LEFT_JOINER
        for char in right:
            self.char_class_map[char] = CharClass.RIGHT_JOINER
        for char in joiners:
            self.char_class_map[char] = CharClass.LEFT_RIGHT_JOINER

        return True

    def classify(self, char):
        char_class = self.char_class_map.get(char)
        if char_class is not None:
            return char_class
        if self.base_range is not None and self.base_range[0] <= char <= self.base_range[1]:
            return CharClass.BASE
        return self.default_class

    def clear(self):
        self.char_class_map.clear()
        self.base_range = None
        self.default_class = CharClass.NONE
