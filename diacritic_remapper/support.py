from .alphabet import PlaceholderAlphabet
from .char_classes import CONFIG_KEYS, CharClassifier
from .remapper import remap_clusters


class DiacriticSupport:
    def __init__(self):
        """
        Lets a one-char-one-glyph renderer draw scripts whose diacritics combine
        into glyphs Unicode has no codepoint for.

        Usage:
        - full_reset() when loading all languages starts over
        - begin_language(translations) once a language's translations are read;
          if it returns False the rest of that language can skip remapping
        - remap_clusters() on each translation, storing the result instead
        - end_language() when that language is done
        - the renderer then calls expand() for each char it has no cached glyph for

        The placeholder alphabet outlives end_language(); the classification
        table and the dedup index do not.
        """
        self.alphabet = PlaceholderAlphabet()
        self.classifier = CharClassifier()
        self.has_diacritics = False

    def full_reset(self):
        """Start over from scratch. Any text remapped before this is now garbage."""
        self.report_clusters()
        self.alphabet.reset()
        self.classifier.clear()
        self.has_diacritics = False

    def begin_language(self, translations):
        self.has_diacritics = self.classifier.configure(translations)
        return self.has_diacritics

    def no_diacritics(self):
        return not self.has_diacritics

    def remap_clusters(self, text):
        if not self.has_diacritics:
            raise RuntimeError("DiacriticSupport not set up properly for translation processing")
        return remap_clusters(text, self.classifier, self.alphabet)

    def remap_translations(self, translations):
        """
        Remap every value of a translation table, except the diacritic setup entries.
        Returns a new dict; values are copied unchanged for languages without diacritics.
        """
        if not self.has_diacritics:
            return dict(translations)

        remapped = {}
        for key, value in translations.items():
            if key in CONFIG_KEYS:
                remapped[key] = value
            else:
                remapped[key] = self.remap_clusters(value)
        return remapped

    def report_clusters(self):
        """Print what the current dedup index holds, one example per cluster length."""
        stats = self.alphabet.cluster_length_stats()
        if stats:
            print(f"Remapped {len(self.alphabet.inverse)} distinct clusters "
                  f"({len(self.alphabet)} placeholders in use).")
            for length, example in stats.items():
                print(f"Length {length} - example {example}")

    def end_language(self):
        self.report_clusters()
        self.alphabet.discard_dedup_index()
        self.classifier.clear()
        self.has_diacritics = False

    # Render side

    def expand(self, char):
        return self.alphabet.expand(char)

    def expand_text(self, text):
        return "".join(self.alphabet.expand(char) for char in text)

    def is_empty(self):
        return self.alphabet.is_empty()

    def next_free_code(self):
        return self.alphabet.next_free_code()
