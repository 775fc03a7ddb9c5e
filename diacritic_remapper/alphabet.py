# Top of the BMP Private Use Area; allocation goes down from here
STARTING_REPLACEMENT_CODEPOINT = 0xF8FF


class PlaceholderAlphabet:
    def __init__(self):
        """
        A "fake alphabet": each multi-char cluster gets one Private Use Area char.

        forward (placeholder -> cluster) is what the renderer needs and lives until reset().
        inverse (cluster -> placeholder) only deduplicates allocations while loading
        and can be dropped on its own with discard_dedup_index().
        """
        self.forward = {}
        self.inverse = {}
        self.next_codepoint = STARTING_REPLACEMENT_CODEPOINT

    def resolve(self, cluster):
        placeholder = self.inverse.get(cluster)
        if placeholder is None:
            placeholder = self._allocate(cluster)
        return placeholder

    def _allocate(self, cluster):
        placeholder = chr(self.next_codepoint)
        self.next_codepoint -= 1
        self.forward[placeholder] = cluster
        self.inverse[cluster] = placeholder
        return placeholder

    def expand(self, char):
        """
        Map a char as stored by the remapper back to what should be rendered.
        Placeholders give their cluster, everything else comes back unchanged.
        """
        return self.forward.get(char, char)

    def is_empty(self):
        return not self.forward

    def next_free_code(self):
        """Other private-use allocators may use U+E000 up to, but not including, this char."""
        return chr(self.next_codepoint)

    def discard_dedup_index(self):
        # Clusters seen again after this get fresh placeholders
        self.inverse.clear()

    def reset(self):
        self.forward.clear()
        self.inverse.clear()
        self.next_codepoint = STARTING_REPLACEMENT_CODEPOINT

    def cluster_length_stats(self):
        """
        One example cluster per cluster length in the dedup index, ordered by length.
        """
        examples = {}
        for cluster in self.inverse:
            examples.setdefault(len(cluster), cluster)
        return dict(sorted(examples.items()))

    def __len__(self):
        return len(self.forward)

    def __contains__(self, char):
        return char in self.forward
