from .char_classes import CharClass

# What the automaton does with one incoming char
FLUSH_APPEND = "flush_append"          # close the cluster, char goes straight to output
FLUSH_ACCUMULATE = "flush_accumulate"  # close the cluster unless it invited a join, then start/extend
ACCUMULATE = "accumulate"              # always join whatever is in progress


def action_for(char_class):
    """
    The whole transition table.
    Left-attaching classes never flush; Base and RightJoiner flush unless the
    previous char expects a right join; None always flushes and bypasses the cluster.
    """
    if char_class is CharClass.NONE:
        return FLUSH_APPEND
    elif char_class is CharClass.BASE or char_class is CharClass.RIGHT_JOINER:
        return FLUSH_ACCUMULATE
    elif char_class is CharClass.LEFT_JOINER or char_class is CharClass.LEFT_RIGHT_JOINER:
        return ACCUMULATE
    raise ValueError(f"Unknown char class: {char_class}")


class LineData:
    def __init__(self, classifier, alphabet):
        self.classifier = classifier
        self.alphabet = alphabet
        self.output = []
        self.accumulator = []

    def expects_join(self):
        # Only the last accumulated char decides
        return bool(self.accumulator) and self.classifier.classify(self.accumulator[-1]).expects_right_join

    def flush(self):
        if len(self.accumulator) <= 1:
            self.output.extend(self.accumulator)
        else:
            self.output.append(self.alphabet.resolve("".join(self.accumulator)))
        self.accumulator = []

    def accumulate(self, char):
        self.accumulator.append(char)

    def flush_accumulate(self, char):
        if not self.expects_join():
            self.flush()
        self.accumulator.append(char)

    def flush_append(self, char):
        self.flush()
        self.output.append(char)

    def process(self, char):
        action = action_for(self.classifier.classify(char))
        if action == FLUSH_APPEND:
            self.flush_append(char)
        elif action == FLUSH_ACCUMULATE:
            self.flush_accumulate(char)
        else:
            self.accumulate(char)

    def result(self):
        self.flush()
        return "".join(self.output)


def remap_clusters(text, classifier, alphabet):
    """
    Replace every multi-char cluster in text with its placeholder from alphabet.
    Single chars, and anything the classifier calls NONE, pass through as-is.
    """
    data = LineData(classifier, alphabet)
    for char in text:
        data.process(char)
    return data.result()
