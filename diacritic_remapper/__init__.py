from .alphabet import PlaceholderAlphabet
from .char_classes import CharClass, CharClassifier
from .remapper import remap_clusters
from .support import DiacriticSupport
from .translations import read_translation_file, sanitize_entry
